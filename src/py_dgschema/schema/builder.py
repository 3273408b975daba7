# -*- coding: utf-8 -*-
""" Build the owned schema model from parsed definitions. """

from typing import Dict, List, Mapping, Optional, Sequence, Union

from graphql.language import (
    DefinitionNode,
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
)

from ..lang import Document
from .scalars import BUILTIN_SCALARS, storage_types
from .schema import Schema
from .types import (
    AppliedDirective,
    Argument,
    Directive,
    EnumType,
    Field,
    GraphQLType,
    InputObjectType,
    ListType,
    NamedType,
    NonNullType,
    ObjectType,
    ScalarType,
    TypeDefinition,
)

QUERY_TYPE_NAME = "Query"
MUTATION_TYPE_NAME = "Mutation"


def _description(node: DefinitionNode) -> Optional[str]:
    desc = getattr(node, "description", None)
    return desc.value if desc is not None else None


class ASTSchemaBuilder:
    """ Build declarations from graphql-core definition nodes.

    Type references are kept by name: this does not check that referenced
    types exist, which is the job of SDL validation.

    Args:
        storage_types: Mapping ``scalar name -> storage type`` used to annotate
            scalar declarations.
    """

    __slots__ = ("_storage_types",)

    def __init__(self, storage_types: Mapping[str, str]):
        self._storage_types = storage_types

    def build_type_ref(self, type_node: TypeNode) -> GraphQLType:
        if isinstance(type_node, NonNullTypeNode):
            return NonNullType(self.build_type_ref(type_node.type))
        elif isinstance(type_node, ListTypeNode):
            return ListType(self.build_type_ref(type_node.type))
        elif isinstance(type_node, NamedTypeNode):
            return NamedType(type_node.name.value)
        raise TypeError("Unexpected type node %r" % type_node)

    def build_argument(self, node: InputValueDefinitionNode) -> Argument:
        return Argument(
            node.name.value,
            self.build_type_ref(node.type),
            description=_description(node),
            node=node,
        )

    def build_field(
        self, node: Union[FieldDefinitionNode, InputValueDefinitionNode]
    ) -> Field:
        return Field(
            node.name.value,
            self.build_type_ref(node.type),
            args=[
                self.build_argument(arg)
                for arg in getattr(node, "arguments", None) or ()
            ],
            directives=[
                AppliedDirective.from_node(d) for d in node.directives or ()
            ],
            description=_description(node),
            node=node,
        )

    def build_object_type(self, node: ObjectTypeDefinitionNode) -> ObjectType:
        return ObjectType(
            node.name.value,
            fields=[self.build_field(f) for f in node.fields or ()],
            directives=[
                AppliedDirective.from_node(d) for d in node.directives or ()
            ],
            description=_description(node),
            node=node,
        )

    def build_input_object_type(
        self, node: InputObjectTypeDefinitionNode
    ) -> InputObjectType:
        return InputObjectType(
            node.name.value,
            fields=[self.build_field(f) for f in node.fields or ()],
            directives=[
                AppliedDirective.from_node(d) for d in node.directives or ()
            ],
            description=_description(node),
            node=node,
        )

    def build_enum_type(self, node: EnumTypeDefinitionNode) -> EnumType:
        return EnumType(
            node.name.value,
            [v.name.value for v in node.values or ()],
            description=_description(node),
            node=node,
        )

    def build_scalar_type(self, node: ScalarTypeDefinitionNode) -> ScalarType:
        return ScalarType(
            node.name.value,
            storage_type=self._storage_types.get(node.name.value),
            description=_description(node),
            node=node,
        )

    def build_directive(self, node: DirectiveDefinitionNode) -> Directive:
        return Directive(
            node.name.value,
            [loc.value for loc in node.locations],
            args=[self.build_argument(arg) for arg in node.arguments or ()],
            description=_description(node),
            node=node,
        )

    def build_definition(self, node: DefinitionNode) -> TypeDefinition:
        if isinstance(node, ObjectTypeDefinitionNode):
            return self.build_object_type(node)
        elif isinstance(node, InputObjectTypeDefinitionNode):
            return self.build_input_object_type(node)
        elif isinstance(node, EnumTypeDefinitionNode):
            return self.build_enum_type(node)
        elif isinstance(node, ScalarTypeDefinitionNode):
            return self.build_scalar_type(node)
        raise TypeError("Unsupported definition %s" % type(node).__name__)


def build_schema(
    document: Union[Document, DocumentNode],
    scalars: Sequence[ScalarType] = BUILTIN_SCALARS,
    roots: bool = False,
) -> Schema:
    """ Build a :class:`~py_dgschema.schema.Schema` from a parsed document.

    The document is expected to have gone through validation: definitions
    are converted one to one and duplicate names are not supported.

    Args:
        document: Parsed document
        scalars: Scalar catalog providing the storage types
        roots: If ``True``, the ``Query`` and ``Mutation`` object type
            definitions are used as the root types instead of being added to
            the type table. This is used to load canonical schemas.

    Returns:
        Schema: Schema without derived types
    """
    builder = ASTSchemaBuilder(storage_types(tuple(scalars)))

    types = []  # type: List[TypeDefinition]
    directives = []  # type: List[Directive]
    root_types = {}  # type: Dict[str, ObjectType]

    for definition in document.definitions:
        if isinstance(definition, DirectiveDefinitionNode):
            directives.append(builder.build_directive(definition))
            continue

        built = builder.build_definition(definition)
        if (
            roots
            and isinstance(built, ObjectType)
            and built.name in (QUERY_TYPE_NAME, MUTATION_TYPE_NAME)
        ):
            root_types[built.name] = built
        else:
            types.append(built)

    return Schema(
        types,
        directives,
        query_type=root_types.get(QUERY_TYPE_NAME),
        mutation_type=root_types.get(MUTATION_TYPE_NAME),
    )
