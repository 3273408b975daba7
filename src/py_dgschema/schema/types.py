# -*- coding: utf-8 -*-

from typing import Any, Callable, Dict, List, Optional, Sequence

from graphql.language import (
    DirectiveDefinitionNode,
    DirectiveNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    ValueNode,
)

_UNSET = object()


class GraphQLType:
    """
    Base class for type references.

    Type references are the wrapping types (:class:`ListType` and
    :class:`NonNullType`) and :class:`NamedType`, which points to a
    declaration by name. They compare structurally.
    """

    __slots__ = ()

    def __eq__(self, rhs: Any) -> bool:
        return (
            self.__class__ == rhs.__class__
            and self._key() == rhs._key()  # type: ignore
        )

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._key()))

    def _key(self) -> Any:
        raise NotImplementedError()

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self)


class NamedType(GraphQLType):
    """
    Reference to a named type declaration.

    Args:
        name: Referenced type name
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def _key(self) -> Any:
        return self.name

    def __str__(self) -> str:
        return self.name


class ListType(GraphQLType):
    """
    List wrapping type.

    Args:
        type_: Wrapped type
    """

    __slots__ = ("type",)

    def __init__(self, type_: GraphQLType):
        self.type = type_

    def _key(self) -> Any:
        return self.type

    def __str__(self) -> str:
        return "[%s]" % self.type


class NonNullType(GraphQLType):
    """
    Non nullable wrapping type.

    Args:
        type_: Wrapped type
    """

    __slots__ = ("type",)

    def __init__(self, type_: GraphQLType):
        if isinstance(type_, NonNullType):
            raise ValueError("Cannot wrap NonNullType twice")
        self.type = type_

    def _key(self) -> Any:
        return self.type

    def __str__(self) -> str:
        return "%s!" % self.type


def unwrap_type(type_: GraphQLType) -> NamedType:
    """ Recursively extract the named type from a potentially wrapping type.

    >>> unwrap_type(NonNullType(ListType(NonNullType(NamedType("Int")))))
    NamedType(Int)
    """
    if isinstance(type_, (ListType, NonNullType)):
        return unwrap_type(type_.type)
    assert isinstance(type_, NamedType)
    return type_


def nullable_type(type_: GraphQLType) -> GraphQLType:
    """ Extract nullable type from a potentially non nulllable one.

    >>> nullable_type(NonNullType(NamedType("Int")))
    NamedType(Int)

    >>> nullable_type(NonNullType(ListType(NonNullType(NamedType("Int")))))
    ListType([Int!])
    """
    if isinstance(type_, NonNullType):
        return type_.type
    return type_


def is_list_type(type_: GraphQLType) -> bool:
    return isinstance(nullable_type(type_), ListType)


def map_named_type(
    type_: GraphQLType, fn: Callable[[NamedType], NamedType]
) -> GraphQLType:
    """ Rebuild a type reference, replacing the inner named type and keeping
    all wrapping types.

    >>> str(map_named_type(
    ...     NonNullType(ListType(NamedType("Person"))),
    ...     lambda t: NamedType(t.name + "Ref"),
    ... ))
    '[PersonRef]!'
    """
    if isinstance(type_, NonNullType):
        return NonNullType(map_named_type(type_.type, fn))
    elif isinstance(type_, ListType):
        return ListType(map_named_type(type_.type, fn))
    assert isinstance(type_, NamedType)
    return fn(type_)


def copy_type(type_: GraphQLType) -> GraphQLType:
    """ Independent copy of a type reference. """
    return map_named_type(type_, lambda t: NamedType(t.name))


class AppliedDirective:
    """
    Usage of a directive on a field.

    Args:
        name: Directive name
        args: Argument values by name, as parsed value nodes
        node: Source node

    Attributes:
        name (str): Directive name
        args (Dict[str, graphql.language.ValueNode]): Argument values by name
        node (Optional[graphql.language.DirectiveNode]): Source node
    """

    __slots__ = ("name", "args", "node")

    def __init__(
        self,
        name: str,
        args: Optional[Dict[str, ValueNode]] = None,
        node: Optional[DirectiveNode] = None,
    ):
        self.name = name
        self.args = dict(args) if args else {}  # type: Dict[str, ValueNode]
        self.node = node

    @classmethod
    def from_node(cls, node: DirectiveNode) -> "AppliedDirective":
        return cls(
            node.name.value,
            {arg.name.value: arg.value for arg in node.arguments or ()},
            node=node,
        )

    def copy(self) -> "AppliedDirective":
        # Value nodes are never mutated and can be shared.
        return self.__class__(self.name, dict(self.args), node=self.node)

    def __repr__(self) -> str:
        return "AppliedDirective(@%s)" % self.name


class Argument:
    """
    Argument definition for use in root fields or directives.

    Args:
        name: Argument name
        type_: Argument type
        description: Argument description
        node: Source node used when building from the SDL
    """

    __slots__ = ("name", "type", "description", "node")

    def __init__(
        self,
        name: str,
        type_: GraphQLType,
        description: Optional[str] = None,
        node: Optional[InputValueDefinitionNode] = None,
    ):
        self.name = name
        self.type = type_
        self.description = description
        self.node = node

    def copy(self) -> "Argument":
        return self.__class__(
            self.name, copy_type(self.type), self.description, self.node
        )

    def __repr__(self) -> str:
        return "Argument(%s: %s)" % (self.name, self.type)


class Field:
    """
    Member of an :class:`ObjectType` or an :class:`InputObjectType`.

    Args:
        name: Field name
        type_: Field type
        args: Field arguments
        directives: Directives applied to the field
        description: Field description
        node: Source node used when building from the SDL

    Attributes:
        name (str): Field name
        type (GraphQLType): Field type
        arguments (List[Argument]): Field arguments
        directives (List[AppliedDirective]): Applied directives
        description (Optional[str]): Field description
        node (Optional[Union[FieldDefinitionNode, InputValueDefinitionNode]]):
            Source node used when building from the SDL
    """

    __slots__ = (
        "name",
        "type",
        "arguments",
        "directives",
        "description",
        "node",
    )

    def __init__(
        self,
        name: str,
        type_: GraphQLType,
        args: Optional[Sequence[Argument]] = None,
        directives: Optional[Sequence[AppliedDirective]] = None,
        description: Optional[str] = None,
        node: Optional[Any] = None,
    ):
        self.name = name
        self.type = type_
        self.arguments = list(args) if args else []  # type: List[Argument]
        self.directives = (
            list(directives) if directives else []
        )  # type: List[AppliedDirective]
        self.description = description
        self.node = node  # type: Optional[Any]

    @property
    def argument_map(self) -> Dict[str, Argument]:
        return {arg.name: arg for arg in self.arguments}

    def directive(self, name: str) -> Optional[AppliedDirective]:
        for directive in self.directives:
            if directive.name == name:
                return directive
        return None

    def copy(self, type_: Any = _UNSET) -> "Field":
        """
        Independent copy of this field: neither the argument and directive
        lists nor the type reference are shared with the original.

        Args:
            type_: Replacement type for the copy
        """
        return self.__class__(
            self.name,
            copy_type(self.type if type_ is _UNSET else type_),
            args=[arg.copy() for arg in self.arguments],
            directives=[d.copy() for d in self.directives],
            description=self.description,
            node=self.node,
        )

    def __repr__(self) -> str:
        return "Field(%s: %s)" % (self.name, self.type)


class TypeDefinition:
    """
    Named type declaration base class.

    Attributes:
        kind (str): One of ``"object"``, ``"scalar"``, ``"enum"`` and
            ``"input"``.
        name (str): Type name.
        description (Optional[str]): Type description.
        origin (Optional[str]): Name of the object type this was derived from,
            ``None`` for declarations coming from the source document.
    """

    kind = NotImplemented  # type: str

    name = NotImplemented  # type: str
    description = None  # type: Optional[str]
    origin = None  # type: Optional[str]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self.name)


class ScalarType(TypeDefinition):
    """
    Scalar Type Definition

    Args:
        name: Type name
        storage_type: Native storage type the scalar maps to
        description: Type description
        node: Source node used when building from the SDL
    """

    kind = "scalar"

    def __init__(
        self,
        name: str,
        storage_type: Optional[str] = None,
        description: Optional[str] = None,
        node: Optional[ScalarTypeDefinitionNode] = None,
    ):
        self.name = name
        self.storage_type = storage_type
        self.description = description
        self.node = node


class EnumType(TypeDefinition):
    """
    Enum Type Definition

    Args:
        name: Enum name
        values: Value names, in declaration order
        description: Enum description
        node: Source node used when building from the SDL
    """

    kind = "enum"

    def __init__(
        self,
        name: str,
        values: Sequence[str],
        description: Optional[str] = None,
        node: Optional[EnumTypeDefinitionNode] = None,
    ):
        if len(set(values)) != len(values):
            raise ValueError("Duplicate enum value in %s" % name)
        self.name = name
        self.values = list(values)
        self.description = description
        self.node = node


class _FieldsMixin:

    fields = NotImplemented  # type: List[Field]

    @property
    def field_map(self) -> Dict[str, Field]:
        return {f.name: f for f in self.fields}


class ObjectType(_FieldsMixin, TypeDefinition):
    """
    Object Type Definition

    Args:
        name: Type name
        fields: Fields
        directives: Directives applied to the type
        description: Type description
        node: Source node used when building from the SDL
        origin: Name of the object type this was derived from
    """

    kind = "object"

    def __init__(
        self,
        name: str,
        fields: Optional[Sequence[Field]] = None,
        directives: Optional[Sequence[AppliedDirective]] = None,
        description: Optional[str] = None,
        node: Optional[ObjectTypeDefinitionNode] = None,
        origin: Optional[str] = None,
    ):
        self.name = name
        self.fields = list(fields) if fields else []
        self.directives = (
            list(directives) if directives else []
        )  # type: List[AppliedDirective]
        self.description = description
        self.node = node
        self.origin = origin


class InputObjectType(_FieldsMixin, TypeDefinition):
    """
    Input Object Type Definition

    Args:
        name: Type name
        fields: Fields
        directives: Directives applied to the type
        description: Type description
        node: Source node used when building from the SDL
        origin: Name of the object type this was derived from
    """

    kind = "input"

    def __init__(
        self,
        name: str,
        fields: Optional[Sequence[Field]] = None,
        directives: Optional[Sequence[AppliedDirective]] = None,
        description: Optional[str] = None,
        node: Optional[InputObjectTypeDefinitionNode] = None,
        origin: Optional[str] = None,
    ):
        self.name = name
        self.fields = list(fields) if fields else []
        self.directives = (
            list(directives) if directives else []
        )  # type: List[AppliedDirective]
        self.description = description
        self.node = node
        self.origin = origin


class Directive:
    """
    Directive definition

    Args:
        name: Directive name
        locations: Possible locations for that directive
        args: Argument definitions
        description: Directive description
        node: Source node used when building from the SDL
    """

    def __init__(
        self,
        name: str,
        locations: Sequence[str],
        args: Optional[Sequence[Argument]] = None,
        description: Optional[str] = None,
        node: Optional[DirectiveDefinitionNode] = None,
    ):
        if not locations:
            raise ValueError("Expected at least one location")

        self.name = name
        self.locations = list(locations)
        self.arguments = list(args) if args else []  # type: List[Argument]
        self.description = description
        self.node = node

    @property
    def argument_map(self) -> Dict[str, Argument]:
        return {arg.name: arg for arg in self.arguments}

    def __repr__(self) -> str:
        return "Directive(@%s)" % self.name

