# -*- coding: utf-8 -*-
"""
Compilation pipeline: turn an input document into a complete schema.

Stages run in order, each one aborting compilation on failure:

1. parsing (``"syntax"``)
2. input rules (``"rules"``)
3. seeding of the built-in scalars and directives
4. SDL validation (``"sdl"``)
5. building and derivation
"""

import logging
from typing import List, Optional, Sequence

from graphql.language import (
    DirectiveDefinitionNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
)
from graphql.validation.validate import validate_sdl

from .derivation import derive_schema
from .exc import (
    InternalInvariantError,
    SchemaCompilationError,
    SchemaSyntaxError,
    SDLValidationError,
)
from .lang import Document, parse_document
from .schema.builder import build_schema
from .schema.directives import BUILTIN_DIRECTIVES
from .schema.scalars import BUILTIN_SCALARS
from .schema.schema import Schema
from .schema.types import (
    Argument,
    Directive,
    GraphQLType,
    ListType,
    NamedType,
    NonNullType,
    ScalarType,
)
from .validation import SPECIFIED_RULES, RuleRegistry

logger = logging.getLogger(__name__)

# Definition kinds found in printed schemas.
CANONICAL_DEFINITIONS = (
    ObjectTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    EnumTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    DirectiveDefinitionNode,
)


def _name(value: str) -> NameNode:
    return NameNode(value=value)


def type_node(type_: GraphQLType) -> TypeNode:
    """ Convert a type reference into a graphql-core type node.

    >>> from graphql.language import print_ast
    >>> print_ast(type_node(NonNullType(ListType(NamedType("Int")))))
    '[Int]!'
    """
    if isinstance(type_, NonNullType):
        return NonNullTypeNode(type=type_node(type_.type))
    elif isinstance(type_, ListType):
        return ListTypeNode(type=type_node(type_.type))
    assert isinstance(type_, NamedType)
    return NamedTypeNode(name=_name(type_.name))


def _argument_node(arg: Argument) -> InputValueDefinitionNode:
    return InputValueDefinitionNode(
        name=_name(arg.name),
        type=type_node(arg.type),
        description=None,
        default_value=None,
        directives=[],
    )


def scalar_node(scalar: ScalarType) -> ScalarTypeDefinitionNode:
    return ScalarTypeDefinitionNode(
        name=_name(scalar.name), description=None, directives=[]
    )


def directive_node(directive: Directive) -> DirectiveDefinitionNode:
    return DirectiveDefinitionNode(
        name=_name(directive.name),
        description=None,
        arguments=[_argument_node(arg) for arg in directive.arguments],
        repeatable=False,
        locations=[_name(loc) for loc in directive.locations],
    )


def seed_builtins(
    document: Document,
    scalars: Sequence[ScalarType] = BUILTIN_SCALARS,
    directives: Sequence[Directive] = BUILTIN_DIRECTIVES,
) -> Document:
    """
    Append the built-in scalar and directive definitions to a document.

    Seeding is unconditional: user definitions using the same names are left
    for SDL validation to report. Seeded nodes carry no location.

    Args:
        document: Document to modify in place
        scalars: Scalars to seed
        directives: Directives to seed

    Returns:
        The modified document
    """
    for scalar in scalars:
        document.append(scalar_node(scalar))
    for directive in directives:
        document.append(directive_node(directive))
    return document


class SchemaCompiler:
    """
    Compile input documents into complete schemas.

    Instances are not modified by compilation and can be reused and shared.

    Args:
        rules: Input rules to run before seeding
        scalars: Built-in scalars to seed
        directives: Built-in directives to seed
    """

    __slots__ = ("rules", "scalars", "directives")

    def __init__(
        self,
        rules: RuleRegistry = SPECIFIED_RULES,
        scalars: Sequence[ScalarType] = BUILTIN_SCALARS,
        directives: Sequence[Directive] = BUILTIN_DIRECTIVES,
    ):
        self.rules = rules
        self.scalars = tuple(scalars)
        self.directives = tuple(directives)

    def compile(self, source: str) -> Schema:
        """
        Compile an input document.

        Args:
            source: SDL text declaring object types and enums

        Returns:
            Schema: Complete schema including derived types and roots

        Raises:
            :class:`~py_dgschema.exc.SchemaCompilationError`: if the source
                is invalid.
            :class:`~py_dgschema.exc.InternalInvariantError`: if derivation
                failed on a validated document.
        """
        document = _parse(source)
        logger.debug("Parsed %d definitions", len(document.definitions))

        rule_errors = self.rules.validate(document)
        if rule_errors:
            raise SchemaCompilationError(rule_errors, "rules")

        seed_builtins(document, self.scalars, self.directives)

        sdl_errors = _validate_sdl(document)
        if sdl_errors:
            raise SchemaCompilationError(sdl_errors, "sdl")

        schema = build_schema(document, self.scalars)
        try:
            derive_schema(schema)
        except InternalInvariantError:
            logger.exception("Schema derivation failed on a valid document")
            raise

        logger.debug("Compiled schema with %d types", len(schema.types))
        return schema


def _validate_sdl(document: Document) -> List[SDLValidationError]:
    return [
        SDLValidationError(
            err.message,
            err.nodes,
            locations=[(loc.line, loc.column) for loc in err.locations or ()],
        )
        for err in validate_sdl(document.to_ast())
    ]


def _parse(source: str) -> Document:
    try:
        return parse_document(source)
    except SchemaSyntaxError as err:
        raise SchemaCompilationError([err], "syntax") from err


def compile_schema(
    source: str, rules: Optional[RuleRegistry] = None
) -> Schema:
    """
    Compile an input document with the default catalog.

    Args:
        source: SDL text declaring object types and enums
        rules: Input rules, defaults to
            :data:`~py_dgschema.validation.SPECIFIED_RULES`

    Returns:
        Schema: Complete schema including derived types and roots
    """
    return SchemaCompiler(
        rules=rules if rules is not None else SPECIFIED_RULES
    ).compile(source)


def load_schema(source: str) -> Schema:
    """
    Load a canonical schema as-is.

    The document only goes through SDL validation: no input rule is run and
    nothing is seeded or derived. ``Query`` and ``Mutation`` become the root
    types and every other definition is added to the type table.

    Args:
        source: Canonical schema text, usually from
            :func:`~py_dgschema.schema.print_schema`

    Returns:
        Schema: Loaded schema

    Raises:
        :class:`~py_dgschema.exc.SchemaCompilationError`: if the source is
            not syntactically valid, holds definitions which cannot appear in
            a canonical schema or fails SDL validation.
    """
    document = _parse(source)

    errors = [
        SDLValidationError(
            "Unsupported %s in canonical schema."
            % definition.kind.replace("_", " "),
            [definition],
        )
        for definition in document.definitions
        if not isinstance(definition, CANONICAL_DEFINITIONS)
    ]
    if not errors:
        errors = _validate_sdl(document)
    if errors:
        raise SchemaCompilationError(errors, "sdl")

    return build_schema(document, roots=True)
