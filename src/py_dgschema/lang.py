# -*- coding: utf-8 -*-
"""
Parsing of schema definition documents.

The grammar itself is handled by `graphql-core <https://github.com/graphql-python/graphql-core>`_;
this module wraps its parser in a :class:`Document` which owns the list of
definitions for the duration of a single compilation.
"""

from typing import Iterator, List, Optional, Type, TypeVar

from graphql import GraphQLSyntaxError, parse
from graphql.language import (
    DefinitionNode,
    DocumentNode,
    Lexer,
    ObjectTypeDefinitionNode,
    Source,
    TokenKind,
    TypeDefinitionNode,
)

from .exc import SchemaSyntaxError

TDefinition = TypeVar("TDefinition", bound=DefinitionNode)


class Document:
    """
    Parsed schema definition document.

    Definitions are kept in source order. The definition list is the only
    mutable part of the document and is only ever appended to (when seeding
    built-in definitions).

    Args:
        source: Source text the document was parsed from
        definitions: Parsed definitions

    Attributes:
        source (str): Source text the document was parsed from
        definitions (List[graphql.language.DefinitionNode]): Definitions
    """

    __slots__ = ("source", "definitions")

    def __init__(
        self, source: str, definitions: Optional[List[DefinitionNode]] = None
    ):
        self.source = source
        self.definitions = (
            list(definitions) if definitions else []
        )  # type: List[DefinitionNode]

    def __repr__(self) -> str:
        return "<Document (%d definitions)>" % len(self.definitions)

    def definitions_of(self, kind: Type[TDefinition]) -> Iterator[TDefinition]:
        for definition in self.definitions:
            if isinstance(definition, kind):
                yield definition

    @property
    def object_types(self) -> List[ObjectTypeDefinitionNode]:
        return list(self.definitions_of(ObjectTypeDefinitionNode))

    def type_definition(self, name: str) -> Optional[TypeDefinitionNode]:
        """ Find the first type definition with a given name. """
        for definition in self.definitions_of(TypeDefinitionNode):
            if definition.name.value == name:
                return definition
        return None

    def append(self, definition: DefinitionNode) -> None:
        self.definitions.append(definition)

    def to_ast(self) -> DocumentNode:
        """ Snapshot of the current definitions as a graphql-core document. """
        return DocumentNode(definitions=list(self.definitions))


def parse_document(source: str) -> Document:
    """
    Parse a schema definition document.

    Args:
        source: SDL text

    Returns:
        Document: Parsed document

    Raises:
        :class:`~py_dgschema.exc.SchemaSyntaxError` if the source is not
        syntactically valid.
    """
    try:
        # Documents without definitions are valid input.
        if Lexer(Source(source)).advance().kind == TokenKind.EOF:
            return Document(source, [])
        ast = parse(source)
    except GraphQLSyntaxError as err:
        position = err.positions[0] if err.positions else 0
        raise SchemaSyntaxError(err.message, position, source) from err

    return Document(source, list(ast.definitions))
