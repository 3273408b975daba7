# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from graphql.language import Node

from ._string_utils import highlight_location, index_to_loc

Location = Tuple[int, int]


class SchemaGenError(Exception):
    """
    Base exception from which all other inherit. You should prefer
    using one of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _node_location(node: Node) -> Optional[Location]:
    loc = node.loc
    if loc is None or loc.source is None:
        return None
    return index_to_loc(loc.source.body, loc.start)


class LocatedError(SchemaGenError):
    """
    Error that can be traced back to specific position(s) in the source
    document.

    Locations are computed from the nodes' offsets unless they are provided
    explicitly. Nodes without location information (such as the ones inserted
    when seeding built-in definitions) are ignored.

    Args:
        message: Explanatory message
        nodes: Parse nodes relevant to the exception
        locations: Explicit ``(line, column)`` locations

    Attributes:
        message (str): Explanatory message
        nodes (List[graphql.language.Node]): Nodes relevant to the exception
        locations (List[Tuple[int, int]]): 1-indexed ``(line, column)`` pairs
    """

    def __init__(
        self,
        message: str,
        nodes: Optional[Sequence[Node]] = None,
        locations: Optional[Sequence[Location]] = None,
    ):
        super().__init__(message)
        self.nodes = list(nodes) if nodes else []  # type: List[Node]
        if locations is not None:
            self.locations = list(locations)  # type: List[Location]
        else:
            self.locations = [
                loc
                for loc in (_node_location(node) for node in self.nodes)
                if loc is not None
            ]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a JSON serializable dictionnary.
        """
        kv = (
            ("message", str(self)),
            (
                "locations",
                [
                    {"line": line, "column": col}
                    for line, col in self.locations
                ],
            ),
        )
        return {k: v for k, v in kv if v}


class SchemaSyntaxError(LocatedError):
    """
    Syntax error while parsing a schema definition document.

    Args:
        message: Explanatory message
        position: 0-indexed position locating the syntax error
        source: Source string from which the syntax error originated

    Attributes:
        message (str): Explanatory message
        position (int): 0-indexed position locating the syntax error
        source (str): Source string from which the syntax error originated
    """

    def __init__(self, message: str, position: int, source: str):
        super().__init__(message, locations=[index_to_loc(source, position)])
        self.source = source
        self.position = position
        self._highlighted = None  # type: Optional[str]

    @property
    def highlighted(self) -> str:
        """
        str: Message followed by a view of the source document pointing at
        the exact location of the error.
        """
        if self._highlighted is None:
            self._highlighted = "%s %s" % (
                self.message,
                highlight_location(self.source, self.position),
            )
        return self._highlighted


class RuleViolation(LocatedError):
    """
    A schema definition document broke one of the registered validation
    rules.

    Attributes:
        rule (Optional[str]): Name of the rule which reported the error, set
            by the registry when running the rule.
    """

    def __init__(
        self,
        message: str,
        nodes: Optional[Sequence[Node]] = None,
        rule: Optional[str] = None,
    ):
        super().__init__(message, nodes)
        self.rule = rule


class SDLValidationError(LocatedError):
    """
    The schema definition document (including the seeded built-ins) is not a
    valid GraphQL SDL document: unknown types, unknown directives, missing
    directive arguments, etc.
    """


class SchemaCompilationError(SchemaGenError):
    """
    Compilation failed because of user errors.

    Args:
        errors: Wrapped errors
        stage: Pipeline stage which reported the errors, one of ``"syntax"``,
            ``"rules"`` or ``"sdl"``.

    Attributes:
        errors (List[LocatedError]): Wrapped errors
        stage (str): Pipeline stage which reported the errors
    """

    def __init__(self, errors: Sequence[LocatedError], stage: str):
        super().__init__(
            "Invalid schema (%s): %d errors" % (stage, len(errors))
        )
        self.errors = list(errors)
        self.stage = stage

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])
        return ",\n".join([str(err) for err in self.errors])


class InternalInvariantError(SchemaGenError):
    """
    A condition guaranteed by validation turned out to be false while
    deriving the schema.

    This always points at a bug (the validators and the deriver disagree) and
    is never reported as a user error.
    """


class UnknownType(SchemaGenError, KeyError):
    pass
