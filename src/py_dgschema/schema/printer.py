# -*- coding: utf-8 -*-
""" Export a compiled schema as canonical SDL. """

import operator as op
from typing import Callable, List, Sequence

from graphql.language import StringValueNode, ValueNode, print_ast

from .schema import Schema
from .types import (
    AppliedDirective,
    Argument,
    Directive,
    EnumType,
    Field,
    InputObjectType,
    ObjectType,
    ScalarType,
    TypeDefinition,
)

BANNER_WIDTH = 23

TYPES_SECTION = "Generated Types"
SCALARS_SECTION = "Scalar Definitions"
DIRECTIVES_SECTION = "Directive Definitions"
ENUMS_SECTION = "Enum Definitions"
INPUTS_SECTION = "Input Definitions"
QUERY_SECTION = "Generated Query"
MUTATION_SECTION = "Generated Mutations"

_by_name = op.attrgetter("name")


def banner(title: str) -> str:
    """
    >>> print(banner("Generated Query"))
    #######################
    # Generated Query
    #######################
    """
    line = "#" * BANNER_WIDTH
    return "%s\n# %s\n%s" % (line, title, line)


def print_arguments(args: Sequence[Argument]) -> str:
    if not args:
        return ""
    return "(%s)" % ", ".join(
        "%s: %s" % (arg.name, arg.type) for arg in sorted(args, key=_by_name)
    )


def print_value(value: ValueNode) -> str:
    """
    >>> print_value(StringValueNode(value="Pet.owner", block=True))
    '"Pet.owner"'
    """
    if isinstance(value, StringValueNode):
        # Block and plain strings with the same value print the same.
        value = StringValueNode(value=value.value)
    return print_ast(value)


def print_applied_directive(directive: AppliedDirective) -> str:
    if not directive.args:
        return "@%s" % directive.name
    return "@%s(%s)" % (
        directive.name,
        ", ".join(
            "%s: %s" % (name, print_value(value))
            for name, value in sorted(directive.args.items())
        ),
    )


def print_field(field: Field) -> str:
    """ Canonical single line form of a field.

    Arguments and directives (including the directives' arguments) are
    sorted by name so that two fields differing only by declaration order
    print identically.
    """
    directives = "".join(
        " %s" % print_applied_directive(d)
        for d in sorted(field.directives, key=_by_name)
    )
    return "%s%s: %s%s" % (
        field.name,
        print_arguments(field.arguments),
        field.type,
        directives,
    )


class SchemaPrinter:
    """
    Args:
        indent (Union[str, int]): Indent character or number of spaces
    """

    __slots__ = ("indent",)

    def __init__(self, indent="\t"):
        if isinstance(indent, int):
            self.indent = indent * " "
        else:
            self.indent = indent

    def __call__(self, schema: Schema) -> str:
        """
        schema (py_dgschema.schema.Schema): Schema to format

        Returns:
            str: Canonical schema text
        """
        if not (
            schema.types
            or schema.directives
            or schema.query_type
            or schema.mutation_type
        ):
            return ""

        def _of(kind: type) -> List[TypeDefinition]:
            return sorted(
                [t for t in schema.types.values() if isinstance(t, kind)],
                key=_by_name,
            )

        sections = [
            (TYPES_SECTION, _of(ObjectType), self.print_type, "\n\n"),
            (SCALARS_SECTION, _of(ScalarType), self.print_type, "\n"),
            (
                DIRECTIVES_SECTION,
                sorted(schema.directives.values(), key=_by_name),
                self.print_directive,
                "\n",
            ),
            (ENUMS_SECTION, _of(EnumType), self.print_type, "\n\n"),
            (INPUTS_SECTION, _of(InputObjectType), self.print_type, "\n\n"),
            (
                QUERY_SECTION,
                [t for t in [schema.query_type] if t and t.fields],
                self.print_type,
                "\n\n",
            ),
            (
                MUTATION_SECTION,
                [t for t in [schema.mutation_type] if t and t.fields],
                self.print_type,
                "\n\n",
            ),
        ]  # type: List[tuple]

        return (
            "\n\n".join(
                self.print_section(title, entries, fn, sep)
                for title, entries, fn, sep in sections
            )
            + "\n"
        )

    def print_section(
        self,
        title: str,
        entries: Sequence,
        print_entry: Callable[..., str],
        separator: str,
    ) -> str:
        if not entries:
            return banner(title)
        return "%s\n\n%s" % (
            banner(title),
            separator.join(print_entry(e) for e in entries),
        )

    def print_type(self, type_: TypeDefinition) -> str:
        if isinstance(type_, ScalarType):
            return "scalar %s" % type_.name
        elif isinstance(type_, EnumType):
            return self._print_block("enum", type_.name, sorted(type_.values))
        elif isinstance(type_, ObjectType):
            return self._print_block(
                "type", type_.name, self.print_fields(type_.fields)
            )
        elif isinstance(type_, InputObjectType):
            return self._print_block(
                "input", type_.name, self.print_fields(type_.fields)
            )
        raise TypeError(type_)

    def print_fields(self, fields: Sequence[Field]) -> List[str]:
        return [print_field(f) for f in sorted(fields, key=_by_name)]

    def print_directive(self, directive: Directive) -> str:
        return "directive @%s%s on %s" % (
            directive.name,
            print_arguments(directive.arguments),
            " | ".join(sorted(directive.locations)),
        )

    def _print_block(self, keyword: str, name: str, lines: List[str]) -> str:
        if not lines:
            return "%s %s" % (keyword, name)
        return "%s %s {\n%s\n}" % (
            keyword,
            name,
            "\n".join(self.indent + line for line in lines),
        )


def print_schema(schema: Schema, indent="\t") -> str:
    """ Canonical text of a compiled schema.

    Args:
        schema: Schema to format
        indent (Union[str, int]): Indent character or number of spaces

    Returns:
        str: Canonical schema text
    """
    return SchemaPrinter(indent=indent)(schema)
