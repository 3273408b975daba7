# -*- coding: utf-8 -*-
""" Built-in directives. """

from typing import Optional, Tuple

from graphql.language import StringValueNode

from ..exc import InternalInvariantError, RuleViolation
from .scalars import String
from .types import (
    AppliedDirective,
    Argument,
    Directive,
    Field,
    NamedType,
    NonNullType,
)

INVERSE_DIRECTIVE_NAME = "hasInverse"
INVERSE_FIELD_ARG = "field"

HasInverseDirective = Directive(
    INVERSE_DIRECTIVE_NAME,
    description=(
        "Marks the field as one side of a two way edge; the argument names "
        'the field on the other side as "Type.field".'
    ),
    locations=["FIELD_DEFINITION"],
    args=[Argument(INVERSE_FIELD_ARG, NonNullType(NamedType(String.name)))],
)

# These are always seeded into the schema.
BUILTIN_DIRECTIVES = (HasInverseDirective,)


def get_inverse_directive(field: Field) -> Optional[AppliedDirective]:
    return field.directive(INVERSE_DIRECTIVE_NAME)


def get_inverse_args(
    directive: AppliedDirective, type_name: str, field_name: str
) -> Tuple[str, str]:
    """
    Extract the inverse ``(type, field)`` pair named by a ``@hasInverse``
    directive.

    Args:
        directive: Applied ``@hasInverse`` directive
        type_name: Name of the type declaring the field (used in messages)
        field_name: Name of the field the directive is applied to

    Returns:
        Tuple[str, str]: Inverse type name and inverse field name

    Raises:
        :class:`~py_dgschema.exc.RuleViolation`: if the argument is not a
            ``"Type.field"`` string.
        :class:`~py_dgschema.exc.InternalInvariantError`: if the argument is
            missing, which grammar validation guarantees against.
    """
    try:
        value = directive.args[INVERSE_FIELD_ARG]
    except KeyError:
        raise InternalInvariantError(
            "Expected @%s on %s.%s to have a %s argument but it did not"
            % (INVERSE_DIRECTIVE_NAME, type_name, field_name, INVERSE_FIELD_ARG)
        )

    if not isinstance(value, StringValueNode):
        raise RuleViolation(
            "Type %s; Field %s: argument %s of @%s must be a string."
            % (
                type_name,
                field_name,
                INVERSE_FIELD_ARG,
                INVERSE_DIRECTIVE_NAME,
            ),
            [value],
        )

    parts = value.value.split(".")
    if len(parts) != 2 or not all(parts):
        raise RuleViolation(
            'Type %s; Field %s: argument %s of @%s must be of the form '
            '"Type.field", got "%s".'
            % (
                type_name,
                field_name,
                INVERSE_FIELD_ARG,
                INVERSE_DIRECTIVE_NAME,
                value.value,
            ),
            [value],
        )

    return parts[0], parts[1]
