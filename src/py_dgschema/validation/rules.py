# -*- coding: utf-8 -*-
"""
Rules run against the raw input document, before built-in definitions are
seeded and before SDL validation.

Input documents may only declare object types and enums which can be turned
into a full API. Each rule reports at most one error, located at the first
offending node.

These rules are registered, in order, on
:data:`~py_dgschema.validation.SPECIFIED_RULES` when this module is imported.
"""

from typing import Dict, Iterator, Optional, Tuple

from graphql.language import (
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
)

from ..derivation import derived_type_names
from ..exc import RuleViolation
from ..lang import Document
from ..schema.builder import MUTATION_TYPE_NAME, QUERY_TYPE_NAME
from ..schema.directives import (
    INVERSE_DIRECTIVE_NAME,
    INVERSE_FIELD_ARG,
    get_inverse_args,
)
from ..schema.scalars import BUILTIN_SCALAR_NAMES, ID
from ..schema.types import AppliedDirective
from .registry import RuleRegistry

__all__ = (
    "SPECIFIED_RULES",
    "data_type_check",
    "name_check",
    "id_count_check",
    "derived_name_check",
    "field_argument_check",
    "list_validity_check",
    "has_inverse_check",
    "reference_id_check",
)

SPECIFIED_RULES = RuleRegistry()

RESERVED_TYPE_NAMES = frozenset(
    [QUERY_TYPE_NAME, MUTATION_TYPE_NAME, "Subscription"]
) | BUILTIN_SCALAR_NAMES


def _named_type(type_node: TypeNode) -> str:
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        type_node = type_node.type
    return type_node.name.value  # type: ignore


def _list_depth(type_node: TypeNode) -> int:
    depth = 0
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        if isinstance(type_node, ListTypeNode):
            depth += 1
        type_node = type_node.type
    return depth


def _fields(
    document: Document,
) -> Iterator[Tuple[ObjectTypeDefinitionNode, FieldDefinitionNode]]:
    for definition in document.object_types:
        for field in definition.fields or ():
            yield definition, field


def _id_fields(definition: ObjectTypeDefinitionNode):
    return [
        f for f in definition.fields or () if _named_type(f.type) == ID.name
    ]


def _object_type(
    document: Document, name: str
) -> Optional[ObjectTypeDefinitionNode]:
    definition = document.type_definition(name)
    if isinstance(definition, ObjectTypeDefinitionNode):
        return definition
    return None


def _definition_kind(definition) -> str:
    """
    >>> from graphql.language import ScalarTypeDefinitionNode
    >>> _definition_kind(ScalarTypeDefinitionNode())
    'scalar'
    """
    kind = definition.kind
    for suffix in ("_type_definition", "_definition"):
        if kind.endswith(suffix):
            return kind[: -len(suffix)]
    return kind


@SPECIFIED_RULES.rule("dataTypeCheck")
def data_type_check(document: Document) -> Optional[RuleViolation]:
    for definition in document.definitions:
        if not isinstance(
            definition, (ObjectTypeDefinitionNode, EnumTypeDefinitionNode)
        ):
            return RuleViolation(
                "You can't add %s definitions. Only type and enums are "
                "allowed in initial schema." % _definition_kind(definition),
                [definition],
            )
    return None


@SPECIFIED_RULES.rule("nameCheck")
def name_check(document: Document) -> Optional[RuleViolation]:
    for definition in document.definitions_of(TypeDefinitionNode):
        if definition.name.value in RESERVED_TYPE_NAMES:
            return RuleViolation(
                "%s is a reserved word, so you can't declare a type with this "
                "name. Pick a different name for the type."
                % definition.name.value,
                [definition.name],
            )
    return None


@SPECIFIED_RULES.rule("idCountCheck")
def id_count_check(document: Document) -> Optional[RuleViolation]:
    for definition in document.object_types:
        id_fields = _id_fields(definition)
        if len(id_fields) > 1:
            return RuleViolation(
                "Type %s; has more than one field of type ID (%s). "
                "A type can have at most one ID field."
                % (
                    definition.name.value,
                    ", ".join(f.name.value for f in id_fields),
                ),
                id_fields[1:],
            )
    return None


@SPECIFIED_RULES.rule("derivedNameCheck")
def derived_name_check(document: Document) -> Optional[RuleViolation]:
    derived = {}  # type: Dict[str, str]
    for definition in document.object_types:
        for name in derived_type_names(definition.name.value):
            derived.setdefault(name, definition.name.value)

    for definition in document.definitions_of(TypeDefinitionNode):
        origin = derived.get(definition.name.value)
        if origin is not None:
            return RuleViolation(
                "%s clashes with a type generated for %s. "
                "Pick a different name for the type."
                % (definition.name.value, origin),
                [definition.name],
            )
    return None


@SPECIFIED_RULES.rule("fieldArgumentCheck")
def field_argument_check(document: Document) -> Optional[RuleViolation]:
    for definition, field in _fields(document):
        if field.arguments:
            return RuleViolation(
                "Type %s; Field %s: You can't give arguments to fields."
                % (definition.name.value, field.name.value),
                [field.arguments[0]],
            )
    return None


@SPECIFIED_RULES.rule("listValidityCheck")
def list_validity_check(document: Document) -> Optional[RuleViolation]:
    for definition, field in _fields(document):
        if _list_depth(field.type) > 1:
            return RuleViolation(
                "Type %s; Field %s: Nested lists are invalid."
                % (definition.name.value, field.name.value),
                [field.type],
            )
    return None


@SPECIFIED_RULES.rule("hasInverseCheck")
def has_inverse_check(document: Document) -> Optional[RuleViolation]:
    for definition, field in _fields(document):
        type_name, field_name = definition.name.value, field.name.value
        directive = _inverse_directive(field)
        if directive is None or INVERSE_FIELD_ARG not in directive.args:
            # Missing arguments are reported by SDL validation.
            continue

        try:
            inv_type_name, inv_field_name = get_inverse_args(
                directive, type_name, field_name
            )
        except RuleViolation as err:
            return err

        inv_type = _object_type(document, inv_type_name)
        if inv_type is None:
            return RuleViolation(
                "Type %s; Field %s: inverse type %s doesn't exist."
                % (type_name, field_name, inv_type_name),
                [directive.node],
            )

        inv_field = next(
            (
                f
                for f in inv_type.fields or ()
                if f.name.value == inv_field_name
            ),
            None,
        )
        if inv_field is None:
            return RuleViolation(
                "Type %s; Field %s: inverse field %s doesn't exist for type "
                "%s." % (type_name, field_name, inv_field_name, inv_type_name),
                [directive.node],
            )

        if (
            _named_type(field.type) != inv_type_name
            or _named_type(inv_field.type) != type_name
        ):
            return RuleViolation(
                "Type %s; Field %s: inverse field %s.%s doesn't have the "
                "right type: the two fields must reference each other's "
                "types."
                % (type_name, field_name, inv_type_name, inv_field_name),
                [directive.node],
            )

        inv_directive = _inverse_directive(inv_field)
        if (
            inv_directive is not None
            and INVERSE_FIELD_ARG in inv_directive.args
        ):
            try:
                back = get_inverse_args(
                    inv_directive, inv_type_name, inv_field_name
                )
            except RuleViolation as err:
                return err
            if back != (type_name, field_name):
                return RuleViolation(
                    "Type %s; Field %s: inverse field %s.%s points back to "
                    "%s.%s instead."
                    % (
                        type_name,
                        field_name,
                        inv_type_name,
                        inv_field_name,
                        back[0],
                        back[1],
                    ),
                    [inv_directive.node],
                )
    return None


def _inverse_directive(
    field: FieldDefinitionNode,
) -> Optional[AppliedDirective]:
    for node in field.directives or ():
        if node.name.value == INVERSE_DIRECTIVE_NAME:
            return AppliedDirective.from_node(node)
    return None


@SPECIFIED_RULES.rule("referenceIdCheck")
def reference_id_check(document: Document) -> Optional[RuleViolation]:
    for definition, field in _fields(document):
        target = _object_type(document, _named_type(field.type))
        if target is not None and not _id_fields(target):
            return RuleViolation(
                "Type %s; Field %s: type %s is referenced but has no ID "
                "field."
                % (
                    definition.name.value,
                    field.name.value,
                    target.name.value,
                ),
                [field.type],
            )
    return None


SPECIFIED_RULES.freeze()
