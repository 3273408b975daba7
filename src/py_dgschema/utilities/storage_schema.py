# -*- coding: utf-8 -*-
""" Projection of a compiled schema onto the storage layer's predicates. """

from typing import List, Mapping, Optional, Set

from ..derivation import derived_type_names, is_id_field
from ..schema import (
    BUILTIN_SCALARS,
    EnumType,
    Field,
    ObjectType,
    ScalarType,
    Schema,
    is_list_type,
    storage_types,
    unwrap_type,
)

ENUM_STORAGE_TYPE = "string"
REFERENCE_STORAGE_TYPE = "uid"


def _derived_names(schema: Schema) -> Set[str]:
    names = set()  # type: Set[str]
    for type_ in schema.object_types:
        names.update(derived_type_names(type_.name))
    return names


def user_object_types(schema: Schema) -> List[ObjectType]:
    """ Object types which were declared in the input document, sorted by
    name.

    Derived types are recognized through their ``origin`` or, for schemas
    loaded from canonical text, through their name.
    """
    derived = _derived_names(schema)
    return [
        t
        for t in schema.object_types
        if t.origin is None and t.name not in derived
    ]


def predicate_type(
    schema: Schema, field: Field, scalars: Mapping[str, str]
) -> Optional[str]:
    """ Storage type of a field, ``None`` if it cannot be stored. """
    named = schema.types.get(unwrap_type(field.type).name)
    if isinstance(named, ScalarType):
        base = named.storage_type or scalars.get(named.name)
    elif isinstance(named, EnumType):
        base = ENUM_STORAGE_TYPE
    elif isinstance(named, ObjectType):
        base = REFERENCE_STORAGE_TYPE
    else:
        base = None

    if base is None:
        return None
    return "[%s]" % base if is_list_type(field.type) else base


def print_storage_schema(schema: Schema, indent: str = "\t") -> str:
    """
    Render the storage projection of a compiled schema.

    Each user declared object type becomes a type block listing its
    predicates, followed by one line per predicate giving its storage type.
    Identifying fields are not stored as predicates.

    Args:
        schema: Compiled schema
        indent: Indent used inside type blocks

    Returns:
        str: Storage schema text
    """
    scalars = storage_types(BUILTIN_SCALARS)
    blocks = []  # type: List[str]

    for type_ in user_object_types(schema):
        predicates = []
        for field in sorted(type_.fields, key=lambda f: f.name):
            if is_id_field(field):
                continue
            storage = predicate_type(schema, field, scalars)
            if storage is not None:
                predicates.append(("%s.%s" % (type_.name, field.name), storage))

        lines = ["type %s {" % type_.name]
        lines.extend(indent + name for name, _ in predicates)
        lines.append("}")
        lines.extend("%s: %s ." % predicate for predicate in predicates)
        blocks.append("\n".join(lines))

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
