# -*- coding: utf-8 -*-
"""
Structural equality of compiled schemas.

Fields are compared through their canonical single line form (see
:func:`~py_dgschema.schema.print_field`) so that comparisons are insensitive
to the order in which fields, arguments and directives were declared.
Introspection fields (names starting with ``__``) are ignored.
"""

from typing import Collection, Mapping, Optional, Sequence

from ..schema import (
    EnumType,
    Field,
    ObjectType,
    Schema,
    TypeDefinition,
    print_field,
)

__all__ = (
    "are_equal_fields",
    "are_equal_query",
    "are_equal_mutation",
    "are_equal_types",
    "are_equal_schemas",
)


def _is_introspection(field: Field) -> bool:
    return field.name.startswith("__")


def _canonical_fields(fields: Sequence[Field]) -> Collection[str]:
    return [print_field(f) for f in fields if not _is_introspection(f)]


def are_equal_fields(
    fields1: Sequence[Field], fields2: Sequence[Field]
) -> bool:
    """
    Check that two field lists hold the same fields, in any order.

    Every field of ``fields2`` must exist in ``fields1`` with the same
    canonical form and both lists must hold the same number of fields.
    """
    canonical1 = _canonical_fields(fields1)
    canonical2 = _canonical_fields(fields2)
    if len(canonical1) != len(canonical2):
        return False
    known = set(canonical1)
    return all(f in known for f in canonical2)


def _root_fields(root: Optional[ObjectType]) -> Sequence[Field]:
    return root.fields if root is not None else []


def are_equal_query(schema1: Schema, schema2: Schema) -> bool:
    return are_equal_fields(
        _root_fields(schema1.query_type), _root_fields(schema2.query_type)
    )


def are_equal_mutation(schema1: Schema, schema2: Schema) -> bool:
    return are_equal_fields(
        _root_fields(schema1.mutation_type),
        _root_fields(schema2.mutation_type),
    )


def _are_equal_type(type1: TypeDefinition, type2: TypeDefinition) -> bool:
    if type1.kind != type2.kind:
        return False
    if isinstance(type1, EnumType):
        return set(type1.values) == set(type2.values)  # type: ignore
    fields1 = getattr(type1, "fields", None)
    if fields1 is None:
        return True
    return are_equal_fields(fields1, type2.fields)  # type: ignore


def are_equal_types(
    types1: Mapping[str, TypeDefinition], types2: Mapping[str, TypeDefinition]
) -> bool:
    """
    Check that every type present in both tables is defined the same way.

    Types present in only one of the tables are not inspected.
    """
    for name, type2 in types2.items():
        type1 = types1.get(name)
        if type1 is not None and not _are_equal_type(type1, type2):
            return False
    return True


def are_equal_schemas(schema1: Schema, schema2: Schema) -> bool:
    """ Check that two compiled schemas are structurally equal. """
    return (
        are_equal_query(schema1, schema2)
        and are_equal_mutation(schema1, schema2)
        and are_equal_types(schema1.types, schema2.types)
    )
