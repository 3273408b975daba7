# -*- coding: utf-8 -*-
""" Built-in scalar catalog. """

from typing import Dict, Tuple

from .types import ScalarType

ID = ScalarType("ID", storage_type="uid")
Boolean = ScalarType("Boolean", storage_type="bool")
Int = ScalarType("Int", storage_type="int")
Float = ScalarType("Float", storage_type="float")
String = ScalarType("String", storage_type="string")
DateTime = ScalarType("DateTime", storage_type="dateTime")

# These are always seeded into the schema and cannot be declared by users.
BUILTIN_SCALARS = (
    ID,
    Boolean,
    Int,
    Float,
    String,
    DateTime,
)  # type: Tuple[ScalarType, ...]

BUILTIN_SCALAR_NAMES = frozenset(s.name for s in BUILTIN_SCALARS)


def storage_types(
    scalars: Tuple[ScalarType, ...] = BUILTIN_SCALARS
) -> Dict[str, str]:
    """ Mapping ``scalar name -> storage type``.

    >>> storage_types()["DateTime"]
    'dateTime'
    """
    return {s.name: s.storage_type for s in scalars if s.storage_type}
