# -*- coding: utf-8 -*-
"""
Tooling working on compiled schemas: structural comparison and projection
onto the storage layer.
"""

from .equality import (
    are_equal_fields,
    are_equal_mutation,
    are_equal_query,
    are_equal_schemas,
    are_equal_types,
)
from .storage_schema import print_storage_schema

__all__ = (
    "are_equal_fields",
    "are_equal_mutation",
    "are_equal_query",
    "are_equal_schemas",
    "are_equal_types",
    "print_storage_schema",
)
