# -*- coding: utf-8 -*-
"""
The :mod:`py_dgschema.schema` module exposes the compiled schema model, the
built-in catalog and the canonical printer.
"""

# flake8: noqa

from .builder import MUTATION_TYPE_NAME, QUERY_TYPE_NAME, build_schema
from .directives import (
    BUILTIN_DIRECTIVES,
    INVERSE_DIRECTIVE_NAME,
    HasInverseDirective,
    get_inverse_args,
    get_inverse_directive,
)
from .printer import SchemaPrinter, print_field, print_schema
from .scalars import (
    BUILTIN_SCALAR_NAMES,
    BUILTIN_SCALARS,
    ID,
    Boolean,
    DateTime,
    Float,
    Int,
    String,
    storage_types,
)
from .schema import Schema
from .types import (
    AppliedDirective,
    Argument,
    Directive,
    EnumType,
    Field,
    GraphQLType,
    InputObjectType,
    ListType,
    NamedType,
    NonNullType,
    ObjectType,
    ScalarType,
    TypeDefinition,
    is_list_type,
    map_named_type,
    nullable_type,
    unwrap_type,
)
