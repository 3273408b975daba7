# -*- coding: utf-8 -*-
"""
py_dgschema
~~~~~~~~~~~

py_dgschema compiles user-authored GraphQL type declarations into a complete
API schema: the declared types plus the input, payload and filter types and
the ``Query`` / ``Mutation`` operations needed to create, read, update and
delete every object type.

The main :mod:`py_dgschema` package exposes the compilation entry points
while the relevant submodules expose the schema model, the validation rules
and the schema tooling.
"""

# flake8: noqa

from .version import __version__  # isort:skip

from . import schema, utilities, validation
from .compiler import SchemaCompiler, compile_schema, load_schema, seed_builtins
from .derivation import DerivedTypeSet, TypeDeriver, derive_schema
from .lang import Document, parse_document
from .schema import print_schema

__all__ = (
    "__version__",
    "SchemaCompiler",
    "compile_schema",
    "load_schema",
    "seed_builtins",
    "DerivedTypeSet",
    "TypeDeriver",
    "derive_schema",
    "Document",
    "parse_document",
    "print_schema",
)
