# -*- coding: utf-8 -*-

from graphql import parse

from py_dgschema.exc import (
    LocatedError,
    RuleViolation,
    SchemaCompilationError,
    SchemaGenError,
    UnknownType,
)


def test_located_error_computes_locations_from_nodes():
    ast = parse("type Person {\n  id: ID!\n}")
    field = ast.definitions[0].fields[0]
    err = LocatedError("Bad field", [field])
    assert err.locations == [(2, 3)]
    assert err.to_dict() == {
        "message": "Bad field",
        "locations": [{"line": 2, "column": 3}],
    }


def test_located_error_ignores_nodes_without_location():
    ast = parse("type Person { id: ID! }", no_location=True)
    err = LocatedError("Bad type", [ast.definitions[0]])
    assert err.locations == []
    assert err.to_dict() == {"message": "Bad type"}


def test_compilation_error_str():
    errors = [RuleViolation("first"), RuleViolation("second")]
    err = SchemaCompilationError(errors, "rules")
    assert str(err) == "first,\nsecond"
    assert err.message == "Invalid schema (rules): 2 errors"
    assert str(SchemaCompilationError(errors[:1], "rules")) == "first"


def test_unknown_type_is_a_key_error():
    err = UnknownType("Person")
    assert isinstance(err, KeyError)
    assert isinstance(err, SchemaGenError)
