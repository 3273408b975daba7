# -*- coding: utf-8 -*-

import pytest

from py_dgschema import compile_schema, load_schema, print_schema
from py_dgschema.schema import (
    AppliedDirective,
    Argument,
    EnumType,
    Field,
    InputObjectType,
    NamedType,
    NonNullType,
    ObjectType,
    Schema,
)
from py_dgschema.utilities import (
    are_equal_fields,
    are_equal_mutation,
    are_equal_query,
    are_equal_schemas,
    are_equal_types,
)

PEOPLE = """
type Person {
    id: ID!
    name: String!
    pets: [Pet] @hasInverse(field: "Pet.owner")
}

type Pet {
    id: ID!
    owner: Person @hasInverse(field: "Person.pets")
}
"""


def _field(name, type_name="String", **kwargs):
    return Field(name, NamedType(type_name), **kwargs)


def test_equal_fields_ignore_order():
    assert are_equal_fields(
        [_field("a"), _field("b", "Int")], [_field("b", "Int"), _field("a")]
    )


def test_equal_fields_detect_type_change():
    assert not are_equal_fields([_field("a")], [_field("a", "Int")])


def test_equal_fields_detect_added_and_removed_fields():
    assert not are_equal_fields([_field("a")], [_field("a"), _field("b")])
    assert not are_equal_fields([_field("a"), _field("b")], [_field("a")])


def test_equal_fields_ignore_introspection_fields():
    assert are_equal_fields(
        [_field("a"), _field("__typename")], [_field("a")]
    )


def test_equal_fields_ignore_argument_and_directive_order():
    args = [
        Argument("id", NonNullType(NamedType("ID"))),
        Argument("input", NamedType("PersonUpdate")),
    ]
    directives = [AppliedDirective("alpha"), AppliedDirective("beta")]
    assert are_equal_fields(
        [_field("f", args=args, directives=directives)],
        [_field("f", args=args[::-1], directives=directives[::-1])],
    )


def test_equal_fields_detect_directive_argument_change():
    first = compile_schema(PEOPLE)
    person = first.get_type("Person")
    other = load_schema(
        print_schema(first).replace(
            '@hasInverse(field: "Pet.owner")', '@hasInverse(field: "Pet.x")'
        )
    ).get_type("Person")
    assert not are_equal_fields(person.fields, other.fields)


def test_schemas_equal_reflexive():
    schema = compile_schema(PEOPLE)
    assert are_equal_schemas(schema, schema)


def test_schemas_detect_added_field():
    first = compile_schema(PEOPLE)
    second = compile_schema(
        PEOPLE.replace("name: String!", "name: String!\n    age: Int")
    )
    assert not are_equal_schemas(first, second)
    assert not are_equal_schemas(second, first)
    assert are_equal_query(first, second)
    assert are_equal_mutation(first, second)


def test_schemas_detect_changed_field_type():
    first = compile_schema(PEOPLE)
    second = compile_schema(PEOPLE.replace("name: String!", "name: String"))
    assert not are_equal_schemas(first, second)


def test_missing_root_equals_empty_root():
    assert are_equal_query(Schema(), Schema(query_type=ObjectType("Query")))
    assert not are_equal_mutation(
        Schema(),
        Schema(mutation_type=ObjectType("Mutation", [_field("foo")])),
    )


@pytest.mark.parametrize(
    "type1, type2, expected",
    [
        (ObjectType("T", [_field("a")]), ObjectType("T", [_field("a")]), True),
        (
            ObjectType("T", [_field("a")]),
            InputObjectType("T", [_field("a")]),
            False,
        ),
        (EnumType("T", ["A", "B"]), EnumType("T", ["B", "A"]), True),
        (EnumType("T", ["A", "B"]), EnumType("T", ["A"]), False),
    ],
)
def test_equal_types(type1, type2, expected):
    assert are_equal_types({"T": type1}, {"T": type2}) is expected


def test_equal_types_only_compare_shared_types():
    assert are_equal_types(
        {"A": ObjectType("A", [_field("a")])},
        {
            "A": ObjectType("A", [_field("a")]),
            "B": ObjectType("B", [_field("b")]),
        },
    )
