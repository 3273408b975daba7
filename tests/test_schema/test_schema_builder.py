# -*- coding: utf-8 -*-

import pytest
from graphql import parse

from py_dgschema.exc import UnknownType
from py_dgschema.lang import parse_document
from py_dgschema.schema import (
    EnumType,
    InputObjectType,
    ListType,
    NamedType,
    NonNullType,
    ObjectType,
    ScalarType,
    Schema,
    build_schema,
)


def test_build_object_and_enum_types(fixture_file):
    schema = build_schema(parse_document(fixture_file("people.graphql")))

    person = schema.get_type("Person")
    assert isinstance(person, ObjectType)
    assert [f.name for f in person.fields] == [
        "id",
        "name",
        "age",
        "mood",
        "pets",
    ]
    assert person.field_map["pets"].type == ListType(
        NonNullType(NamedType("Pet"))
    )
    directive = person.field_map["pets"].directive("hasInverse")
    assert directive is not None
    assert directive.args["field"].value == "Pet.owner"

    mood = schema.get_type("Mood")
    assert isinstance(mood, EnumType)
    assert mood.values == ["HAPPY", "GRUMPY"]

    assert schema.query_type is None
    assert schema.mutation_type is None


def test_build_scalars_get_storage_types():
    schema = build_schema(parse("scalar DateTime\nscalar Custom"))
    assert schema.get_type("DateTime").storage_type == "dateTime"
    assert schema.get_type("Custom").storage_type is None
    assert isinstance(schema.get_type("Custom"), ScalarType)


def test_build_input_types_and_directives():
    schema = build_schema(
        parse(
            """
            directive @hasInverse(field: String!) on FIELD_DEFINITION
            input PersonRef { id: ID! }
            """
        )
    )
    ref = schema.get_type("PersonRef")
    assert isinstance(ref, InputObjectType)
    assert ref.field_map["id"].type == NonNullType(NamedType("ID"))

    directive = schema.directives["hasInverse"]
    assert directive.locations == ["FIELD_DEFINITION"]
    assert str(directive.argument_map["field"].type) == "String!"


def test_roots_are_extracted_when_loading():
    ast = parse(
        """
        type Query { getPerson(id: ID!): Person! }
        type Mutation { deletePerson(id: ID!): DeletePersonPayload! }
        type Person { id: ID! }
        """
    )
    schema = build_schema(ast, roots=True)
    assert schema.query_type.name == "Query"
    assert schema.query_type.fields[0].arguments[0].name == "id"
    assert schema.mutation_type.name == "Mutation"
    assert set(schema.types) == {"Person"}


def test_roots_are_regular_types_by_default():
    schema = build_schema(parse("type Query { foo: Int }"))
    assert schema.query_type is None
    assert "Query" in schema.types


def test_descriptions_are_kept():
    schema = build_schema(
        parse('"A person" type Person { "Their name" name: String }')
    )
    person = schema.get_type("Person")
    assert person.description == "A person"
    assert person.field_map["name"].description == "Their name"


def test_get_type_unknown():
    with pytest.raises(UnknownType):
        Schema().get_type("Person")


def test_schema_rejects_duplicate_types():
    with pytest.raises(ValueError):
        Schema([ObjectType("Person"), ObjectType("Person")])


def test_object_types_are_sorted():
    schema = Schema(
        [ObjectType("Pet"), EnumType("Mood", ["HAPPY"]), ObjectType("Person")]
    )
    assert [t.name for t in schema.object_types] == ["Person", "Pet"]
    assert schema.is_object_type("Pet")
    assert not schema.is_object_type("Mood")
