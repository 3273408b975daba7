# -*- coding: utf-8 -*-

import pytest

from py_dgschema import compile_schema
from py_dgschema.derivation import (
    DerivedTypeSet,
    TypeDeriver,
    derive_schema,
    derived_type_names,
)
from py_dgschema.exc import InternalInvariantError
from py_dgschema.lang import parse_document
from py_dgschema.schema import (
    EnumType,
    Field,
    InputObjectType,
    NamedType,
    NonNullType,
    ObjectType,
    Schema,
    build_schema,
    nullable_type,
    print_field,
)


def _fields(type_):
    return [print_field(f) for f in type_.fields]


def _built(source):
    return build_schema(parse_document(source))


def test_scenario_person():
    schema = compile_schema("type Person { id: ID! name: String! }")

    assert _fields(schema.get_type("PersonInput")) == ["name: String!"]
    assert _fields(schema.get_type("PersonRef")) == ["id: ID!"]
    assert _fields(schema.get_type("PersonUpdate")) == ["name: String"]
    assert _fields(schema.get_type("PersonFilter")) == ["dgraph: String"]
    assert _fields(schema.get_type("AddPersonPayload")) == ["person: Person!"]
    assert _fields(schema.get_type("UpdatePersonPayload")) == [
        "person: Person!"
    ]
    assert _fields(schema.get_type("DeletePersonPayload")) == ["msg: String!"]

    assert _fields(schema.query_type) == [
        "getPerson(id: ID!): Person!",
        "queryPerson(filter: PersonFilter!): [Person!]!",
    ]
    assert _fields(schema.mutation_type) == [
        "addPerson(input: PersonInput!): AddPersonPayload!",
        "updatePerson(id: ID!, input: PersonUpdate): UpdatePersonPayload!",
        "deletePerson(id: ID!): DeletePersonPayload!",
    ]


def test_object_fields_become_references(people_schema):
    assert _fields(people_schema.get_type("PetInput")) == [
        "name: String!",
        "owner: PersonRef!",
    ]
    assert _fields(people_schema.get_type("PersonInput")) == [
        "name: String!",
        "age: Int",
        "mood: Mood",
        "pets: [PetRef!]",
    ]


def test_list_wrapping_is_preserved():
    schema = compile_schema(
        """
        type Person { id: ID! pets: [Pet!]! }
        type Pet { id: ID! }
        """
    )
    assert _fields(schema.get_type("PersonInput")) == ["pets: [PetRef!]!"]
    assert _fields(schema.get_type("PersonUpdate")) == ["pets: [PetRef!]"]


def test_update_is_input_with_nullable_fields(people_schema):
    for origin in ("Person", "Pet"):
        input_ = people_schema.get_type("%sInput" % origin)
        update = people_schema.get_type("%sUpdate" % origin)
        assert [f.name for f in update.fields] == [
            f.name for f in input_.fields
        ]
        for input_field, update_field in zip(input_.fields, update.fields):
            assert update_field.type == nullable_type(input_field.type)
            assert not isinstance(update_field.type, NonNullType)


def test_reference_fields_drop_directives():
    schema = compile_schema(
        """
        type Person {
            id: ID!
            pets: [Pet] @hasInverse(field: "Pet.owner")
        }
        type Pet { id: ID! owner: Person }
        """
    )
    assert schema.get_type("Person").field_map["pets"].directives
    assert schema.get_type("PersonInput").field_map["pets"].directives == []


def test_derived_counts(people_schema):
    derived = [t for t in people_schema.types.values() if t.origin]
    assert len(derived) == 7 * 2
    assert len(people_schema.query_type.fields) == 2 * 2
    assert len(people_schema.mutation_type.fields) == 3 * 2


def test_ref_is_omitted_without_id_field():
    schema = compile_schema("type Note { text: String }")
    derived = {t.name for t in schema.types.values() if t.origin == "Note"}
    assert derived == set(derived_type_names("Note")) - {"NoteRef"}
    assert _fields(schema.get_type("NoteInput")) == ["text: String"]


def test_root_descriptions():
    schema = compile_schema("type Person { id: ID! }")
    assert schema.query_type.description == (
        "Query object contains all the query functions"
    )
    assert schema.mutation_type.description == (
        "Mutation object contains all the mutation functions"
    )
    assert [f.description for f in schema.query_type.fields] == [
        "Query Person by ID",
        "Query Person",
    ]
    assert [f.description for f in schema.mutation_type.fields] == [
        "Function for adding Person",
        "Function for updating Person",
        "Function for deleting Person",
    ]


def test_root_fields_follow_sorted_type_order(people_schema):
    assert [f.name for f in people_schema.query_type.fields] == [
        "getPerson",
        "queryPerson",
        "getPet",
        "queryPet",
    ]


def test_inverse_edges(people_schema):
    assert people_schema.inverse_edges == {
        ("Person", "pets"): ("Pet", "owner"),
        ("Pet", "owner"): ("Person", "pets"),
    }
    assert people_schema.inverse_of("Person", "pets") == ("Pet", "owner")
    assert people_schema.inverse_of("Person", "name") is None


def test_derived_types_do_not_share_state(people_schema):
    person = people_schema.get_type("Person")
    input_ = people_schema.get_type("PersonInput")
    update = people_schema.get_type("PersonUpdate")

    assert input_.fields is not person.fields
    for field in input_.fields:
        source = person.field_map[field.name]
        assert field is not source
        assert field.type is not source.type

    for input_field, update_field in zip(input_.fields, update.fields):
        assert input_field is not update_field
        assert input_field.type is not update_field.type

    ref = people_schema.get_type("PersonRef")
    assert ref.fields[0] is not person.field_map["id"]


def test_derive_does_not_modify_schema():
    schema = _built("type Person { id: ID! }")
    deriver = TypeDeriver(schema)
    derived = deriver.derive()

    assert len(derived) == 1
    assert isinstance(derived[0], DerivedTypeSet)
    assert "PersonInput" in derived[0]
    assert derived[0]["PersonInput"].origin == "Person"
    assert set(schema.types) == {"Person"}
    assert schema.query_type is None

    deriver.commit(derived)
    assert "PersonInput" in schema.types
    assert schema.query_type is not None


def test_derive_iterates_sorted_object_types():
    schema = _built("type Zoo { id: ID! }\ntype Ant { id: ID! }")
    assert [d.origin for d in TypeDeriver(schema).derive()] == ["Ant", "Zoo"]


def test_commit_collision_is_internal_error():
    schema = Schema(
        [
            ObjectType("Person", [Field("id", NonNullType(NamedType("ID")))]),
            InputObjectType("PersonInput"),
        ]
    )
    with pytest.raises(InternalInvariantError):
        derive_schema(schema)
    assert schema.query_type is None


def test_unknown_field_type_is_internal_error():
    schema = Schema(
        [ObjectType("Person", [Field("friend", NamedType("Ghost"))])]
    )
    with pytest.raises(InternalInvariantError):
        TypeDeriver(schema).derive()


def test_malformed_inverse_is_internal_error():
    schema = _built(
        """
        type Person { id: ID! pets: [Pet] @hasInverse(field: "nodot") }
        type Pet { id: ID! owner: Person }
        """
    )
    with pytest.raises(InternalInvariantError):
        TypeDeriver(schema).derive()


def test_missing_inverse_argument_is_internal_error():
    schema = _built(
        """
        type Person { id: ID! pets: [Pet] @hasInverse }
        type Pet { id: ID! owner: Person }
        """
    )
    with pytest.raises(InternalInvariantError):
        TypeDeriver(schema).derive()


def test_enum_fields_are_copied():
    schema = Schema(
        [
            EnumType("Mood", ["HAPPY"]),
            ObjectType(
                "Person",
                [
                    Field("id", NonNullType(NamedType("ID"))),
                    Field("mood", NonNullType(NamedType("Mood"))),
                ],
            ),
        ]
    )
    derive_schema(schema)
    assert _fields(schema.get_type("PersonInput")) == ["mood: Mood!"]
    assert _fields(schema.get_type("PersonUpdate")) == ["mood: Mood"]


def test_copied_fields_keep_directives():
    schema = _built(
        """
        scalar String
        type Person { id: ID! nick: String @hasInverse(field: "Person.nick") }
        """
    )
    derive_schema(schema)
    nick = schema.get_type("PersonInput").field_map["nick"]
    assert print_field(nick) == 'nick: String @hasInverse(field: "Person.nick")'
    assert nick.directives[0] is not (
        schema.get_type("Person").field_map["nick"].directives[0]
    )
