# -*- coding: utf-8 -*-
"""
Derivation of the auxiliary types and root operations exposed for every
object type of a schema.

Derivation runs in two phases: :meth:`TypeDeriver.derive` computes every
derived declaration without touching the schema and
:meth:`TypeDeriver.commit` adds them all at once. This module assumes the
schema went through validation and reports any broken expectation as an
:class:`~py_dgschema.exc.InternalInvariantError`.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .exc import InternalInvariantError, RuleViolation
from .schema.builder import MUTATION_TYPE_NAME, QUERY_TYPE_NAME
from .schema.directives import get_inverse_args, get_inverse_directive
from .schema.scalars import ID, String
from .schema.schema import Schema
from .schema.types import (
    Argument,
    Field,
    GraphQLType,
    InputObjectType,
    ListType,
    NamedType,
    NonNullType,
    ObjectType,
    TypeDefinition,
    map_named_type,
    nullable_type,
    unwrap_type,
)

logger = logging.getLogger(__name__)

QUERY_DESCRIPTION = "Query object contains all the query functions"
MUTATION_DESCRIPTION = "Mutation object contains all the mutation functions"

FILTER_FIELD = "dgraph"
DELETE_PAYLOAD_FIELD = "msg"

Edge = Tuple[str, str]


def input_type_name(name: str) -> str:
    return "%sInput" % name


def ref_type_name(name: str) -> str:
    return "%sRef" % name


def update_type_name(name: str) -> str:
    return "%sUpdate" % name


def filter_type_name(name: str) -> str:
    return "%sFilter" % name


def add_payload_name(name: str) -> str:
    return "Add%sPayload" % name


def update_payload_name(name: str) -> str:
    return "Update%sPayload" % name


def delete_payload_name(name: str) -> str:
    return "Delete%sPayload" % name


def derived_type_names(name: str) -> Tuple[str, ...]:
    """ Names of all the types which can be derived from an object type.

    >>> derived_type_names("Person")  # doctest: +NORMALIZE_WHITESPACE
    ('PersonInput', 'PersonRef', 'PersonUpdate', 'PersonFilter',
     'AddPersonPayload', 'UpdatePersonPayload', 'DeletePersonPayload')
    """
    return (
        input_type_name(name),
        ref_type_name(name),
        update_type_name(name),
        filter_type_name(name),
        add_payload_name(name),
        update_payload_name(name),
        delete_payload_name(name),
    )


def is_id_field(field: Field) -> bool:
    return unwrap_type(field.type).name == ID.name


def id_field(type_: ObjectType) -> Optional[Field]:
    """ Identifying field of an object type, if any. """
    for field in type_.fields:
        if is_id_field(field):
            return field
    return None


class DerivedTypeSet:
    """
    Everything derived from a single object type.

    Attributes:
        origin (str): Name of the object type
        types (List[TypeDefinition]): Derived declarations
        query_fields (List[Field]): ``Query`` fields
        mutation_fields (List[Field]): ``Mutation`` fields
        inverse_edges (Dict[Tuple[str, str], Tuple[str, str]]): Inverse edges
            declared on the object type's fields
    """

    __slots__ = (
        "origin",
        "types",
        "query_fields",
        "mutation_fields",
        "inverse_edges",
    )

    def __init__(
        self,
        origin: str,
        types: List[TypeDefinition],
        query_fields: List[Field],
        mutation_fields: List[Field],
        inverse_edges: Dict[Edge, Edge],
    ):
        self.origin = origin
        self.types = types
        self.query_fields = query_fields
        self.mutation_fields = mutation_fields
        self.inverse_edges = inverse_edges

    def __repr__(self) -> str:
        return "<DerivedTypeSet %s (%d types)>" % (self.origin, len(self.types))

    def __getitem__(self, name: str) -> TypeDefinition:
        for type_ in self.types:
            if type_.name == name:
                return type_
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(t.name == name for t in self.types)


class TypeDeriver:
    """
    Derive the API types and root operations of a schema.

    Args:
        schema: Built schema, modified in place on :meth:`commit`
    """

    __slots__ = ("schema",)

    def __init__(self, schema: Schema):
        self.schema = schema

    def derive(self) -> List[DerivedTypeSet]:
        """ Compute the derived declarations of every object type, sorted by
        name, without modifying the schema. """
        return [self.derive_type(t) for t in self.schema.object_types]

    def derive_type(self, type_: ObjectType) -> DerivedTypeSet:
        name = type_.name
        input_fields = self._input_fields(type_)
        types = []  # type: List[TypeDefinition]

        ident = id_field(type_)
        if ident is not None:
            types.append(
                InputObjectType(
                    ref_type_name(name), [ident.copy()], origin=name
                )
            )

        types.extend(
            [
                InputObjectType(
                    input_type_name(name), input_fields, origin=name
                ),
                InputObjectType(
                    update_type_name(name),
                    [f.copy(type_=nullable_type(f.type)) for f in input_fields],
                    origin=name,
                ),
                InputObjectType(
                    filter_type_name(name),
                    [Field(FILTER_FIELD, NamedType(String.name))],
                    origin=name,
                ),
                ObjectType(
                    add_payload_name(name),
                    [_payload_field(name)],
                    origin=name,
                ),
                ObjectType(
                    update_payload_name(name),
                    [_payload_field(name)],
                    origin=name,
                ),
                ObjectType(
                    delete_payload_name(name),
                    [
                        Field(
                            DELETE_PAYLOAD_FIELD,
                            NonNullType(NamedType(String.name)),
                        )
                    ],
                    origin=name,
                ),
            ]
        )

        return DerivedTypeSet(
            name,
            types,
            _query_fields(name),
            _mutation_fields(name),
            self._inverse_edges(type_),
        )

    def _input_fields(self, type_: ObjectType) -> List[Field]:
        fields = []
        for field in type_.fields:
            if is_id_field(field):
                continue

            field_type_name = unwrap_type(field.type).name
            if not self.schema.has_type(field_type_name):
                raise InternalInvariantError(
                    "Type %s of field %s.%s is not in the schema"
                    % (field_type_name, type_.name, field.name)
                )

            if self.schema.is_object_type(field_type_name):
                fields.append(
                    Field(
                        field.name,
                        map_named_type(
                            field.type,
                            lambda t: NamedType(ref_type_name(t.name)),
                        ),
                    )
                )
            else:
                fields.append(field.copy())
        return fields

    def _inverse_edges(self, type_: ObjectType) -> Dict[Edge, Edge]:
        edges = {}  # type: Dict[Edge, Edge]
        for field in type_.fields:
            directive = get_inverse_directive(field)
            if directive is None:
                continue
            try:
                edges[(type_.name, field.name)] = get_inverse_args(
                    directive, type_.name, field.name
                )
            except RuleViolation as err:
                raise InternalInvariantError(str(err)) from err
        return edges

    def commit(self, derived: List[DerivedTypeSet]) -> Schema:
        """ Add all derived declarations and fresh root types to the schema.

        Raises:
            :class:`~py_dgschema.exc.InternalInvariantError`: if a derived name
                is already used, in which case the schema is left untouched.
        """
        seen = set()
        for entry in derived:
            for type_ in entry.types:
                if self.schema.has_type(type_.name) or type_.name in seen:
                    raise InternalInvariantError(
                        "Derived type %s (from %s) already exists"
                        % (type_.name, entry.origin)
                    )
                seen.add(type_.name)

        query_fields = []  # type: List[Field]
        mutation_fields = []  # type: List[Field]
        for entry in derived:
            for type_ in entry.types:
                self.schema.types[type_.name] = type_
            query_fields.extend(entry.query_fields)
            mutation_fields.extend(entry.mutation_fields)
            self.schema.inverse_edges.update(entry.inverse_edges)

        self.schema.query_type = ObjectType(
            QUERY_TYPE_NAME, query_fields, description=QUERY_DESCRIPTION
        )
        self.schema.mutation_type = ObjectType(
            MUTATION_TYPE_NAME,
            mutation_fields,
            description=MUTATION_DESCRIPTION,
        )

        logger.debug(
            "Committed %d derived types, %d query fields, %d mutation fields",
            len(seen),
            len(query_fields),
            len(mutation_fields),
        )
        return self.schema


def derive_schema(schema: Schema) -> Schema:
    """ Derive and commit the API of a built schema in one step. """
    deriver = TypeDeriver(schema)
    return deriver.commit(deriver.derive())


def _non_null(name: str) -> GraphQLType:
    return NonNullType(NamedType(name))


def _id_argument() -> Argument:
    return Argument("id", _non_null(ID.name))


def _payload_field(name: str) -> Field:
    return Field(name.lower(), _non_null(name))


def _query_fields(name: str) -> List[Field]:
    return [
        Field(
            "get%s" % name,
            _non_null(name),
            args=[_id_argument()],
            description="Query %s by ID" % name,
        ),
        Field(
            "query%s" % name,
            NonNullType(ListType(_non_null(name))),
            args=[Argument("filter", _non_null(filter_type_name(name)))],
            description="Query %s" % name,
        ),
    ]


def _mutation_fields(name: str) -> List[Field]:
    return [
        Field(
            "add%s" % name,
            _non_null(add_payload_name(name)),
            args=[Argument("input", _non_null(input_type_name(name)))],
            description="Function for adding %s" % name,
        ),
        Field(
            "update%s" % name,
            _non_null(update_payload_name(name)),
            args=[
                _id_argument(),
                Argument("input", NamedType(update_type_name(name))),
            ],
            description="Function for updating %s" % name,
        ),
        Field(
            "delete%s" % name,
            _non_null(delete_payload_name(name)),
            args=[_id_argument()],
            description="Function for deleting %s" % name,
        ),
    ]
