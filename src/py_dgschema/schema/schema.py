# -*- coding: utf-8 -*-
""" Schema definition. """

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..exc import UnknownType
from .types import Directive, ObjectType, TypeDefinition

Edge = Tuple[str, str]


class Schema:
    """ A compiled schema.

    This is the main container for a compiled schema: the user declared types,
    the seeded built-ins, the derived types and the root operation types.

    Args:
        types: Type declarations (excluding the root types)
        directives: Directive definitions
        query_type: The root query type
        mutation_type: The root mutation type

    Attributes:
        types (Dict[str, TypeDefinition]):
            Mapping ``type name -> declaration`` of all types in the schema,
            excluding the root types.

        directives (Dict[str, Directive]):
            Mapping ``directive name -> definition``.

        query_type (Optional[ObjectType]): The root query type.

        mutation_type (Optional[ObjectType]): The root mutation type.

        inverse_edges (Dict[Tuple[str, str], Tuple[str, str]]):
            Mapping ``(type name, field name) -> (type name, field name)`` of
            the two way edges declared with ``@hasInverse``.
    """

    __slots__ = (
        "types",
        "directives",
        "query_type",
        "mutation_type",
        "inverse_edges",
    )

    def __init__(
        self,
        types: Optional[Iterable[TypeDefinition]] = None,
        directives: Optional[Iterable[Directive]] = None,
        query_type: Optional[ObjectType] = None,
        mutation_type: Optional[ObjectType] = None,
    ):
        self.types = {}  # type: Dict[str, TypeDefinition]
        for type_ in types or ():
            if type_.name in self.types:
                raise ValueError('Duplicate type "%s"' % type_.name)
            self.types[type_.name] = type_

        self.directives = {
            d.name: d for d in directives or ()
        }  # type: Dict[str, Directive]
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.inverse_edges = {}  # type: Dict[Edge, Edge]

    def __repr__(self) -> str:
        return "<Schema (%d types)>" % len(self.types)

    def get_type(self, name: str) -> TypeDefinition:
        """
        Get a type by name.

        Args:
            name: Requested type name

        Returns:
            TypeDefinition: Type instance

        Raises:
            :class:`~py_dgschema.exc.UnknownType`:
                if ``name`` doesn't exist in the schema.
        """
        try:
            return self.types[name]
        except KeyError:
            raise UnknownType(name)

    def has_type(self, name: str) -> bool:
        return name in self.types

    def is_object_type(self, name: str) -> bool:
        return isinstance(self.types.get(name), ObjectType)

    @property
    def object_types(self) -> List[ObjectType]:
        """ Object types, sorted by name. """
        return [
            t
            for _, t in sorted(self.types.items())
            if isinstance(t, ObjectType)
        ]

    def inverse_of(self, type_name: str, field_name: str) -> Optional[Edge]:
        """ Inverse ``(type, field)`` of a field declared with
        ``@hasInverse``, if any. """
        return self.inverse_edges.get((type_name, field_name))

    def to_string(self, **kwargs: Any) -> str:
        """
        Format the schema in its canonical form.

        See :class:`py_dgschema.schema.printer.SchemaPrinter` for supported
        parameters.

        Returns:
            Canonical string representation of the schema.
        """
        from .printer import SchemaPrinter

        return SchemaPrinter(**kwargs)(self)
