"""
Metadata and input-type descriptors for filter schema generation.

Entity metadata (``EntityDescriptor`` / ``PropertyDescriptor``) is supplied by a
metadata provider and never mutated here. Generated input types
(``FilterConditionType`` / ``OrderByType``) are plain value objects identified
by their name; the schema registry turns them into graphene types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from graphql.language import (
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    StringValueNode,
)

from ..exceptions import InvalidArgumentError, UnsupportedPropertyKindError

STRING_TYPE_NAME = "String"
SORT_ORDER_TYPE_NAME = "SortOrder"


class PropertyKind(Enum):
    SCALAR = "scalar"
    ENUM = "enum"
    RELATION = "relation"


class Cardinality(Enum):
    ONE = "one"
    MANY = "many"

    @property
    def is_many(self) -> bool:
        return self is Cardinality.MANY


class ConditionUnionType(Enum):
    """Logical union members appended to every filter condition type."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def find(cls, name: Optional[str]) -> Optional["ConditionUnionType"]:
        """Return the member called ``name`` or None."""
        for member in cls:
            if member.name == name:
                return member
        return None


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def _coerce_enum(enum_cls, value, property_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise UnsupportedPropertyKindError(
            f"Unsupported {enum_cls.__name__} {value!r} for property '{property_name}'",
            property_name=property_name,
            kind=value,
        ) from None


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Metadata of a single entity property.

    ``type_name`` is the scalar or enum type name for SCALAR/ENUM properties.
    ``target_name`` and ``persistable`` are only meaningful for RELATION
    properties, and only relations may be to-many. Use the
    ``scalar``/``enum``/``relation`` constructors rather than filling the
    fields by hand.
    """

    name: str
    kind: PropertyKind
    cardinality: Cardinality = Cardinality.ONE
    type_name: Optional[str] = None
    target_name: Optional[str] = None
    persistable: Optional[bool] = None

    def __post_init__(self):
        if not self.name or not str(self.name).strip():
            raise InvalidArgumentError(
                "Property name must be a non-empty string", argument_name="name"
            )
        object.__setattr__(self, "kind", _coerce_enum(PropertyKind, self.kind, self.name))
        if not isinstance(self.cardinality, Cardinality):
            try:
                object.__setattr__(self, "cardinality", Cardinality(self.cardinality))
            except ValueError:
                raise InvalidArgumentError(
                    f"Unknown cardinality {self.cardinality!r} for property '{self.name}'",
                    argument_name="cardinality",
                ) from None

        if self.kind is PropertyKind.RELATION:
            if not self.target_name:
                raise InvalidArgumentError(
                    f"Relation property '{self.name}' requires a target name",
                    argument_name="target_name",
                )
            if self.persistable is None:
                object.__setattr__(self, "persistable", True)
        else:
            if self.target_name is not None or self.persistable is not None:
                raise InvalidArgumentError(
                    f"Only relation properties carry a target ('{self.name}' is {self.kind.name})",
                    argument_name="target_name",
                )
            if self.cardinality.is_many:
                raise InvalidArgumentError(
                    f"Only relation properties can be to-many ('{self.name}' is {self.kind.name})",
                    argument_name="cardinality",
                )
            if not self.type_name:
                raise InvalidArgumentError(
                    f"Property '{self.name}' requires a type name",
                    argument_name="type_name",
                )

    @classmethod
    def scalar(cls, name: str, type_name: str) -> "PropertyDescriptor":
        return cls(name, PropertyKind.SCALAR, type_name=type_name)

    @classmethod
    def enum(cls, name: str, type_name: str) -> "PropertyDescriptor":
        return cls(name, PropertyKind.ENUM, type_name=type_name)

    @classmethod
    def relation(
        cls,
        name: str,
        target_name: str,
        cardinality: Cardinality = Cardinality.ONE,
        persistable: bool = True,
    ) -> "PropertyDescriptor":
        return cls(
            name,
            PropertyKind.RELATION,
            cardinality,
            target_name=target_name,
            persistable=persistable,
        )

    @property
    def value_type_name(self) -> str:
        """Name of the type this property holds: the target for relations."""
        if self.kind is PropertyKind.RELATION:
            return self.target_name
        return self.type_name


@dataclass(frozen=True)
class EntityDescriptor:
    """An entity name and its properties in declaration order."""

    name: str
    properties: Tuple[PropertyDescriptor, ...] = ()

    def __post_init__(self):
        if not self.name or not str(self.name).strip():
            raise InvalidArgumentError(
                "Entity name must be a non-empty string", argument_name="name"
            )
        properties = tuple(self.properties)
        seen = set()
        for prop in properties:
            if prop.name in seen:
                raise InvalidArgumentError(
                    f"Duplicate property '{prop.name}' on entity '{self.name}'",
                    argument_name="properties",
                    entity_name=self.name,
                )
            seen.add(prop.name)
        object.__setattr__(self, "properties", properties)

    def get_property(self, name: str) -> Optional[PropertyDescriptor]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass(frozen=True)
class InputFieldDefinition:
    """A named, typed field of an input type."""

    name: str
    type_name: str
    is_list: bool = False
    description: Optional[str] = None

    def to_ast(self) -> InputValueDefinitionNode:
        type_node: Any = NamedTypeNode(name=NameNode(value=self.type_name))
        if self.is_list:
            type_node = ListTypeNode(type=type_node)
        return InputValueDefinitionNode(
            name=NameNode(value=self.name),
            type=type_node,
            description=_description_node(self.description),
            directives=(),
        )


def value_def(
    name: str, type_name: str, description: Optional[str] = None
) -> InputFieldDefinition:
    return InputFieldDefinition(name, type_name, False, description)


def list_value_def(
    name: str, type_name: str, description: Optional[str] = None
) -> InputFieldDefinition:
    return InputFieldDefinition(name, type_name, True, description)


def _description_node(description: Optional[str]) -> Optional[StringValueNode]:
    if not description:
        return None
    return StringValueNode(value=description, block=False)


@dataclass(frozen=True)
class InputTypeDefinition:
    """Named input type with an ordered tuple of fields."""

    name: str
    fields: Tuple[InputFieldDefinition, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get_field(self, name: str) -> Optional[InputFieldDefinition]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def referenced_type_names(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(f.type_name for f in self.fields))

    def to_ast(self) -> InputObjectTypeDefinitionNode:
        """Render as a graphql-core AST node, printable with ``print_ast``."""
        return InputObjectTypeDefinitionNode(
            name=NameNode(value=self.name),
            description=_description_node(self.description),
            directives=(),
            fields=tuple(f.to_ast() for f in self.fields),
        )


@dataclass(frozen=True)
class FilterConditionType(InputTypeDefinition):
    """Input type whose fields are comparison operators or nested conditions."""


@dataclass(frozen=True)
class OrderByType(InputTypeDefinition):
    """Input type whose fields carry a sort direction per property."""


__all__ = [
    "STRING_TYPE_NAME",
    "SORT_ORDER_TYPE_NAME",
    "PropertyKind",
    "Cardinality",
    "ConditionUnionType",
    "SortOrder",
    "PropertyDescriptor",
    "EntityDescriptor",
    "InputFieldDefinition",
    "InputTypeDefinition",
    "FilterConditionType",
    "OrderByType",
    "value_def",
    "list_value_def",
]
