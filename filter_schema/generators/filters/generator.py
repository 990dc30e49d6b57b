"""
Filter condition and order-by input type generator.

This module provides the FilterTypesGenerator class that derives GraphQL
input type descriptions from entity property metadata.

Example generated schema:
    input inp_OrderFilterCondition {
        amount: [inp_DecimalFilterCondition]
        status: [String]
        customer: [inp_CustomerFilterCondition]
        AND: [inp_OrderFilterCondition]
        OR: [inp_OrderFilterCondition]
    }

    input inp_OrderOrderBy {
        amount: SortOrder
        status: [String]
        customer: inp_CustomerOrderBy
    }

Referenced types are named, never generated inline. Each referenced entity
or scalar gets its own generator call and the schema registry resolves the
references once everything is registered.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ...core.settings import FilterSchemaSettings
from ..exceptions import InvalidArgumentError, UnsupportedPropertyKindError
from .descriptors import (
    SORT_ORDER_TYPE_NAME,
    STRING_TYPE_NAME,
    ConditionUnionType,
    EntityDescriptor,
    FilterConditionType,
    InputFieldDefinition,
    OrderByType,
    PropertyDescriptor,
    PropertyKind,
    list_value_def,
    value_def,
)
from .naming import InputTypeNamer, NormalizedName

logger = logging.getLogger(__name__)

STRING_LIKE_SCALARS = frozenset({STRING_TYPE_NAME})

# no IN, NIN, IS_NULL or NOT members
SCALAR_COMPARISON_OPERATORS = (
    ("EQ", "equals"),
    ("NEQ", "not equals"),
    ("GT", "greater than"),
    ("GTE", "greater than or equals"),
    ("LT", "less than"),
    ("LTE", "less than or equals"),
)


class FilterTypesGenerator:
    """
    Derives filter condition and order-by input types.

    The generator holds no state besides its collaborators; every call reads
    immutable metadata and returns a fresh definition.

    Attributes:
        namer: Naming collaborator used for every composed type name
        settings: Filter schema settings
        schema_name: Schema name for multi-schema support
    """

    def __init__(
        self,
        namer: Optional[InputTypeNamer] = None,
        settings: Optional[FilterSchemaSettings] = None,
        schema_name: str = "default",
    ):
        self.schema_name = schema_name
        if settings is None:
            self.settings = FilterSchemaSettings.from_schema(schema_name)
        else:
            self.settings = settings
        self.namer = namer or InputTypeNamer(prefix=self.settings.input_type_prefix)

    def compose_filter_type_name(self, name: str, suffix: str) -> NormalizedName:
        return self.namer.compose_filter_type_name(name, suffix)

    def compose_filter_condition_type_name(self, name: str) -> NormalizedName:
        return self.namer.compose_filter_condition_type_name(name)

    def compose_order_by_type_name(self, name: str) -> NormalizedName:
        return self.namer.compose_order_by_type_name(name)

    def _describe(self, text: Optional[str]) -> Optional[str]:
        return text if self.settings.generate_descriptions else None

    def generate_scalar_filter_condition_type(
        self, scalar_type_name: str
    ) -> FilterConditionType:
        """
        Generate the comparison condition type for a scalar.

        Args:
            scalar_type_name: GraphQL scalar name such as ``String`` or ``Int``

        Returns:
            FilterConditionType with EQ/NEQ/GT/GTE/LT/LTE and AND/OR fields

        Raises:
            InvalidArgumentError: if the scalar name is empty
        """
        if not isinstance(scalar_type_name, str) or not scalar_type_name.strip():
            raise InvalidArgumentError(
                f"Scalar type name must be a non-empty string, got {scalar_type_name!r}",
                argument_name="scalar_type_name",
            )
        scalar_type_name = scalar_type_name.strip()
        name = self.compose_filter_condition_type_name(scalar_type_name)

        fields: List[InputFieldDefinition] = [
            value_def(operator, scalar_type_name, self._describe(description))
            for operator, description in SCALAR_COMPARISON_OPERATORS
        ]
        fields.extend(self._union_fields(name))

        logger.debug(f"Generated scalar filter condition {name} for {scalar_type_name}")
        return FilterConditionType(
            name=name,
            fields=fields,
            description=self._describe(
                f"expression to compare columns of type {scalar_type_name}. "
                "All fields are combined with logical 'AND'"
            ),
        )

    def generate_filter_condition_type(
        self, entity: EntityDescriptor
    ) -> FilterConditionType:
        """Generate the filter condition type for an entity."""
        name = self.compose_filter_condition_type_name(entity.name)
        fields: List[InputFieldDefinition] = []

        for prop in entity.properties:
            kind = self._check_kind(entity, prop)

            if not self.supports_cardinality(prop):
                logger.debug(
                    f"Skipping to-many property {entity.name}.{prop.name} in filter condition"
                )
                continue

            # enum values are not validated against the enum's members
            if kind is PropertyKind.ENUM:
                fields.append(list_value_def(prop.name, STRING_TYPE_NAME))
                continue

            type_name = self.compose_filter_condition_type_name(prop.value_type_name)
            fields.append(list_value_def(prop.name, type_name))

        fields.extend(self._union_fields(name))

        logger.debug(f"Generated filter condition {name} for entity {entity.name}")
        return FilterConditionType(name=name, fields=fields)

    def generate_order_by_type(self, entity: EntityDescriptor) -> OrderByType:
        """Generate the order-by type for an entity. No AND/OR fields are added."""
        name = self.compose_order_by_type_name(entity.name)
        fields: List[InputFieldDefinition] = []

        for prop in entity.properties:
            field = self._order_by_field(entity, prop)
            if field is not None:
                fields.append(field)

        if not fields:
            logger.warning(f"Order-by {name} has no sortable fields")
        logger.debug(f"Generated order-by {name} for entity {entity.name}")
        return OrderByType(name=name, fields=fields)

    def _order_by_field(
        self, entity: EntityDescriptor, prop: PropertyDescriptor
    ) -> Optional[InputFieldDefinition]:
        kind = self._check_kind(entity, prop)

        if not self.supports_cardinality(prop):
            logger.debug(f"Skipping to-many property {entity.name}.{prop.name} in order-by")
            return None

        # enums keep the condition layout instead of a sort direction
        if kind is PropertyKind.ENUM:
            return list_value_def(prop.name, STRING_TYPE_NAME)

        if kind is PropertyKind.SCALAR and prop.type_name in STRING_LIKE_SCALARS:
            return value_def(prop.name, SORT_ORDER_TYPE_NAME)

        if kind is PropertyKind.RELATION:
            if not self.supports_order_by_relation(prop):
                logger.debug(
                    f"Skipping non-persistable relation {entity.name}.{prop.name} in order-by"
                )
                return None
            return value_def(prop.name, self.compose_order_by_type_name(prop.target_name))

        return value_def(prop.name, SORT_ORDER_TYPE_NAME)

    @staticmethod
    def supports_cardinality(prop: PropertyDescriptor) -> bool:
        """To-many properties are not filterable or sortable."""
        return not prop.cardinality.is_many

    @staticmethod
    def supports_order_by_relation(prop: PropertyDescriptor) -> bool:
        """Only relations to persistable entities can be sorted on."""
        return bool(prop.persistable)

    def _union_fields(self, type_name: str) -> List[InputFieldDefinition]:
        return [list_value_def(member.name, type_name) for member in ConditionUnionType]

    @staticmethod
    def _check_kind(entity: EntityDescriptor, prop: PropertyDescriptor) -> PropertyKind:
        kind = getattr(prop, "kind", None)
        if not isinstance(kind, PropertyKind):
            raise UnsupportedPropertyKindError(
                f"Unsupported kind {kind!r} for property '{entity.name}.{prop.name}'",
                entity_name=entity.name,
                property_name=prop.name,
                kind=kind,
            )
        return kind


def generate_filter_condition_type_for_entity(
    entity: EntityDescriptor, schema_name: str = "default"
) -> FilterConditionType:
    """Generate a filter condition type using the schema's settings."""
    return FilterTypesGenerator(schema_name=schema_name).generate_filter_condition_type(entity)


def generate_order_by_type_for_entity(
    entity: EntityDescriptor, schema_name: str = "default"
) -> OrderByType:
    """Generate an order-by type using the schema's settings."""
    return FilterTypesGenerator(schema_name=schema_name).generate_order_by_type(entity)


__all__ = [
    "FilterTypesGenerator",
    "STRING_LIKE_SCALARS",
    "SCALAR_COMPARISON_OPERATORS",
    "generate_filter_condition_type_for_entity",
    "generate_order_by_type_for_entity",
]
