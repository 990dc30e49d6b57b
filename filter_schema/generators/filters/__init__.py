"""
Filters Package for Filter Schema.

This package derives GraphQL filter condition and order-by input types from
entity property metadata.

Package Structure:
    - descriptors: Entity/property metadata and generated input type value objects
    - naming: Input type naming (NormalizedName, InputTypeNamer)
    - generator: FilterTypesGenerator deriving the input types
    - schema_builder: FilterSchemaBuilder assembling the types of many entities
    - types: graphene types shared by generated inputs (SortOrderEnum)

Example Usage:
    from filter_schema.generators.filters import (
        EntityDescriptor,
        PropertyDescriptor,
        FilterTypesGenerator,
    )

    order = EntityDescriptor("Order", (
        PropertyDescriptor.scalar("amount", "Decimal"),
        PropertyDescriptor.relation("customer", "Customer"),
    ))
    condition = FilterTypesGenerator().generate_filter_condition_type(order)
"""

from .descriptors import (
    SORT_ORDER_TYPE_NAME,
    STRING_TYPE_NAME,
    Cardinality,
    ConditionUnionType,
    EntityDescriptor,
    FilterConditionType,
    InputFieldDefinition,
    InputTypeDefinition,
    OrderByType,
    PropertyDescriptor,
    PropertyKind,
    SortOrder,
    list_value_def,
    value_def,
)
from .naming import (
    DEFAULT_INPUT_TYPE_PREFIX,
    FILTER_CONDITION_SUFFIX,
    ORDER_BY_SUFFIX,
    InputTypeNamer,
    NormalizedName,
    normalize_name,
)
from .generator import (
    SCALAR_COMPARISON_OPERATORS,
    STRING_LIKE_SCALARS,
    FilterTypesGenerator,
    generate_filter_condition_type_for_entity,
    generate_order_by_type_for_entity,
)
from .schema_builder import FilterSchemaBuilder
from .types import SortOrderEnum

__all__ = [
    # Descriptors
    "SORT_ORDER_TYPE_NAME",
    "STRING_TYPE_NAME",
    "Cardinality",
    "ConditionUnionType",
    "EntityDescriptor",
    "FilterConditionType",
    "InputFieldDefinition",
    "InputTypeDefinition",
    "OrderByType",
    "PropertyDescriptor",
    "PropertyKind",
    "SortOrder",
    "list_value_def",
    "value_def",
    # Naming
    "DEFAULT_INPUT_TYPE_PREFIX",
    "FILTER_CONDITION_SUFFIX",
    "ORDER_BY_SUFFIX",
    "InputTypeNamer",
    "NormalizedName",
    "normalize_name",
    # Generator
    "SCALAR_COMPARISON_OPERATORS",
    "STRING_LIKE_SCALARS",
    "FilterTypesGenerator",
    "generate_filter_condition_type_for_entity",
    "generate_order_by_type_for_entity",
    # Assembly
    "FilterSchemaBuilder",
    # Types
    "SortOrderEnum",
]
