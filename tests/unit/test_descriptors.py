"""
Unit tests for entity metadata and input type descriptors.
"""

import pytest
from graphql import print_ast

from filter_schema.generators.exceptions import (
    InvalidArgumentError,
    UnsupportedPropertyKindError,
)
from filter_schema.generators.filters import (
    Cardinality,
    ConditionUnionType,
    EntityDescriptor,
    FilterConditionType,
    OrderByType,
    PropertyDescriptor,
    PropertyKind,
    list_value_def,
    value_def,
)

pytestmark = pytest.mark.unit


def test_relation_descriptor_exposes_target_as_value_type():
    prop = PropertyDescriptor.relation("customer", "Customer")

    assert prop.kind is PropertyKind.RELATION
    assert prop.cardinality is Cardinality.ONE
    assert prop.persistable is True
    assert prop.value_type_name == "Customer"


def test_descriptor_accepts_kind_and_cardinality_values():
    prop = PropertyDescriptor("lines", "relation", "many", target_name="OrderLine")

    assert prop.kind is PropertyKind.RELATION
    assert prop.cardinality.is_many
    assert prop.value_type_name == "OrderLine"


@pytest.mark.parametrize("kind", [PropertyKind.SCALAR, PropertyKind.ENUM])
def test_only_relations_can_be_to_many(kind):
    with pytest.raises(InvalidArgumentError) as exc:
        PropertyDescriptor("flags", kind, Cardinality.MANY, type_name="OrderFlag")

    assert exc.value.argument_name == "cardinality"


def test_unknown_kind_is_rejected():
    with pytest.raises(UnsupportedPropertyKindError) as exc:
        PropertyDescriptor("blob", "binary", type_name="Bytes")

    assert exc.value.property_name == "blob"
    assert exc.value.kind == "binary"


def test_relation_without_target_is_rejected():
    with pytest.raises(InvalidArgumentError) as exc:
        PropertyDescriptor("customer", PropertyKind.RELATION)

    assert exc.value.argument_name == "target_name"


def test_scalar_cannot_carry_relation_metadata():
    with pytest.raises(InvalidArgumentError):
        PropertyDescriptor(
            "amount", PropertyKind.SCALAR, type_name="Int", persistable=True
        )


def test_entity_rejects_duplicate_property_names():
    with pytest.raises(InvalidArgumentError) as exc:
        EntityDescriptor(
            "Order",
            [
                PropertyDescriptor.scalar("amount", "Int"),
                PropertyDescriptor.scalar("amount", "Float"),
            ],
        )

    assert exc.value.entity_name == "Order"


def test_entity_keeps_property_order_and_lookup():
    entity = EntityDescriptor(
        "Order",
        [
            PropertyDescriptor.scalar("amount", "Decimal"),
            PropertyDescriptor.enum("status", "OrderStatus"),
        ],
    )

    assert isinstance(entity.properties, tuple)
    assert [p.name for p in entity.properties] == ["amount", "status"]
    assert entity.get_property("status").kind is PropertyKind.ENUM
    assert entity.get_property("missing") is None


def test_condition_union_find():
    assert ConditionUnionType.find("AND") is ConditionUnionType.AND
    assert ConditionUnionType.find("OR") is ConditionUnionType.OR
    assert ConditionUnionType.find("NOT") is None
    assert ConditionUnionType.find(None) is None


def test_definitions_of_different_families_are_not_equal():
    fields = [value_def("amount", "SortOrder")]

    assert FilterConditionType("inp_X", fields) != OrderByType("inp_X", fields)
    assert OrderByType("inp_X", fields) == OrderByType("inp_X", tuple(fields))


def test_definition_renders_sdl():
    definition = FilterConditionType(
        "inp_OrderFilterCondition",
        [
            list_value_def("status", "String"),
            list_value_def("AND", "inp_OrderFilterCondition"),
        ],
        description="order conditions",
    )

    sdl = print_ast(definition.to_ast())

    assert '"order conditions"' in sdl
    assert "input inp_OrderFilterCondition {" in sdl
    assert "status: [String]" in sdl
    assert "AND: [inp_OrderFilterCondition]" in sdl
    assert definition.referenced_type_names == ("String", "inp_OrderFilterCondition")
