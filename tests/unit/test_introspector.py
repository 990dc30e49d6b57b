"""
Unit tests for Django model introspection.
"""

import pytest
from django.contrib.auth import get_user_model
from django.db import models

from filter_schema.core.settings import FilterSchemaSettings
from filter_schema.generators.filters import Cardinality, PropertyKind
from filter_schema.generators.introspector import (
    DjangoMetadataProvider,
    ModelIntrospector,
    get_entity_name,
    is_model_excluded,
)
from tests.models import Address, Customer, Order, OrderItem, Snapshot
from tests.otherapp.models import Customer as OtherCustomer
from tests.otherapp.models import Profile

pytestmark = pytest.mark.unit


@pytest.fixture
def order_entity():
    return ModelIntrospector(Order).entity


def test_properties_follow_model_field_order(order_entity):
    assert order_entity.name == "tests.Order"
    assert [p.name for p in order_entity.properties] == [
        "items",
        "id",
        "amount",
        "status",
        "customer",
        "shipping_address",
        "snapshot",
        "placed_at",
        "note",
        "tags",
    ]


def test_scalar_type_names(order_entity):
    assert order_entity.get_property("id").type_name == "ID"
    assert order_entity.get_property("amount").type_name == "Decimal"
    assert order_entity.get_property("placed_at").type_name == "DateTime"
    assert order_entity.get_property("note").type_name == "String"


def test_choices_become_enum(order_entity):
    status = order_entity.get_property("status")

    assert status.kind is PropertyKind.ENUM
    assert status.type_name == "tests_Order_status_Enum"


def test_relations(order_entity):
    customer = order_entity.get_property("customer")
    items = order_entity.get_property("items")
    tags = order_entity.get_property("tags")

    assert customer.kind is PropertyKind.RELATION
    assert customer.cardinality is Cardinality.ONE
    assert customer.target_name == "tests.Customer"
    assert customer.persistable is True
    assert items.cardinality is Cardinality.MANY
    assert items.target_name == "tests.OrderItem"
    assert tags.cardinality is Cardinality.MANY


def test_unmanaged_and_transient_targets_are_not_persistable(order_entity):
    assert order_entity.get_property("shipping_address").persistable is False
    assert order_entity.get_property("snapshot").persistable is False


def test_reverse_one_to_one_is_single_valued():
    entity = ModelIntrospector(Snapshot).entity
    reverse = entity.get_property("order")

    assert reverse.cardinality is Cardinality.ONE
    assert reverse.target_name == "tests.Order"
    assert entity.get_property("payload").type_name == "JSONString"


def test_hidden_reverse_relations_are_skipped():
    names = [p.name for p in ModelIntrospector(Address).entity.properties]
    assert names == ["id", "street", "city"]


def test_models_sharing_a_class_name_get_distinct_entity_names():
    assert get_entity_name(Customer) == "tests.Customer"
    assert get_entity_name(OtherCustomer) == "otherapp.Customer"
    assert ModelIntrospector(OtherCustomer).entity.name == "otherapp.Customer"


def test_relations_to_excluded_models_are_omitted():
    entity = ModelIntrospector(Profile).entity

    assert is_model_excluded(get_user_model(), FilterSchemaSettings.from_schema())
    assert entity.get_property("user") is None
    assert entity.get_property("customer").target_name == "tests.Customer"


def test_relations_outside_available_models_are_omitted():
    entity = ModelIntrospector(Order, available_models=[Order, Customer]).entity

    assert entity.get_property("customer") is not None
    assert entity.get_property("items") is None
    assert entity.get_property("snapshot") is None
    assert entity.get_property("amount") is not None


def test_subclassed_field_uses_nearest_mapped_type():
    class Celsius(models.FloatField):
        pass

    introspector = ModelIntrospector(Customer)
    assert introspector.get_scalar_type_name(Celsius()) == "Float"


def test_unconvertible_field_falls_back_to_string():
    class Opaque(models.Field):
        pass

    introspector = ModelIntrospector(Customer)
    assert introspector.get_scalar_type_name(Opaque()) == "String"


def test_provider_lists_installed_models_without_excluded_apps():
    provider = DjangoMetadataProvider()
    names = {entity.name for entity in provider.get_entities()}

    assert {
        "tests.Customer",
        "tests.Order",
        "tests.OrderItem",
        "tests.Tag",
        "tests.Address",
        "tests.Snapshot",
        "otherapp.Customer",
        "otherapp.Profile",
    } <= names
    assert "contenttypes.ContentType" not in names
    assert "auth.User" not in names


def test_provider_honours_excluded_models():
    provider = DjangoMetadataProvider(
        settings=FilterSchemaSettings(excluded_models=["tests.Tag", "snapshot"])
    )
    entities = provider.get_entities(app_labels=["tests"])
    names = {entity.name for entity in entities}

    assert names == {"tests.Customer", "tests.Address", "tests.Order", "tests.OrderItem"}
    order = next(e for e in entities if e.name == "tests.Order")
    assert order.get_property("tags") is None
    assert order.get_property("snapshot") is None


def test_provider_app_filter_drops_relations_to_other_apps():
    entities = DjangoMetadataProvider().get_entities(app_labels=["otherapp"])
    profile = next(e for e in entities if e.name == "otherapp.Profile")

    assert [p.name for p in profile.properties] == ["id", "nickname"]


def test_provider_explicit_models():
    entities = DjangoMetadataProvider().get_entities([Order, OrderItem])

    assert [e.name for e in entities] == ["tests.Order", "tests.OrderItem"]
    assert entities[1].get_property("order").target_name == "tests.Order"
    assert entities[0].get_property("items").target_name == "tests.OrderItem"
    assert entities[0].get_property("customer") is None
