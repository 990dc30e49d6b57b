from filter_schema.core.settings import FilterSchemaSettings
from filter_schema.generators.filters import (
    Cardinality,
    EntityDescriptor,
    FilterSchemaBuilder,
    PropertyDescriptor,
)

customer = EntityDescriptor(
    "Customer",
    (
        PropertyDescriptor.scalar("name", "String"),
        PropertyDescriptor.relation("orders", "Order", cardinality=Cardinality.MANY),
    ),
)

order = EntityDescriptor(
    "Order",
    (
        PropertyDescriptor.scalar("amount", "Decimal"),
        PropertyDescriptor.enum("status", "OrderStatus"),
        PropertyDescriptor.relation("items", "OrderItem", cardinality=Cardinality.MANY),
        PropertyDescriptor.relation("customer", "Customer"),
    ),
)

if __name__ == "__main__":
    builder = FilterSchemaBuilder(settings=FilterSchemaSettings(scalar_types=["String"]))
    registry = builder.build([customer, order])
    print(registry.to_sdl())
