from django.db import models


class Customer(models.Model):
    name = models.CharField(max_length=120)
    email = models.EmailField(unique=True)
    loyalty_points = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "tests"


class Address(models.Model):
    street = models.CharField(max_length=200)
    city = models.CharField(max_length=100)

    class Meta:
        app_label = "tests"
        managed = False


class Snapshot(models.Model):
    payload = models.JSONField(default=dict)

    class Meta:
        app_label = "tests"


class Tag(models.Model):
    name = models.CharField(max_length=50)

    class Meta:
        app_label = "tests"


class Order(models.Model):
    STATUS_CHOICES = [
        ("new", "New"),
        ("paid", "Paid"),
        ("shipped", "Shipped"),
    ]

    amount = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="new")
    customer = models.ForeignKey(
        Customer, on_delete=models.CASCADE, related_name="orders"
    )
    shipping_address = models.ForeignKey(
        Address, null=True, on_delete=models.SET_NULL, related_name="+"
    )
    snapshot = models.OneToOneField(
        Snapshot, null=True, on_delete=models.SET_NULL, related_name="order"
    )
    placed_at = models.DateTimeField()
    note = models.TextField(blank=True)
    tags = models.ManyToManyField(Tag, blank=True, related_name="orders")

    class Meta:
        app_label = "tests"


class OrderItem(models.Model):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product_name = models.CharField(max_length=120)
    quantity = models.PositiveIntegerField(default=1)

    class Meta:
        app_label = "tests"
