"""Unit tests for OrderDjangoRepository.

Covers:
- Aggregate creation (Order + OrderItems) atomically.
- Read with eager-loaded relations.
- Edge cases (invalid UUIDs, non-existent orders).
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.orders.dtos import OrderLineDTO
from modules.orders.models import OrderItem
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.repositories.interfaces import IOrderRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


@pytest.fixture()
def order_data(customer, make_product):
    product_a = make_product(name="Product A", price=Decimal("10.00"))
    product_b = make_product(name="Product B", price=Decimal("25.50"))
    return {
        "customer": customer,
        "items": [
            OrderLineDTO(
                product_id=str(product_a.id),
                unit_price=product_a.price,
                quantity=2,
            ),
            OrderLineDTO(
                product_id=str(product_b.id),
                unit_price=product_b.price,
                quantity=1,
            ),
        ],
    }


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self):
        assert isinstance(OrderDjangoRepository(), IOrderRepository)


class TestCreate:
    def test_creates_order_with_items(self, repo, order_data, customer):
        order = repo.create(order_data)

        assert order.id is not None
        assert order.customer_id == customer.id
        assert OrderItem.objects.filter(order=order).count() == 2

    def test_items_snapshot_price_and_quantity(self, repo, order_data):
        order = repo.create(order_data)

        items = {str(item.product_id): item for item in order.items.all()}
        for line in order_data["items"]:
            assert items[line.product_id].unit_price == line.unit_price
            assert items[line.product_id].quantity == line.quantity


class TestGetById:
    def test_returns_order_with_relations(
        self, repo, order_data, django_assert_num_queries
    ):
        created = repo.create(order_data)

        with django_assert_num_queries(3):
            order = repo.get_by_id(str(created.id))
            assert order.customer.name == "Test Customer"
            assert [item.product.name for item in order.items.all()]

    def test_unknown_id_returns_none(self, repo):
        assert repo.get_by_id(str(uuid4())) is None

    def test_malformed_id_returns_none(self, repo):
        assert repo.get_by_id("not-a-uuid") is None
