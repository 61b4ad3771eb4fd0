from decimal import Decimal

import pytest

from modules.customers.models import Customer
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def customer():
    return Customer.objects.create(name="Test Customer", email="test@example.com")


@pytest.fixture()
def make_product():
    """Factory creating persisted products with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "price": Decimal("19.99"),
            "stock_quantity": 10,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
