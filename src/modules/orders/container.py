"""Composition root for the order use cases.

Wires the Django ORM repositories into the services.  Entry points
(views, management commands, tasks) build services through these
factories instead of instantiating repositories themselves.
"""

from __future__ import annotations

from modules.customers.repositories import CustomerDjangoRepository
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import CreateOrderService, FindOrderService
from modules.products.repositories import ProductDjangoRepository


def build_create_order_service() -> CreateOrderService:
    return CreateOrderService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
        customer_repository=CustomerDjangoRepository(),
    )


def build_find_order_service() -> FindOrderService:
    return FindOrderService(order_repository=OrderDjangoRepository())
