"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``create`` is wrapped in ``transaction.atomic()`` so the Order aggregate
(Order + OrderItems) is persisted atomically.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        ``data`` keys:
        - ``customer`` (required): the ordering Customer
        - ``items`` (required): ``OrderLineDTO`` sequence
        """
        order = Order(customer=data["customer"])
        order.save()

        items = list(data.get("items", []))
        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in items
            ]
        )

        logger.info("order.persisted", order_id=str(order.id), item_count=len(items))

        return self.get_by_id(str(order.id)) or order

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations.

        ``select_related`` for the customer FK (single JOIN) and
        ``prefetch_related`` for items and items→product.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.select_related("customer")
                .prefetch_related("items__product")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None
