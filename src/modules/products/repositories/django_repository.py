"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Batch reads take row-level locks (``SELECT ... FOR UPDATE``) so that a
caller running inside ``transaction.atomic`` keeps the stock it checked
until it writes the new quantities back.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.core.validators import is_valid_uuid
from modules.products.dtos import ProductQuantityDTO
from modules.products.models import Product
from modules.products.repositories.interfaces import (
    IProductRepository,
    ProductReference,
)

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def find_all_by_id(self, products: Sequence[ProductReference]) -> List[Product]:
        """Fetch and lock every existing product referenced by *products*.

        Malformed ids never reach the database — a single bad value would
        otherwise make the whole ``IN`` query fail.
        """
        ids = list(dict.fromkeys(str(p.id) for p in products))
        valid_ids = [i for i in ids if is_valid_uuid(i)]
        if not valid_ids:
            return []

        found = {
            str(product.id): product
            for product in Product.objects.select_for_update()
            .filter(id__in=valid_ids)
            .order_by("id")
        }
        return [found[i] for i in valid_ids if i in found]

    @transaction.atomic
    def update_quantity(self, products: Sequence[ProductQuantityDTO]) -> None:
        """Write the new absolute stock value of each product."""
        now = timezone.now()
        for entry in products:
            Product.objects.filter(id=entry.id).update(
                stock_quantity=entry.quantity,
                updated_at=now,
            )

        logger.info(
            "product.quantities_updated",
            products={entry.id: entry.quantity for entry in products},
        )
