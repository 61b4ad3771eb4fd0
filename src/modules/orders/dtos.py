"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``RequestedProductDTO``: one ``{id, quantity}`` entry of a creation request.
- ``OrderLineDTO``: one priced line handed to the order repository.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.dtos import normalize_product_id


class RequestedProductDTO(BaseModel):
    """Immutable DTO for a single requested product.

    ``id`` is not checked for existence here — the service does that.
    UUID-shaped ids are normalised to their canonical lowercase form.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int

    @field_validator("id", mode="before")
    @classmethod
    def canonical_id(cls, v: Any) -> Any:
        return normalize_product_id(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class OrderLineDTO(BaseModel):
    """Immutable order line: product, price snapshot and quantity."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    unit_price: Decimal
    quantity: int
