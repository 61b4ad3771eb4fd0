"""Product DTOs exchanged with the product repository.

Pydantic v2, immutable (``frozen=True``).

- ``ProductQuantityDTO``: a product id paired with a quantity.  Used both
  as the look-up key for batch fetches and as the new absolute stock
  value for batch quantity updates.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.validators import is_valid_uuid


def normalize_product_id(value: Any) -> Any:
    """Return the canonical lowercase form of a UUID-looking id.

    Anything that is not a valid UUID is returned untouched so the
    existence check can report it back verbatim.
    """
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, str) and is_valid_uuid(value.strip()):
        return str(UUID(value.strip()))
    return value


class ProductQuantityDTO(BaseModel):
    """Immutable ``{id, quantity}`` pair."""

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int

    @field_validator("id", mode="before")
    @classmethod
    def canonical_id(cls, v: Any) -> Any:
        return normalize_product_id(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v
