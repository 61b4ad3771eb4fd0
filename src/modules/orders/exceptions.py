"""Order domain errors.

Returned (wrapped in ``Err``) by the order services when a business rule
is violated.  Every error carries a human-readable ``message`` and a
stable ``code`` so callers can branch without parsing text.
"""

from __future__ import annotations

from typing import Iterable, Tuple


class OrderError(Exception):
    """Base class for order use-case failures."""

    code = "order_error"

    def __init__(self, message: str, product_ids: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.product_ids: Tuple[str, ...] = tuple(product_ids)


class InvalidReference(OrderError):
    """The customer referenced by the order does not exist."""

    code = "invalid_reference"


class NotFound(OrderError):
    """No requested product exists, or some requested ids are unknown."""

    code = "not_found"


class InsufficientStock(OrderError):
    """A requested quantity exceeds the product's available stock."""

    code = "insufficient_stock"


class InvalidArgument(OrderError):
    """Malformed input: bad identifier format or duplicate entries."""

    code = "invalid_argument"
