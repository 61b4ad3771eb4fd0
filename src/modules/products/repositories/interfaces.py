"""Product repository interface.

Exposes the two batch operations order creation relies on: fetching a
set of products by id and writing back new stock quantities.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import ProductQuantityDTO
    from modules.products.models import Product


class ProductReference(Protocol):
    """Anything carrying a product ``id`` (request entries, DTOs)."""

    @property
    def id(self) -> str: ...


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""

    @abstractmethod
    def find_all_by_id(self, products: Sequence[ProductReference]) -> List[Product]:
        """Return the existing products whose ids appear in *products*.

        Unknown and malformed ids are silently skipped; the result follows
        the order of first appearance in *products*.
        """

    @abstractmethod
    def update_quantity(self, products: Sequence[ProductQuantityDTO]) -> None:
        """Set ``stock_quantity`` of each product to the given absolute value."""
