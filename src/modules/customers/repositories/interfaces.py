"""Customer repository interface.

Order creation only ever asks whether a customer exists, so the
contract is the bare ``IRepository[Customer]`` look-up.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key, or ``None``."""
