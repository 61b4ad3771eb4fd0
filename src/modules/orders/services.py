"""Order service layer (Use Cases).

- ``CreateOrderService``: validates customer, products and stock, then
  persists the order and decrements inventory.
- ``FindOrderService``: fetches an order by a well-formed identifier.

Both services receive their repositories via constructor injection (DIP)
and return ``Ok`` / ``Err`` values instead of raising for business-rule
failures.  Infrastructure errors still propagate as exceptions.
"""

from __future__ import annotations

from collections import Counter
from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import structlog
from django.db import transaction
from pydantic import ValidationError

from modules.core.types import Err, Ok, Result
from modules.core.validators import is_valid_uuid
from modules.orders.dtos import OrderLineDTO, RequestedProductDTO
from modules.orders.exceptions import (
    InsufficientStock,
    InvalidArgument,
    InvalidReference,
    NotFound,
    OrderError,
)
from modules.products.dtos import ProductQuantityDTO

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

RequestedProduct = Union[RequestedProductDTO, Mapping[str, Any]]


def _join(ids: Iterable[str]) -> str:
    return ", ".join(ids)


def _entry_id(entry: RequestedProduct) -> str:
    if isinstance(entry, RequestedProductDTO):
        return entry.id
    return str(entry.get("id", "")) if isinstance(entry, Mapping) else ""


def _parse_requested(
    products: Sequence[RequestedProduct],
) -> Tuple[List[RequestedProductDTO], List[int]]:
    """Build DTOs for every entry; return them with the positions that failed."""
    requested: List[RequestedProductDTO] = []
    invalid: List[int] = []
    for position, entry in enumerate(products):
        if isinstance(entry, RequestedProductDTO):
            requested.append(entry)
            continue
        try:
            requested.append(RequestedProductDTO.model_validate(entry))
        except ValidationError:
            invalid.append(position)
    return requested, invalid


class CreateOrderService:
    """Use case: place an order for an existing customer."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        customer_repository: ICustomerRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._customer_repo = customer_repository

    @transaction.atomic
    def execute(
        self,
        customer_id: str,
        products: Sequence[RequestedProduct],
    ) -> Result[Order, OrderError]:
        """Create an order and decrement stock in one transaction.

        Steps (short-circuit on the first failure):
        1. Customer must exist.
        2. Every entry must be well formed and no product id may repeat.
        3. At least one requested product must exist.
        4. Every requested product must exist.
        5. Every requested quantity must fit the available stock.
        6. Persist the order with one priced line per product.
        7. Write back ``stock - requested`` for each product.

        Returns:
            ``Ok(order)`` or ``Err`` carrying ``InvalidReference``,
            ``InvalidArgument``, ``NotFound`` or ``InsufficientStock``.
        """
        log = logger.bind(customer_id=str(customer_id))
        log.info("order.creation_started", product_count=len(products))

        # 1. Validate customer
        customer = self._customer_repo.get_by_id(str(customer_id))
        if not customer:
            return Err(InvalidReference("Provided customer ID does not exist."))

        # 2. Reject malformed and ambiguous requests
        requested, invalid = _parse_requested(products)
        if invalid:
            return Err(
                InvalidArgument(
                    "Invalid product entries at position(s) "
                    f"{_join(str(position) for position in invalid)}.",
                    [_entry_id(products[position]) for position in invalid],
                )
            )

        duplicated = [
            product_id
            for product_id, count in Counter(p.id for p in requested).items()
            if count > 1
        ]
        if duplicated:
            return Err(
                InvalidArgument(
                    f"Product(s) {_join(duplicated)} requested more than once.",
                    duplicated,
                )
            )

        # 3-4. Validate existence
        found = self._product_repo.find_all_by_id(requested)
        if not found:
            return Err(NotFound("Products not found."))

        stock = {str(product.id): product for product in found}
        missing = [p.id for p in requested if p.id not in stock]
        if missing:
            return Err(NotFound(f"Product(s) {_join(missing)} not found.", missing))

        # 5. Validate stock
        short = [p.id for p in requested if p.quantity > stock[p.id].stock_quantity]
        if short:
            return Err(
                InsufficientStock(
                    f"Product(s) {_join(short)} exceed(s) available quantities.",
                    short,
                )
            )

        # 6. Persist order + lines
        quantities = {p.id: p.quantity for p in requested}
        lines = [
            OrderLineDTO(
                product_id=str(product.id),
                unit_price=product.price,
                quantity=quantities[str(product.id)],
            )
            for product in found
        ]
        order = self._order_repo.create({"customer": customer, "items": lines})

        # 7. Decrement stock
        self._product_repo.update_quantity(
            [
                ProductQuantityDTO(
                    id=p.id, quantity=stock[p.id].stock_quantity - p.quantity
                )
                for p in requested
            ]
        )

        log.info("order.created", order_id=str(order.id), line_count=len(lines))
        return Ok(order)


class FindOrderService:
    """Use case: look an order up by identifier."""

    def __init__(self, order_repository: IOrderRepository) -> None:
        self._order_repo = order_repository

    def execute(self, id: str) -> Result[Optional[Order], InvalidArgument]:
        """Return ``Ok(order)``, ``Ok(None)`` on a miss, or ``Err`` for a bad id."""
        if not is_valid_uuid(id):
            return Err(InvalidArgument("Please provide a valid ID."))

        order = self._order_repo.get_by_id(str(id))
        logger.info("order.retrieved", order_id=str(id), found=order is not None)
        return Ok(order)
