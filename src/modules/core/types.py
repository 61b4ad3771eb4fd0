"""Tagged result values returned by application services.

Business-rule failures are *values*, not exceptions: a use case returns
``Ok(value)`` on success or ``Err(error)`` on failure, and the caller
inspects the tag before touching the payload::

    result = service.execute(order_id)
    if result.is_err():
        return render_error(result.error)
    order = result.unwrap()

``Err.error`` is an exception instance, so callers that prefer the
exception style can simply call ``unwrap()`` and let it raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: U) -> Union[T, U]:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: U) -> U:
        return default


Result = Union[Ok[T], Err[E]]
