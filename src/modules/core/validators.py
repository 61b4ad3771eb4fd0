"""Format-only validators shared across modules."""

from __future__ import annotations

from typing import Any
from uuid import UUID


def is_valid_uuid(value: Any) -> bool:
    """Return ``True`` if *value* is a canonical UUID string (any version).

    Only the textual form is checked — no look-up is performed.  Accepts
    ``UUID`` instances as-is.
    """
    if isinstance(value, UUID):
        return True
    if not isinstance(value, str):
        return False
    try:
        parsed = UUID(value)
    except ValueError:
        return False
    return str(parsed) == value.lower()
