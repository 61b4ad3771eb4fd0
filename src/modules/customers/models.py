"""Customer model.

Orders only need to know that a customer exists; the record itself is
owned by this module.  ``email`` is unique across the system.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.name
