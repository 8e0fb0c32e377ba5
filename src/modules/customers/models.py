"""Customer model.

Business rules implemented:
- Email must be unique across all customers (``unique=True``; the
  service layer checks first and reports a conflict).
- ``id``, ``created_at`` and ``updated_at`` are assigned by the store.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Customer(TimestampedModel):
    """Customer record.

    Optional contact fields default to the empty string rather than
    ``NULL`` so the wire representation never has to distinguish the two.
    """

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=254, unique=True)
    phone = models.CharField(max_length=20, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    state = models.CharField(max_length=100, blank=True, default="")
    zip_code = models.CharField(max_length=20, blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} (#{self.pk})"
