"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising HTTP-level exceptions; the Service
Layer decides how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[Customer]:
        """List customers ordered by id.

        ``filters`` is a query-parameter mapping understood by
        ``CustomerFilter``, e.g. ``{"city": "austin", "state": "TX"}``.
        Unknown keys are ignored.
        """
        queryset = Customer.objects.all()
        if filters:
            queryset = CustomerFilter(filters, queryset=queryset).qs
        return list(queryset)

    def find_by_id(self, id: Any) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs (e.g. ``"abc"``).
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    def exists_by_id(self, id: Any) -> bool:
        try:
            return Customer.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    def exists_by_email(self, email: str) -> bool:
        return Customer.objects.filter(email=email).exists()

    @transaction.atomic
    def delete_by_id(self, id: Any) -> bool:
        """Hard-delete a customer by ID.

        Returns ``True`` if the customer was found and removed,
        ``False`` if no customer exists with the given ID.
        """
        try:
            deleted, _ = Customer.objects.filter(id=id).delete()
        except (ValueError, TypeError, ValidationError):
            return False
        if deleted:
            logger.info("customer.removed", customer_id=id)
        return bool(deleted)
