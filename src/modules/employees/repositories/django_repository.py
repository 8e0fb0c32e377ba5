"""Django ORM implementation of the Employee repository."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.employees.filters import EmployeeFilter
from modules.employees.models import Employee
from modules.employees.repositories.interfaces import IEmployeeRepository

logger = structlog.get_logger(__name__)


class EmployeeDjangoRepository(IEmployeeRepository):
    """Concrete Employee repository backed by Django ORM."""

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[Employee]:
        queryset = Employee.objects.all()
        if filters:
            queryset = EmployeeFilter(filters, queryset=queryset).qs
        return list(queryset)

    def find_by_id(self, id: Any) -> Optional[Employee]:
        try:
            return Employee.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Employee) -> Employee:
        is_new = entity._state.adding
        entity.save()
        logger.info("employee.saved", employee_id=entity.id, is_new=is_new)
        return entity

    def exists_by_id(self, id: Any) -> bool:
        try:
            return Employee.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    def exists_by_email(self, email: str) -> bool:
        return Employee.objects.filter(email=email).exists()

    @transaction.atomic
    def delete_by_id(self, id: Any) -> bool:
        try:
            deleted, _ = Employee.objects.filter(id=id).delete()
        except (ValueError, TypeError, ValidationError):
            return False
        if deleted:
            logger.info("employee.removed", employee_id=id)
        return bool(deleted)
