"""Employee service layer (Use Cases).

Business rules enforced here:
- Email must be unique across employees (create and update).
- get/update/delete on an unknown id fail with ``EmployeeNotFound``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.employees.dtos import EmployeeOutputDTO
from modules.employees.exceptions import EmployeeAlreadyExists, EmployeeNotFound
from modules.employees.models import Employee

if TYPE_CHECKING:
    from modules.employees.dtos import EmployeeInputDTO
    from modules.employees.repositories.interfaces import IEmployeeRepository

logger = structlog.get_logger(__name__)


class EmployeeService:
    """Application service for Employee use-cases.

    Receives an ``IEmployeeRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IEmployeeRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_employee(self, dto: EmployeeInputDTO) -> EmployeeOutputDTO:
        """Create a new employee after enforcing email uniqueness.

        Raises:
            EmployeeAlreadyExists: if the email is already taken.
        """
        log = logger.bind(email=dto.email, department=dto.department)

        if self._repo.exists_by_email(dto.email):
            log.warning("employee.duplicate_email")
            raise EmployeeAlreadyExists(dto.email)

        employee = Employee(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            department=dto.department,
            salary=dto.salary,
        )
        try:
            employee = self._repo.save(employee)
        except IntegrityError as exc:
            log.warning("employee.duplicate_email", source="constraint")
            raise EmployeeAlreadyExists(dto.email) from exc

        log.info("employee.created", employee_id=employee.id)
        return EmployeeOutputDTO.from_entity(employee)

    @transaction.atomic
    def update_employee(self, id: Any, dto: EmployeeInputDTO) -> EmployeeOutputDTO:
        """Overwrite every mutable field of an existing employee.

        Raises:
            EmployeeNotFound: if the employee does not exist.
            EmployeeAlreadyExists: if the new email belongs to another employee.
        """
        employee = self._repo.find_by_id(id)
        if employee is None:
            raise EmployeeNotFound(id)

        log = logger.bind(employee_id=employee.id)

        if dto.email != employee.email and self._repo.exists_by_email(dto.email):
            log.warning("employee.duplicate_email", email=dto.email)
            raise EmployeeAlreadyExists(dto.email)

        employee.first_name = dto.first_name
        employee.last_name = dto.last_name
        employee.email = dto.email
        employee.phone = dto.phone
        employee.department = dto.department
        employee.salary = dto.salary

        try:
            employee = self._repo.save(employee)
        except IntegrityError as exc:
            log.warning("employee.duplicate_email", email=dto.email, source="constraint")
            raise EmployeeAlreadyExists(dto.email) from exc

        log.info("employee.updated")
        return EmployeeOutputDTO.from_entity(employee)

    @transaction.atomic
    def delete_employee(self, id: Any) -> None:
        """Permanently remove an employee.

        Raises:
            EmployeeNotFound: if the employee does not exist.
        """
        if not self._repo.exists_by_id(id):
            raise EmployeeNotFound(id)
        self._repo.delete_by_id(id)
        logger.info("employee.deleted", employee_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_employees(
        self, filters: Optional[Mapping[str, Any]] = None
    ) -> List[EmployeeOutputDTO]:
        return [EmployeeOutputDTO.from_entity(e) for e in self._repo.find_all(filters)]

    def get_employee(self, id: Any) -> EmployeeOutputDTO:
        """Retrieve a single employee by ID.

        Raises:
            EmployeeNotFound: if the employee does not exist.
        """
        employee = self._repo.find_by_id(id)
        if employee is None:
            raise EmployeeNotFound(id)
        return EmployeeOutputDTO.from_entity(employee)
