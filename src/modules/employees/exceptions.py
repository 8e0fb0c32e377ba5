"""Employee domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into HTTP
responses through their ``kind``.
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import ConflictError, NotFoundError


class EmployeeAlreadyExists(ConflictError):
    """An employee with the same email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Employee with email {email} already exists")
        self.email = email


class EmployeeNotFound(NotFoundError):
    """The requested employee does not exist."""

    def __init__(self, employee_id: Any) -> None:
        super().__init__(f"Employee not found with id: {employee_id}")
        self.employee_id = employee_id
