"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into HTTP
responses through their ``kind``.
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import ConflictError, NotFoundError


class CustomerAlreadyExists(ConflictError):
    """A customer with the same email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Customer with email {email} already exists")
        self.email = email


class CustomerNotFound(NotFoundError):
    """The requested customer does not exist."""

    def __init__(self, customer_id: Any) -> None:
        super().__init__(f"Customer not found with id: {customer_id}")
        self.customer_id = customer_id
