"""Domain error kinds shared by every resource module.

Services raise subclasses of ``DomainError``; each carries a typed
``kind`` so the API layer can pick the HTTP status without looking at
the message text.  Resource modules subclass ``NotFoundError`` and
``ConflictError`` with their own messages.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Business-rule failure categories."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


class DomainError(Exception):
    """Base class for business-rule violations raised by the Service Layer."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """The addressed entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    """The request would violate a uniqueness rule."""

    kind = ErrorKind.CONFLICT
