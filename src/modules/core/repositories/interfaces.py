"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that every
resource-specific repository interface extends.  Service-layer code
depends on this abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Customer``, ``Employee``).  Identifiers are
    accepted as received from the transport layer; implementations
    treat ids that cannot address a row as missing.
    """

    @abstractmethod
    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[T]:
        """Return every entity (ascending id), optionally narrowed by filters."""

    @abstractmethod
    def find_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def exists_by_id(self, id: Any) -> bool:
        """Return ``True`` when an entity with this primary key exists."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when an entity already uses this email address."""

    @abstractmethod
    def delete_by_id(self, id: Any) -> bool:
        """Permanently remove an entity by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
