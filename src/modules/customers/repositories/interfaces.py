"""Customer repository interface.

Extends ``IRepository[Customer]``; the email look-up required by the
uniqueness rule is part of the base contract.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer resource."""

    @abstractmethod
    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[Customer]:
        """List customers; ``filters`` keys are those of ``CustomerFilter``."""
