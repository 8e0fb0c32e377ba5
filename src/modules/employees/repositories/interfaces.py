"""Employee repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.employees.models import Employee


class IEmployeeRepository(IRepository["Employee"]):
    """Repository contract for the Employee resource."""

    @abstractmethod
    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[Employee]:
        """List employees; ``filters`` keys are those of ``EmployeeFilter``."""
