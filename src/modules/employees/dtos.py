"""Employee DTOs for the Service Layer.

Same conventions as the customer DTOs: Pydantic v2, frozen, camelCase
aliases on the wire.  ``salary`` is validated as a non-negative decimal
with at most two places and rendered as a JSON number.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from modules.core.fields import Email, OptionalText

if TYPE_CHECKING:
    from modules.employees.models import Employee

Salary = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class EmployeeInputDTO(BaseModel):
    """Immutable DTO for employee create/update requests."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: Email
    phone: OptionalText = Field(default="", max_length=20)
    department: str = Field(min_length=1, max_length=100)
    salary: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class EmployeeOutputDTO(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    department: str
    salary: Salary
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, employee: Employee) -> EmployeeOutputDTO:
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            phone=employee.phone,
            department=employee.department,
            salary=employee.salary,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )
