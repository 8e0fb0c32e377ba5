"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``) and use camelCase aliases
on the wire (``firstName``, ``zipCode``, ``createdAt``); snake_case
names are accepted on input as well.

- ``CustomerInputDTO``: input for create and full update (PUT).
- ``CustomerOutputDTO``: output, mirrors the stored record 1:1.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modules.core.fields import Email, OptionalText

if TYPE_CHECKING:
    from modules.customers.models import Customer


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class CustomerInputDTO(BaseModel):
    """Immutable DTO for customer create/update requests.

    Validates:
    - ``first_name`` / ``last_name`` are non-blank.
    - ``email`` is a well-formed address, kept exactly as supplied.
    - Optional contact fields fit their column sizes; ``null`` becomes ``""``.

    ``id`` and timestamps are not part of the input; if a client sends
    them they are ignored.
    """

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
    address: OptionalText = Field(default="", max_length=255)
    city: OptionalText = Field(default="", max_length=100)
    state: OptionalText = Field(default="", max_length=100)
    zip_code: OptionalText = Field(default="", max_length=20)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer API responses."""

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
    address: str
    city: str
    state: str
    zip_code: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer model instance."""
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            city=customer.city,
            state=customer.state,
            zip_code=customer.zip_code,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
