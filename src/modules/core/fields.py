"""Reusable Pydantic field types shared by the resource DTOs."""

from __future__ import annotations

from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BeforeValidator


def check_email(value: str) -> str:
    """Validate the address format and return it exactly as supplied.

    ``EmailStr`` would store the normalized form (lower-cased domain),
    but uniqueness is checked against the stored value verbatim.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


def none_as_blank(value: Optional[str]) -> str:
    return "" if value is None else value


Email = Annotated[str, AfterValidator(check_email)]

# Optional contact field: JSON null is stored as an empty string.
OptionalText = Annotated[str, BeforeValidator(none_as_blank)]
