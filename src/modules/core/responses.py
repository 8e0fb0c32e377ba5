"""Uniform response envelope for the REST API.

Every body produced by the resource views is a mapping with
``success`` and ``message`` keys, plus ``data``, ``count`` or
``errors`` when relevant.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response

from modules.core.exceptions import DomainError, ErrorKind

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
}

_UNSET = object()


def envelope(
    message: str,
    *,
    success: bool = True,
    data: Any = _UNSET,
    count: Optional[int] = None,
    errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    """Build the response mapping; optional keys are omitted when unset."""
    body: Dict[str, Any] = {"success": success, "message": message}
    if data is not _UNSET:
        body["data"] = data
    if count is not None:
        body["count"] = count
    if errors is not None:
        body["errors"] = errors
    return body


def to_wire(dto: BaseModel) -> Dict[str, Any]:
    """Render an output DTO as JSON-ready data with camelCase keys."""
    return dto.model_dump(mode="json", by_alias=True)


def success_response(
    message: str,
    data: Any = _UNSET,
    *,
    count: Optional[int] = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    return Response(envelope(message, data=data, count=count), status=status_code)


def error_response(exc: DomainError) -> Response:
    """Translate a domain error into an envelope using its typed kind."""
    return Response(
        envelope(exc.message, success=False),
        status=STATUS_BY_KIND[exc.kind],
    )


def validation_error_response(exc: PydanticValidationError) -> Response:
    """400 envelope listing every field that failed shape validation."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "body",
            "message": error["msg"],
        }
        for error in exc.errors(include_url=False)
    ]
    return Response(
        envelope("Validation failed", success=False, errors=errors),
        status=status.HTTP_400_BAD_REQUEST,
    )
