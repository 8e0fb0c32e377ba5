"""Project-wide DRF exception handler.

Renders framework-level failures (malformed JSON, unsupported method,
unknown route under a viewset) in the same envelope the resource views
use.  Domain errors that escape a view are mapped through their kind.
Anything else is left to Django (500).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError
from modules.core.responses import envelope, error_response

logger = structlog.get_logger(__name__)


def _message_from(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return "Invalid request."


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    if isinstance(exc, DomainError):
        logger.warning("api.domain_error", kind=str(exc.kind), error=exc.message)
        return error_response(exc)

    response = exception_handler(exc, context)
    if response is None:
        return None

    logger.warning(
        "api.request_rejected",
        status_code=response.status_code,
        error=type(exc).__name__,
    )
    response.data = envelope(_message_from(response.data), success=False)
    return response
