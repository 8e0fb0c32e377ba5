import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID.

    Reads the X-Request-ID header from the incoming request, or generates a
    UUID4 when it is absent.  The ID is bound into structlog contextvars so
    every log line emitted while serving the request carries it, and is
    echoed back to the client in the X-Request-ID response header.

    The closing log line names the resolved route (``customer-detail``,
    ``employee-list``, ...) and the record id from the URL, if any.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )
        start = time.monotonic()

        response = self.get_response(request)

        # Unset when no URL pattern matched (404 before dispatch)
        match = request.resolver_match
        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            route=match.view_name if match else None,
            record_id=match.kwargs.get("pk") if match else None,
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
