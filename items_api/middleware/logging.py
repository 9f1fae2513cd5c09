"""
Items API — Request Logging Middleware
=======================================

What:  One access line per HTTP request on the "items_api.access" logger.
How:   Times the downstream call, then logs
       "<METHOD> <path> <status> <ms>ms [<request id>] from <client>"
       at a level picked from the status class.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

GET /health is never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from items_api.middleware.request_id import request_id_var

logger = logging.getLogger("items_api.access")

SKIPPED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logger for every route except the health probe."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client = request.client.host if request.client else "-"
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            client,
        )
        return response
