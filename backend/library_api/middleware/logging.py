"""
Library API — Request Logging Middleware
=========================================

What:  One access-log line for every HTTP request and response.
How:   Times the downstream call and writes a single line on the
       `library_api.access` logger through the root format from
       main.setup_logging().
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses request ID for correlation).

Line format:
    GET /api/books/999 404 0.8ms [1a2b3c4d] from 127.0.0.1

This is the operator-facing access log. The per-operation catalog line
("GET all books", "DELETE book 1", ...) is written separately by the
ActivityLogger inside the route handlers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from library_api.middleware.request_id import request_id_var

logger = logging.getLogger("library_api.access")

# Paths that never get an access line
UNLOGGED_PATHS = {"/health"}


def level_for_status(status_code: int) -> int:
    """5xx → ERROR, 4xx → WARNING (unknown books land here), else INFO."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, duration, request ID and client for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            request.client.host if request.client else "unknown",
        )
        return response
