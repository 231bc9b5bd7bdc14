"""
Library API — Request ID Middleware
====================================

What:  Assigns an ID to each incoming request and echoes it in the response.
How:   Reuses the client's X-Request-ID header if present, otherwise generates
       a short UUID; stores it in a ContextVar and in request.state.
Who:   Applied to every request via Starlette middleware. The 500 handlers
       in main.py read request_id_var to set the same header themselves.
When:  Before RequestLoggingMiddleware, which reads the ID for its access line.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """First 8 hex characters of a UUID4."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request and its response with a correlation ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
