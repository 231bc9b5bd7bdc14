"""
Library API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions and the HTTP status each maps to.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       turn them into responses.
Who:   Raised by route handlers; caught by global handlers.

Exception Hierarchy:
    LibraryError (base)         → 500 Internal Server Error
    └── NotFoundError           → 404 Not Found (empty body)

The catalog operations themselves never raise: a missing book is a normal
`None` result from the service, and only the HTTP boundary turns it into
NotFoundError.
"""

from typing import Any, Dict, Optional


class LibraryError(Exception):
    """
    Base exception for all Library API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(LibraryError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/books/{id} with an id that is not in the catalog.
    HTTP:    404 Not Found, empty body.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
