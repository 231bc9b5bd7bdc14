"""
Library API — Pydantic Request/Response Schemas
================================================

What:  Pydantic models defining the API contract for the book endpoints.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by route handlers in routes/books.py and routes/health.py.

Wire format for a book (field names are stable, lower-case as shown):
    {"id": 3, "title": "Dune", "author": "Frank Herbert"}

Only JSON types are enforced here: an empty title or a duplicate id passes
straight through to the service.
"""

from typing import Optional

from pydantic import BaseModel, Field

from library_api.models.book import Book


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class BookCreate(BaseModel):
    """
    What:  Body of POST /api/books.
    Note:  The caller assigns the id; the catalog never generates one.
    """
    id: int = Field(description="Caller-assigned book identifier")
    title: str = Field(description="Book title (may be empty)")
    author: str = Field(description="Book author (may be empty)")

    # JSON types only: "3" or 3.0 for the id is a 422, not a coerced int
    model_config = {"strict": True}

    def to_book(self) -> Book:
        """Builds the catalog entity this request describes."""
        return Book(id=self.id, title=self.title, author=self.author)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class BookResponse(BaseModel):
    """
    What:  Representation of a single catalog entry.
    Who:   Returned by GET /api/books, GET /api/books/{id}, POST /api/books.
    """
    id: int = Field(description="Book identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Book author")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body for unexpected server failures (HTTP 500).

    Example:
        {
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again or contact support.",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness probe payload returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    book_count: int = Field(description="Number of books currently in the catalog")
    uptime_seconds: float = Field(description="Seconds since service started")
