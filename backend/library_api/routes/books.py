"""
Library API — Book Route Handlers
==================================

What:  The four catalog operations exposed over HTTP under /api/books.
How:   Each handler writes one line to the injected ActivityLogger, calls the
       injected BookService, and maps the result to a status code.
Who:   Called by any HTTP client; the OpenAPI docs at /docs describe them.

Endpoint Summary:
    GET    /api/books        → 200 + list of books
    GET    /api/books/{id}   → 200 + book, or 404 with empty body
    POST   /api/books        → 201 + book, Location: /api/books/{id}
    DELETE /api/books/{id}   → 204 always (no-op when the id is absent)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from library_api.dependencies import get_activity_logger, get_book_service
from library_api.exceptions import NotFoundError
from library_api.models.book import Book
from library_api.schemas.book import BookCreate, BookResponse, ErrorResponse
from library_api.services.book_base import BookService
from library_api.services.logger_base import ActivityLogger

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Books"])


@router.get(
    "/books",
    response_model=List[BookResponse],
    summary="List all books",
    description="Returns every book in the catalog in insertion order. No pagination.",
)
async def list_books(
    service: BookService = Depends(get_book_service),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> List[Book]:
    activity.log("GET all books")
    return service.list_books()


@router.get(
    "/books/{book_id}",
    response_model=BookResponse,
    responses={
        200: {"description": "The book with this id", "model": BookResponse},
        404: {"description": "No book with this id (empty body)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a book by id",
    description=(
        "Returns the first book whose id matches. "
        "If several books share the id, the earliest-added one is returned."
    ),
)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> Book:
    """
    Get a single book.

    The service reports absence as None; this handler turns it into
    NotFoundError, which the global handler renders as an empty 404.
    """
    activity.log(f"GET book {book_id}")
    book = service.get_book(book_id)
    if book is None:
        raise NotFoundError(resource="book", resource_id=str(book_id))
    return book


@router.post(
    "/books",
    status_code=status.HTTP_201_CREATED,
    response_model=BookResponse,
    responses={
        201: {"description": "Book added", "model": BookResponse},
    },
    summary="Add a book",
    description=(
        "Appends the book to the catalog. The caller assigns the id; "
        "duplicate ids are accepted. The Location header points at the "
        "get-by-id endpoint for the new book."
    ),
)
async def add_book(
    payload: BookCreate,
    request: Request,
    response: Response,
    service: BookService = Depends(get_book_service),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> Book:
    book = payload.to_book()
    activity.log(f"POST book {book.id} '{book.title}'")
    service.add_book(book)

    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return book


@router.delete(
    "/books/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a book by id",
    description=(
        "Removes the first book whose id matches. Deleting an id that is "
        "not in the catalog still returns 204."
    ),
)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
    activity: ActivityLogger = Depends(get_activity_logger),
) -> Response:
    activity.log(f"DELETE book {book_id}")
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
