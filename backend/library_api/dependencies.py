"""
Library API — FastAPI Dependency Providers
===========================================

What:  Functions that hand the catalog and the activity logger to route handlers.
How:   create_app() stores one instance of each on `app.state`; these providers
       read them back from the current request's application.
Who:   Injected into route handlers via FastAPI's Depends() system.

Lifetimes:
    BookService     → one per application (process-wide catalog)
    ActivityLogger  → one per application (stateless apart from its stream)

Overriding in tests:
    app.dependency_overrides[get_activity_logger] = lambda: RecordingActivityLogger()

Example usage in a route:
    @router.get("/books")
    async def list_books(service: BookService = Depends(get_book_service)):
        return service.list_books()
"""

from fastapi import Request

from library_api.services.book_base import BookService
from library_api.services.logger_base import ActivityLogger


def get_book_service(request: Request) -> BookService:
    """Provide the application's BookService instance."""
    return request.app.state.book_service


def get_activity_logger(request: Request) -> ActivityLogger:
    """Provide the application's ActivityLogger instance."""
    return request.app.state.activity_logger
