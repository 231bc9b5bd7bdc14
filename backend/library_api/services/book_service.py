"""
Library API — In-Memory Catalog Service
========================================

What:  The concrete BookService: an ordered list of Book held in memory.
How:   Appends on add, linear scan on get, scan-then-remove on delete.
Who:   Built once per application by create_app() and handed to routes
       through library_api.dependencies.get_book_service.
When:  Lives from app creation until process exit; there is no teardown.

Concurrency:
    FastAPI may call into the service from worker threads, so the two
    mutating operations share one coarse lock. Reads are not locked, and no
    ordering or atomicity guarantee is offered beyond that single lock.
"""

import logging
import threading
from typing import Iterable, List, Optional

from library_api.models.book import Book
from library_api.services.book_base import BookService

logger = logging.getLogger(__name__)


def seed_books() -> List[Book]:
    """The two records every fresh catalog starts with."""
    return [
        Book(id=1, title="1984", author="George Orwell"),
        Book(id=2, title="To Kill a Mockingbird", author="Harper Lee"),
    ]


class InMemoryBookService(BookService):
    """
    BookService backed by a plain Python list.

    Args:
        books: Initial catalog contents. Defaults to seed_books(); pass an
               empty list for an empty catalog. The iterable is copied into
               a new list owned by this service.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: List[Book] = list(seed_books() if books is None else books)
        self._lock = threading.Lock()
        logger.debug("Catalog initialized with %d books", len(self._books))

    def list_books(self) -> List[Book]:
        return self._books

    def get_book(self, book_id: int) -> Optional[Book]:
        return next((book for book in self._books if book.id == book_id), None)

    def add_book(self, book: Book) -> None:
        with self._lock:
            self._books.append(book)

    def delete_book(self, book_id: int) -> None:
        with self._lock:
            book = self.get_book(book_id)
            if book is not None:
                self._books.remove(book)
