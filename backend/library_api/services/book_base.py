"""
Library API — Abstract Catalog Service Interface
=================================================

What:  Abstract base class defining the contract for a book catalog.
How:   Concrete implementations inherit from BookService and implement the
       four operations {list, get, add, delete}.
Who:   Injected into the book route handlers via library_api.dependencies.

Implementations:
    - InMemoryBookService: ordered in-memory list (the only variant)

Route handlers depend on this interface rather than on InMemoryBookService;
another catalog can be supplied through `app.dependency_overrides`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from library_api.models.book import Book


class BookService(ABC):
    """
    Abstract interface for the book catalog.

    Contract:
        - Operations are total: none of them raise for any input
        - Absence is a normal outcome (get_book returns None)
        - Ids are not required to be unique; when several books share an id,
          the first one in insertion order is the one get/delete resolve to
    """

    @abstractmethod
    def list_books(self) -> List[Book]:
        """
        Return every book currently in the catalog, in insertion order.

        The returned sequence is the live catalog, not a copy: callers see
        the same Book objects the catalog holds.
        """
        ...

    @abstractmethod
    def get_book(self, book_id: int) -> Optional[Book]:
        """
        Return the first book whose id equals `book_id`, or None if no book matches.
        """
        ...

    @abstractmethod
    def add_book(self, book: Book) -> None:
        """
        Append `book` to the end of the catalog. No uniqueness check is made.
        """
        ...

    @abstractmethod
    def delete_book(self, book_id: int) -> None:
        """
        Remove the book get_book(book_id) would return.

        Removes exactly one entry. If no book matches, this is a silent no-op.
        """
        ...
