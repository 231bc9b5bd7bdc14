"""
Library API — Book Entity
==========================

What:  The record held by the catalog: an id, a title, and an author.
How:   A plain mutable dataclass. The catalog stores instances by reference,
       so a Book returned from `list_books()` is the same object the catalog holds.
Who:   Created by route handlers (from BookCreate) and by the seed data;
       stored and returned by BookService implementations.

Lifecycle:
    1. Created by the caller of add_book() (or by the seed at startup)
    2. Held inside the catalog's backing list
    3. Removed by delete_book(); otherwise discarded on process exit

No validation happens here: empty titles, negative ids, and duplicate ids
are all valid Books.
"""

from dataclasses import dataclass


@dataclass
class Book:
    """A single catalog entry. The id is assigned by the caller, never generated."""

    id: int
    title: str
    author: str
