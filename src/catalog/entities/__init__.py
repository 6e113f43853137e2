"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .author import Author, AuthorRepository, AuthorTable, AuthorWithBooks
from .book import Book, BookRepository, BookTable, BookWithAuthors
from .book_author import BookAuthorRepository, BookAuthorTable

__all__ = [
    "Author",
    "AuthorWithBooks",
    "AuthorTable",
    "AuthorRepository",
    "Book",
    "BookWithAuthors",
    "BookTable",
    "BookRepository",
    "BookAuthorTable",
    "BookAuthorRepository",
]
