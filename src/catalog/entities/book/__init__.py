"""Entity package: Book."""

from .entity import Book, BookWithAuthors
from .repository import BookRepository
from .table import BookTable

__all__ = ["Book", "BookWithAuthors", "BookRepository", "BookTable"]
