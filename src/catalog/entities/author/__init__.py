"""Author entity module.

- Author: Domain entity
- AuthorTable: Database persistence model
- AuthorRepository: Data access layer
"""

from .entity import Author, AuthorWithBooks
from .repository import AuthorRepository
from .table import AuthorTable

__all__ = ["Author", "AuthorWithBooks", "AuthorTable", "AuthorRepository"]
