"""Authorship entity module.

- BookAuthorTable: Join table between books and authors
- BookAuthorRepository: Data access layer
"""

from .repository import BookAuthorRepository
from .table import BookAuthorTable

__all__ = ["BookAuthorTable", "BookAuthorRepository"]
