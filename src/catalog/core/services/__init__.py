"""Core services exports."""

# Catalog Services
from .catalog.author_service import AuthorService
from .catalog.book_service import BookService
from .catalog.relation_validator import AuthorReferenceValidator

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    # Catalog Services
    "AuthorService",
    "BookService",
    "AuthorReferenceValidator",
    # Database Services
    "DbManageService",
    "DbSessionService",
]
