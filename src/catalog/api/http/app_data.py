from dataclasses import dataclass

from src.catalog.core.services import AuthorService, BookService, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    author_service: AuthorService
    book_service: BookService
