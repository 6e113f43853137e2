"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import AuthorService, BookService, DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_author_service(request: Request) -> AuthorService:
    """Get the author service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.author_service


def get_book_service(request: Request) -> BookService:
    """Get the book service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.book_service
