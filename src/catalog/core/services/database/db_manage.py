"""Schema management for the catalog database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all catalog tables that do not exist yet."""
        from src.catalog.entities.author import AuthorTable  # noqa: F401
        from src.catalog.entities.book import BookTable  # noqa: F401
        from src.catalog.entities.book_author import BookAuthorTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")
