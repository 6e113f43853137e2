"""Author repository."""

from collections.abc import Sequence

from sqlalchemy import func, update
from sqlmodel import Session, col, select

from src.catalog.core.models.change_set import AuthorFieldUpdate, as_values
from src.catalog.entities.author.entity import Author
from src.catalog.entities.author.table import AuthorTable


class AuthorRepository:
    """Data-access layer for authors."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, author_id: int) -> Author | None:
        row = self._session.get(AuthorTable, author_id, populate_existing=True)
        if row is None:
            return None
        return Author.model_validate(row, from_attributes=True)

    def create(self, author: Author) -> Author:
        """Insert a new author and return it with the store-assigned id.

        The insert is flushed immediately so constraint violations surface
        here rather than at commit time.
        """
        row = AuthorTable(name=author.name, birth_date=author.birth_date)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Author.model_validate(row, from_attributes=True)

    def update_fields(
        self, author_id: int, change_set: Sequence[AuthorFieldUpdate]
    ) -> int:
        """Apply a change-set as a single UPDATE and return the affected row count."""
        if not change_set:
            return 0

        statement = (
            update(AuthorTable)
            .where(col(AuthorTable.id) == author_id)
            .values(as_values(change_set))
        )
        result = self._session.exec(statement)  # type: ignore[call-overload]
        return result.rowcount

    def count_existing(self, author_ids: Sequence[int]) -> int:
        """Count how many of the given ids belong to persisted authors.

        Runs as one COUNT query regardless of how many ids are passed.
        """
        if not author_ids:
            return 0

        statement = (
            select(func.count())
            .select_from(AuthorTable)
            .where(col(AuthorTable.id).in_(author_ids))
        )
        return self._session.exec(statement).one()
