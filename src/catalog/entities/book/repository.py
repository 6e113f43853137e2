"""Book repository."""

from collections.abc import Sequence

from sqlalchemy import update
from sqlmodel import Session, col, select

from src.catalog.core.models.change_set import BookFieldUpdate, as_values
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.table import BookTable
from src.catalog.entities.book_author.table import BookAuthorTable


class BookRepository:
    """Data-access layer for books."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id, populate_existing=True)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def create(self, book: Book) -> Book:
        """Insert a new book, flushing so constraint violations raise here."""
        row = BookTable(
            title=book.title,
            price=book.price,
            publication_status=int(book.publication_status),
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def update_fields(self, book_id: int, change_set: Sequence[BookFieldUpdate]) -> int:
        """Apply a change-set as a single UPDATE and return the affected row count."""
        if not change_set:
            return 0

        values = as_values(change_set)
        if "publication_status" in values:
            values["publication_status"] = int(values["publication_status"])

        statement = (
            update(BookTable).where(col(BookTable.id) == book_id).values(values)
        )
        result = self._session.exec(statement)  # type: ignore[call-overload]
        return result.rowcount

    def list_by_author(self, author_id: int) -> list[Book]:
        """Return every book linked to the author, ordered by id."""
        statement = (
            select(BookTable)
            .join(BookAuthorTable, col(BookAuthorTable.book_id) == col(BookTable.id))
            .where(col(BookAuthorTable.author_id) == author_id)
            .order_by(col(BookTable.id))
        )
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]
