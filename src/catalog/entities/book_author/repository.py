"""Authorship repository."""

from collections.abc import Iterable

from sqlalchemy import delete
from sqlmodel import Session, col, select

from src.catalog.entities.book_author.table import BookAuthorTable


class BookAuthorRepository:
    """Data-access layer for the book/author join table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def author_ids_for(self, book_id: int) -> list[int]:
        statement = (
            select(BookAuthorTable.author_id)
            .where(col(BookAuthorTable.book_id) == book_id)
            .order_by(col(BookAuthorTable.author_id))
        )
        return list(self._session.exec(statement).all())

    def add(self, book_id: int, author_id: int) -> None:
        self._session.add(BookAuthorTable(book_id=book_id, author_id=author_id))
        self._session.flush()

    def delete_for_book(self, book_id: int) -> int:
        statement = delete(BookAuthorTable).where(col(BookAuthorTable.book_id) == book_id)
        result = self._session.exec(statement)  # type: ignore[call-overload]
        return result.rowcount

    def replace_for_book(self, book_id: int, author_ids: Iterable[int]) -> None:
        """Replace the book's whole authorship set with ``author_ids``.

        Existing rows are deleted before the new ones are inserted, inside
        the caller's transaction.
        """
        self.delete_for_book(book_id)
        for author_id in author_ids:
            self.add(book_id, author_id)
