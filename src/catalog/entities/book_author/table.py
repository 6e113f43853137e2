"""Authorship join table model."""

from sqlmodel import Field, SQLModel


class BookAuthorTable(SQLModel, table=True):
    """Join row linking one book to one author.

    The (book_id, author_id) pair is the whole identity; there is no
    surrogate key.
    """

    __tablename__ = "book_authors"  # type: ignore[assignment]

    book_id: int = Field(foreign_key="books.id", primary_key=True)
    author_id: int = Field(foreign_key="authors.id", primary_key=True, index=True)
