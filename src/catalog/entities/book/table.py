"""Book database table model."""

from sqlalchemy import CheckConstraint, Column, String, UniqueConstraint
from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    The publication status is stored as its integer code.
    """

    __tablename__ = "books"  # type: ignore[assignment]
    __table_args__ = (
        UniqueConstraint(
            "title", "price", "publication_status", name="uq_books_title_price_status"
        ),
        CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
        CheckConstraint(
            "publication_status IN (0, 1)", name="ck_books_publication_status"
        ),
    )

    title: str = Field(sa_column=Column(String(255), nullable=False))
    price: int = Field(nullable=False)
    publication_status: int = Field(default=0, nullable=False)
