"""Author database table model."""

from datetime import date

from sqlalchemy import Column, String, UniqueConstraint
from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors.

    No two rows may share the same (name, birth_date) pair; the store's
    unique index is what arbitrates concurrent registrations.
    """

    __tablename__ = "authors"  # type: ignore[assignment]
    __table_args__ = (
        UniqueConstraint("name", "birth_date", name="uq_authors_name_birth_date"),
    )

    name: str = Field(sa_column=Column(String(255), nullable=False))
    birth_date: date = Field(nullable=False)
