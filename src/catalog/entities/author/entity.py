"""Author domain entity."""

from datetime import date

from pydantic import BaseModel, Field

from src.catalog.entities.book.entity import Book
from src.catalog.entities.core._base import Entity


class Author(Entity):
    """Author entity representing a person who wrote one or more books.

    This is the domain model handed across the service boundary. It is
    rebuilt from the store on every operation and never cached.
    """

    name: str = Field(description="Author's display name")
    birth_date: date = Field(description="Author's date of birth")


class AuthorWithBooks(BaseModel):
    """An author together with every book linked to them."""

    author: Author
    books: list[Book] = Field(default_factory=list)
