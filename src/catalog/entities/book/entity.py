"""Entity: Book."""

from pydantic import BaseModel, Field

from src.catalog.core.models.enums import PublicationStatus
from src.catalog.entities.core._base import Entity


class Book(Entity):
    """Book entity representing a title in the catalog.

    Title, price and publication status together identify a book; the store
    rejects a second row with the same triple.
    """

    title: str = Field(description="Title")
    price: int = Field(ge=0, description="Price, never negative")
    publication_status: PublicationStatus = Field(
        default=PublicationStatus.UNPUBLISHED, description="Publication status"
    )


class BookWithAuthors(BaseModel):
    """A book's scalar state combined with its current authorship set."""

    id: int
    title: str
    price: int
    publication_status: PublicationStatus
    author_ids: list[int] = Field(default_factory=list)

    @classmethod
    def combine(cls, book: Book, author_ids: list[int]) -> "BookWithAuthors":
        if book.id is None:
            raise ValueError("Cannot project a book that has not been persisted")
        return cls(
            id=book.id,
            title=book.title,
            price=book.price,
            publication_status=book.publication_status,
            author_ids=author_ids,
        )
