"""Request bodies accepted by the catalog API.

Patch requests distinguish a field the client left out from one it sent as
null through pydantic's ``model_fields_set``; the change-set builder relies
on that distinction.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, PastDate

from src.catalog.core.models.enums import PublicationStatus


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class RegisterAuthorRequest(BaseModel):
    """Body of an author registration. Birth date must be before today."""

    id: int | None = Field(default=None, description="Must be omitted on creation")
    name: NonBlankStr = Field(description="Author's display name")
    birth_date: PastDate = Field(description="Author's date of birth")


class PatchAuthorRequest(BaseModel):
    """Body of a partial author update.

    A blank name or a null field leaves the stored value unchanged. A birth
    date, when given, must still be before today.
    """

    id: int | None = Field(default=None, description="Omitted, or equal to the path id")
    name: str | None = None
    birth_date: PastDate | None = None


class RegisterBookRequest(BaseModel):
    """Body of a book registration.

    An empty ``author_ids`` list is accepted here and rejected by the
    registration itself, so the caller sees one consistent error kind.
    """

    id: int | None = Field(default=None, description="Must be omitted on creation")
    title: NonBlankStr = Field(description="Title")
    price: int = Field(ge=0, description="Price, never negative")
    publication_status: PublicationStatus = Field(description="0: unpublished, 1: published")
    author_ids: list[int] = Field(description="Ids of the book's authors")


class PatchBookRequest(BaseModel):
    """Body of a partial book update.

    ``author_ids`` replaces the whole authorship set when it holds at least
    one id; omitted, null or empty leaves authorships untouched.
    """

    id: int | None = Field(default=None, description="Omitted, or equal to the path id")
    title: str | None = None
    price: int | None = Field(default=None, ge=0)
    publication_status: PublicationStatus | None = None
    author_ids: list[int] | None = None
