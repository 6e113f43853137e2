"""Author API router."""

from fastapi import APIRouter, Depends, status

from src.catalog.api.http.deps import get_author_service
from src.catalog.api.http.errors import bad_request, unwrap_or_raise
from src.catalog.core.models.change_set import AUTHOR_PATCH_RULES, build_change_set
from src.catalog.core.models.requests import PatchAuthorRequest, RegisterAuthorRequest
from src.catalog.core.services import AuthorService
from src.catalog.entities.author import Author, AuthorWithBooks

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_author(
    request: RegisterAuthorRequest,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    """Register a new author."""
    if request.id is not None:
        raise bad_request("ID must be omitted when creating an author")

    author = Author(name=request.name, birth_date=request.birth_date)
    return unwrap_or_raise(service.register_author(author))


@router.patch("/{author_id}", response_model=Author)
def patch_author(
    author_id: int,
    request: PatchAuthorRequest,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    """Partially update an author."""
    if request.id is not None and request.id != author_id:
        raise bad_request("ID in request body must be omitted or match the path")

    change_set = build_change_set(request, AUTHOR_PATCH_RULES)
    return unwrap_or_raise(service.partial_update_author(author_id, change_set))  # type: ignore[arg-type]


@router.get("/{author_id}/books", response_model=AuthorWithBooks)
def get_author_books(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> AuthorWithBooks:
    """Get an author together with their books."""
    return unwrap_or_raise(service.get_author_with_books(author_id))
