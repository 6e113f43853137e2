"""Book API router."""

from fastapi import APIRouter, Depends, status

from src.catalog.api.http.deps import get_book_service
from src.catalog.api.http.errors import bad_request, unwrap_or_raise
from src.catalog.core.models.change_set import BOOK_PATCH_RULES, build_change_set
from src.catalog.core.models.requests import PatchBookRequest, RegisterBookRequest
from src.catalog.core.services import BookService
from src.catalog.entities.book import Book, BookWithAuthors

router = APIRouter(prefix="/api/books", tags=["books"])


@router.post("", response_model=BookWithAuthors, status_code=status.HTTP_201_CREATED)
def create_book(
    request: RegisterBookRequest,
    service: BookService = Depends(get_book_service),
) -> BookWithAuthors:
    """Register a new book with its authors."""
    if request.id is not None:
        raise bad_request("ID must be omitted when creating a book")

    book = Book(
        title=request.title,
        price=request.price,
        publication_status=request.publication_status,
    )
    return unwrap_or_raise(service.register_book(book, request.author_ids))


@router.get("/{book_id}", response_model=BookWithAuthors)
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookWithAuthors:
    """Get a book by ID."""
    return unwrap_or_raise(service.get_book(book_id))


@router.patch("/{book_id}", response_model=BookWithAuthors)
def patch_book(
    book_id: int,
    request: PatchBookRequest,
    service: BookService = Depends(get_book_service),
) -> BookWithAuthors:
    """Partially update a book and, optionally, replace its authors."""
    if request.id is not None and request.id != book_id:
        raise bad_request("ID in request body must be omitted or match the path")

    change_set = build_change_set(request, BOOK_PATCH_RULES)
    return unwrap_or_raise(
        service.update_book(book_id, change_set, request.author_ids)  # type: ignore[arg-type]
    )
