from collections.abc import Sequence

from loguru import logger
from sqlmodel import Session

from src.catalog.core.errors import (
    InvalidArgument,
    InvalidStateTransition,
    NotFound,
    Unexpected,
    translate_integrity_errors,
)
from src.catalog.core.models.change_set import (
    BookFieldUpdate,
    SetPublicationStatus,
    columns,
    find,
)
from src.catalog.core.result import Result
from src.catalog.core.services.catalog.base import CatalogService, distinct_ids
from src.catalog.core.services.catalog.relation_validator import AuthorReferenceValidator
from src.catalog.entities.author import AuthorRepository
from src.catalog.entities.book import Book, BookRepository, BookWithAuthors
from src.catalog.entities.book_author import BookAuthorRepository


class BookService(CatalogService):
    """Registers, updates and reads books together with their authorships.

    Every operation re-reads what it needs from the store inside its own
    transaction; nothing is kept between calls.
    """

    def register_book(self, book: Book, author_ids: Sequence[int]) -> Result[BookWithAuthors]:
        """Persist a new book and link it to its authors.

        Fails with ``InvalidArgument`` when no author is given, with
        ``ReferenceNotFound`` when an author id is unknown and with
        ``AlreadyExists`` when the (title, price, status) triple is taken.
        The returned author ids are read back from the store.
        """

        def work(session: Session) -> BookWithAuthors:
            if not author_ids:
                raise InvalidArgument(
                    "book", field="author_ids", detail="At least one author is required"
                )

            unique_author_ids = distinct_ids(author_ids)
            AuthorReferenceValidator(AuthorRepository(session)).validate_all_exist(unique_author_ids)

            with translate_integrity_errors("book"):
                created = BookRepository(session).create(book)
            if created.id is None:
                raise Unexpected("book", detail="Inserted book has no identifier")

            authorships = BookAuthorRepository(session)
            with translate_integrity_errors("authorship", reference_type="author id"):
                for author_id in unique_author_ids:
                    authorships.add(created.id, author_id)

            logger.info("Registered book {} with authors {}", created.id, unique_author_ids)
            return BookWithAuthors.combine(created, authorships.author_ids_for(created.id))

        return self._transact("register_book", work)

    def update_book(
        self,
        book_id: int,
        change_set: Sequence[BookFieldUpdate],
        new_author_ids: Sequence[int] | None = None,
    ) -> Result[BookWithAuthors]:
        """Partially update a book and optionally replace its authors.

        Steps, all in one transaction:

        1. Load the current book (``NotFound`` if absent).
        2. Reject PUBLISHED -> UNPUBLISHED (``InvalidStateTransition``).
        3. Apply the scalar change-set as one UPDATE, if non-empty.
        4. If ``new_author_ids`` holds at least one id, validate them and
           replace the whole authorship set. ``None`` or an empty list
           leave authorships untouched.
        5. Re-read the book and its authorships.

        A failure at any step rolls back everything before it.
        """

        def work(session: Session) -> BookWithAuthors:
            books = BookRepository(session)
            authorships = BookAuthorRepository(session)

            current = books.get(book_id)
            if current is None:
                raise NotFound("book id", field="id")

            requested_status = find(change_set, SetPublicationStatus)
            if requested_status is not None and not current.publication_status.can_transition_to(
                requested_status.value
            ):
                raise InvalidStateTransition("book", field="publication_status")

            if change_set:
                with translate_integrity_errors("book"):
                    updated_count = books.update_fields(book_id, change_set)
                if updated_count == 0:
                    raise NotFound("book id", field="id")
                logger.info("Updated book {} fields {}", book_id, columns(change_set))

            if new_author_ids:
                unique_author_ids = distinct_ids(new_author_ids)
                AuthorReferenceValidator(AuthorRepository(session)).validate_all_exist(
                    unique_author_ids
                )
                with translate_integrity_errors("authorship", reference_type="author id"):
                    authorships.replace_for_book(book_id, unique_author_ids)
                logger.info("Replaced authors of book {} with {}", book_id, unique_author_ids)

            updated = books.get(book_id)
            if updated is None:
                raise Unexpected(
                    "book", detail=f"Book {book_id} was updated but could not be read back"
                )
            return BookWithAuthors.combine(updated, authorships.author_ids_for(book_id))

        return self._transact("update_book", work)

    def get_book(self, book_id: int) -> Result[BookWithAuthors]:
        def work(session: Session) -> BookWithAuthors:
            book = BookRepository(session).get(book_id)
            if book is None:
                raise NotFound("book id", field="id")
            return BookWithAuthors.combine(book, BookAuthorRepository(session).author_ids_for(book_id))

        return self._transact("get_book", work)
