from collections.abc import Sequence

from loguru import logger
from sqlmodel import Session

from src.catalog.core.errors import NotFound, Unexpected, translate_integrity_errors
from src.catalog.core.models.change_set import AuthorFieldUpdate, columns
from src.catalog.core.result import Result
from src.catalog.core.services.catalog.base import CatalogService
from src.catalog.entities.author import Author, AuthorRepository, AuthorWithBooks
from src.catalog.entities.book import BookRepository


class AuthorService(CatalogService):
    """Registers, updates and reads authors."""

    def register_author(self, author: Author) -> Result[Author]:
        """Persist a new author.

        A second author with the same name and birth date is rejected by the
        store's unique index and reported as ``AlreadyExists``.
        """

        def work(session: Session) -> Author:
            with translate_integrity_errors("author"):
                created = AuthorRepository(session).create(author)
            logger.info("Registered author {}", created.id)
            return created

        return self._transact("register_author", work)

    def partial_update_author(
        self, author_id: int, change_set: Sequence[AuthorFieldUpdate]
    ) -> Result[Author]:
        """Apply a sparse change-set to an existing author.

        An empty change-set is not an error: the current author is returned
        unchanged.
        """

        def work(session: Session) -> Author:
            authors = AuthorRepository(session)
            existing = authors.get(author_id)
            if existing is None:
                raise NotFound("author id", field="id")

            if not change_set:
                return existing

            with translate_integrity_errors("author"):
                updated_count = authors.update_fields(author_id, change_set)
            if updated_count == 0:
                raise NotFound("author id", field="id")

            updated = authors.get(author_id)
            if updated is None:
                raise Unexpected(
                    "author",
                    detail=f"Author {author_id} was updated but could not be read back",
                )
            logger.info("Updated author {} fields {}", author_id, columns(change_set))
            return updated

        return self._transact("partial_update_author", work)

    def get_author_with_books(self, author_id: int) -> Result[AuthorWithBooks]:
        def work(session: Session) -> AuthorWithBooks:
            author = AuthorRepository(session).get(author_id)
            if author is None:
                raise NotFound("author id", field="id")
            books = BookRepository(session).list_by_author(author_id)
            logger.debug("Author {} has {} book(s)", author_id, len(books))
            return AuthorWithBooks(author=author, books=books)

        return self._transact("get_author_with_books", work)
