from collections.abc import Sequence

from src.catalog.core.errors import ReferenceNotFound
from src.catalog.entities.author.repository import AuthorRepository


class AuthorReferenceValidator:
    """Confirms that every referenced author id belongs to a persisted author."""

    def __init__(self, author_repo: AuthorRepository):
        self._author_repo = author_repo

    def validate_all_exist(self, author_ids: Sequence[int]) -> None:
        """Raise ``ReferenceNotFound`` unless all ids exist.

        The check is a single COUNT over the distinct ids, compared with how
        many distinct ids were asked for. An empty input always passes.
        """
        unique_ids = set(author_ids)
        if self._author_repo.count_existing(list(unique_ids)) != len(unique_ids):
            raise ReferenceNotFound("author id", field="author_ids")
