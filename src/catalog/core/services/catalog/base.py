"""Shared transaction handling for the catalog services."""

from collections.abc import Callable, Sequence
from typing import TypeVar

from loguru import logger
from sqlmodel import Session

from src.catalog.core.errors import CatalogError
from src.catalog.core.result import Err, Ok, Result
from src.catalog.core.services.database.db_session import DbSessionService

T = TypeVar("T")


def distinct_ids(ids: Sequence[int]) -> list[int]:
    """Drop repeated ids, keeping the first occurrence order."""
    return list(dict.fromkeys(ids))


class CatalogService:
    """Runs each operation in exactly one transaction.

    Catalog errors raised inside the transaction roll it back and are
    returned as ``Err``; any other exception rolls back and propagates.
    """

    def __init__(self, db_service: DbSessionService):
        self._db = db_service

    def _transact(self, operation: str, work: Callable[[Session], T]) -> Result[T]:
        try:
            with self._db.session_scope() as session:
                value = work(session)
        except CatalogError as e:
            logger.bind(
                operation=operation,
                kind=e.kind.value,
                entity_type=e.entity_type,
                field=e.field,
            ).warning("{} rejected: {}", operation, e.kind.value)
            return Err(e)
        return Ok(value)
