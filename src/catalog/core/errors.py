"""Catalog error taxonomy and storage-error translation.

Every failure the catalog engines report is one of a closed set of kinds.
Errors carry the entity-type label and, where relevant, the offending field;
turning them into user-facing text is left to the presentation layer.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from sqlalchemy.exc import IntegrityError


class ErrorKind(str, Enum):
    """Closed set of error kinds surfaced by the catalog engines."""

    NOT_FOUND = "not_found"
    REFERENCE_NOT_FOUND = "reference_not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_STATE_TRANSITION = "invalid_state_transition"
    INVALID_ARGUMENT = "invalid_argument"
    UNEXPECTED = "unexpected"


class CatalogError(Exception):
    """Base class for catalog errors.

    Raised at the point of detection inside a transaction so the
    transaction scope rolls back, then handed to the caller as a value.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, entity_type: str, field: str | None = None, detail: str | None = None):
        self.entity_type = entity_type
        self.field = field
        self.detail = detail
        super().__init__(detail or f"{self.kind.value}: {entity_type}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogError):
            return NotImplemented
        return (self.kind, self.entity_type, self.field) == (
            other.kind,
            other.entity_type,
            other.field,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.entity_type, self.field))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entity_type={self.entity_type!r}, field={self.field!r})"
        )


class NotFound(CatalogError):
    """The targeted entity does not exist, or a write affected zero rows."""

    kind = ErrorKind.NOT_FOUND


class ReferenceNotFound(CatalogError):
    """A related-entity id supplied by the caller does not exist."""

    kind = ErrorKind.REFERENCE_NOT_FOUND


class AlreadyExists(CatalogError):
    """A uniqueness constraint was violated by an insert or update."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidStateTransition(CatalogError):
    """The one-way publication status ratchet was violated."""

    kind = ErrorKind.INVALID_STATE_TRANSITION


class InvalidArgument(CatalogError):
    """The request is structurally invalid, e.g. a book with no authors."""

    kind = ErrorKind.INVALID_ARGUMENT


class Unexpected(CatalogError):
    """An internal assumption was violated."""

    kind = ErrorKind.UNEXPECTED


# SQLSTATE codes reported by server databases (psycopg exposes them as ``sqlstate``/``pgcode``)
_UNIQUE_SQLSTATE = "23505"
_FOREIGN_KEY_SQLSTATE = "23503"


def _violated_constraint(error: IntegrityError) -> str:
    """Classify the violated constraint as ``unique``, ``foreign_key`` or ``other``."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == _UNIQUE_SQLSTATE:
        return "unique"
    if sqlstate == _FOREIGN_KEY_SQLSTATE:
        return "foreign_key"

    # SQLite only reports the constraint type in the message text
    message = str(orig).upper()
    if "FOREIGN KEY" in message:
        return "foreign_key"
    if "UNIQUE CONSTRAINT" in message or "PRIMARY KEY" in message or "DUPLICATE" in message:
        return "unique"
    return "other"


@contextmanager
def translate_integrity_errors(
    entity_type: str, reference_type: str | None = None
) -> Iterator[None]:
    """Translate storage constraint violations raised in the block.

    - unique or primary-key violations become ``AlreadyExists(entity_type)``
    - foreign-key violations become ``ReferenceNotFound``, labelled with
      ``reference_type`` when given
    - any other violation (CHECK, NOT NULL) becomes ``InvalidArgument(entity_type)``

    The original error is always chained.
    """
    try:
        yield
    except IntegrityError as e:
        detail = str(e.orig)
        constraint = _violated_constraint(e)
        if constraint == "unique":
            raise AlreadyExists(entity_type, detail=detail) from e
        if constraint == "foreign_key":
            raise ReferenceNotFound(reference_type or entity_type, detail=detail) from e
        raise InvalidArgument(entity_type, detail=detail) from e


__all__ = [
    "ErrorKind",
    "CatalogError",
    "NotFound",
    "ReferenceNotFound",
    "AlreadyExists",
    "InvalidStateTransition",
    "InvalidArgument",
    "Unexpected",
    "translate_integrity_errors",
]
