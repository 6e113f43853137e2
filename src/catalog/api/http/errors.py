"""Translate catalog results into HTTP responses."""

from typing import TypeVar

from fastapi import HTTPException, status

from src.catalog.core.errors import CatalogError, ErrorKind
from src.catalog.core.result import Err, Result

T = TypeVar("T")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.REFERENCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_STATE_TRANSITION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "The requested {entity} was not found.",
    ErrorKind.REFERENCE_NOT_FOUND: "A referenced {entity} was not found.",
    ErrorKind.ALREADY_EXISTS: "The {entity} is already registered.",
    ErrorKind.INVALID_STATE_TRANSITION: "A published book cannot be changed back to unpublished.",
    ErrorKind.INVALID_ARGUMENT: "Invalid value for {field}.",
    ErrorKind.UNEXPECTED: "An unexpected error occurred.",
}


def error_detail(error: CatalogError) -> dict[str, str | None]:
    message = _MESSAGES[error.kind].format(
        entity=error.entity_type, field=error.field or "request"
    )
    return {
        "kind": error.kind.value,
        "entity_type": error.entity_type,
        "field": error.field,
        "message": message,
    }


def to_http_exception(error: CatalogError) -> HTTPException:
    return HTTPException(status_code=STATUS_BY_KIND[error.kind], detail=error_detail(error))


def unwrap_or_raise(result: Result[T]) -> T:
    """Return the success value or raise the matching HTTPException."""
    if isinstance(result, Err):
        raise to_http_exception(result.error)
    return result.value


def bad_request(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "kind": ErrorKind.INVALID_ARGUMENT.value,
            "entity_type": "request",
            "field": "id",
            "message": message,
        },
    )
