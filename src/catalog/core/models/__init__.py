"""Core models: enumerations, change-sets and request bodies."""

from .change_set import (
    AUTHOR_PATCH_RULES,
    BOOK_PATCH_RULES,
    AuthorFieldUpdate,
    BookFieldUpdate,
    FieldRule,
    FieldUpdate,
    InclusionRule,
    SetAuthorName,
    SetBirthDate,
    SetPrice,
    SetPublicationStatus,
    SetTitle,
    build_change_set,
)
from .enums import PublicationStatus

__all__ = [
    "AUTHOR_PATCH_RULES",
    "BOOK_PATCH_RULES",
    "AuthorFieldUpdate",
    "BookFieldUpdate",
    "FieldRule",
    "FieldUpdate",
    "InclusionRule",
    "PublicationStatus",
    "SetAuthorName",
    "SetBirthDate",
    "SetPrice",
    "SetPublicationStatus",
    "SetTitle",
    "build_change_set",
]
