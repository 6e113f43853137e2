"""Typed change-sets and the update-set builder.

A change-set is a tuple of field-update variants, one per column that should
be written. Each variant knows its column name and carries a value of the
column's type, so repositories can turn a change-set into an UPDATE without
casting or checking field names at runtime.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from src.catalog.core.models.enums import PublicationStatus


@dataclass(frozen=True)
class FieldUpdate:
    """Base class for a single column assignment."""

    column: ClassVar[str]
    value: Any


@dataclass(frozen=True)
class SetAuthorName(FieldUpdate):
    column: ClassVar[str] = "name"
    value: str


@dataclass(frozen=True)
class SetBirthDate(FieldUpdate):
    column: ClassVar[str] = "birth_date"
    value: date


@dataclass(frozen=True)
class SetTitle(FieldUpdate):
    column: ClassVar[str] = "title"
    value: str


@dataclass(frozen=True)
class SetPrice(FieldUpdate):
    column: ClassVar[str] = "price"
    value: int


@dataclass(frozen=True)
class SetPublicationStatus(FieldUpdate):
    column: ClassVar[str] = "publication_status"
    value: PublicationStatus

    def __post_init__(self) -> None:
        # Raw status codes are accepted; anything outside the enum raises ValueError
        object.__setattr__(self, "value", PublicationStatus(self.value))


AuthorFieldUpdate = SetAuthorName | SetBirthDate
BookFieldUpdate = SetTitle | SetPrice | SetPublicationStatus

U = TypeVar("U", bound=FieldUpdate)


class InclusionRule(str, Enum):
    """How a present request field is turned into a change-set entry."""

    OMIT_IF_BLANK = "omit_if_blank"
    OMIT_IF_NULL = "omit_if_null"
    INCLUDE_NULL = "include_null"


@dataclass(frozen=True)
class FieldRule:
    """Inclusion rule plus the variant constructor for one request field."""

    inclusion: InclusionRule
    build: Callable[[Any], FieldUpdate]


def _should_include(rule: InclusionRule, value: Any) -> bool:
    if rule is InclusionRule.INCLUDE_NULL:
        return True
    if value is None:
        return False
    if rule is InclusionRule.OMIT_IF_BLANK:
        return isinstance(value, str) and value.strip() != ""
    return True


def build_change_set(
    request: BaseModel, rules: Mapping[str, FieldRule]
) -> tuple[FieldUpdate, ...]:
    """Build a change-set from the fields the client explicitly supplied.

    Fields absent from the request body (not in ``model_fields_set``) never
    produce an entry. Present fields are filtered by their inclusion rule.
    Request fields without a rule are ignored. The result is ordered by the
    rule table and holds at most one entry per column.
    """
    supplied = request.model_fields_set
    updates: dict[str, FieldUpdate] = {}

    for field_name, rule in rules.items():
        if field_name not in supplied:
            continue
        value = getattr(request, field_name)
        if not _should_include(rule.inclusion, value):
            continue
        update = rule.build(value)
        updates[update.column] = update

    return tuple(updates.values())


def as_values(change_set: Iterable[FieldUpdate]) -> dict[str, Any]:
    """Flatten a change-set into a column -> value mapping for an UPDATE."""
    return {update.column: update.value for update in change_set}


def columns(change_set: Iterable[FieldUpdate]) -> list[str]:
    return [update.column for update in change_set]


def find(change_set: Sequence[FieldUpdate], variant: type[U]) -> U | None:
    """Return the entry of the given variant type, if the change-set holds one."""
    for update in change_set:
        if isinstance(update, variant):
            return update
    return None


AUTHOR_PATCH_RULES: Mapping[str, FieldRule] = {
    "name": FieldRule(InclusionRule.OMIT_IF_BLANK, SetAuthorName),
    "birth_date": FieldRule(InclusionRule.OMIT_IF_NULL, SetBirthDate),
}

BOOK_PATCH_RULES: Mapping[str, FieldRule] = {
    "title": FieldRule(InclusionRule.OMIT_IF_BLANK, SetTitle),
    "price": FieldRule(InclusionRule.OMIT_IF_NULL, SetPrice),
    "publication_status": FieldRule(InclusionRule.OMIT_IF_NULL, SetPublicationStatus),
}
