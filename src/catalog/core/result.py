"""Success/failure values returned by the catalog engines."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.catalog.core.errors import CatalogError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: CatalogError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error; lets callers opt back into exceptions."""
        raise self.error


Result = Ok[T] | Err
