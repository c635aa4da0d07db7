"""Tagged success/failure result."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from character_catalog.errors import CatalogError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value.

    Attributes:
        value: The produced value (a character, a page, a list, ...)
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[CatalogError], R]) -> R:
        return on_success(self.value)

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error unchanged.

    Attributes:
        error: The error produced at the failing boundary
    """

    error: CatalogError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def fold(self, on_success: Callable, on_failure: Callable[[CatalogError], R]) -> R:
        return on_failure(self.error)

    def map(self, fn: Callable) -> "Failure":
        return self


Result = Union[Success[T], Failure]
