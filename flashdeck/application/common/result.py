"""
Discriminated outcome of a mutation use case.

Example:
    result = use_case.create_deck(caller, name="Spanish verbs")
    if result.is_success:
        deck = result.unwrap()
    else:
        error = result.unwrap_error()
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    is_success: ClassVar[bool] = True
    is_failure: ClassVar[bool] = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError(f"{self!r} carries no error")

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    is_success: ClassVar[bool] = False
    is_failure: ClassVar[bool] = True

    def unwrap(self) -> None:
        raise ValueError(f"{self!r} carries no value")

    def unwrap_error(self) -> E:
        return self.error

    def map(self, fn: Callable[..., object]) -> "Failure[E]":
        """Failures pass through unchanged."""
        return self


Result = Success[T] | Failure[E]
