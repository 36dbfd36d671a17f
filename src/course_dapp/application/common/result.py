"""
Success/Failure outcome of a use case.

Use cases report expected problems ("Course not found.") as a Failure
instead of raising. The rollup state handler turns a Success into a notice
or an accepting report and a Failure into a rejecting report.

Example:
    def get_course(self, course_id: str) -> Result[Course, str]:
        course = self._find_course(course_id)
        if not course:
            return Failure(f"Course with ID '{course_id}' not found.")
        return Success(course)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Success carries no error")

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Transform the value, e.g. an entity into its response schema."""
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        raise ValueError(f"Failure carries no value: {self.error!r}")

    def unwrap_error(self) -> E:
        return self.error

    def map(self, fn: Callable[[object], object]) -> "Failure[E]":
        """Failures pass through unchanged."""
        return self


Result = Success[T] | Failure[E]
