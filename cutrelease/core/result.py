"""Result type for explicit error handling.

Every step of a release either succeeds with a value or fails with a
typed error. Returning `Ok` / `Err` instead of raising keeps the
fail-fast pipeline readable: each step is checked, and the first `Err`
is handed back to the CLI which renders it and picks the exit code.

Errors change type at layer boundaries with `map_err`: a `ProcessError`
becomes a `GitError` inside `Repository`, and a `GitError` becomes a
`ReleaseError` of the right kind inside the release steps.

Usage:
    tags = repo.tags().map_err(lambda e: ReleaseError("environment", e.message))
    match tags:
        case Ok(names):
            print(", ".join(names))
        case Err(error):
            print(f"error: {error.message}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply `f` to the contained value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[object], object]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def unwrap(self) -> None:
        """Raise ValueError carrying the error."""
        raise ValueError(f"called unwrap on Err: {self.error}")

    def map(self, f: Callable[[object], object]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply `f` to the contained error."""
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
