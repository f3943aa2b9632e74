"""Error types raised on misuse of functional containers and pipelines."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class FunctionalError(Exception):
    """Base class for every error raised by fpkata."""


class NoSuchElementError(FunctionalError, LookupError):
    """Raised when an absent value is requested without a fallback."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)


class NullReferenceError(FunctionalError, TypeError):
    """Raised when a member of an absent (``None``) reference is accessed.

    The name of the offending reference is preserved for debugging.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)

    def __repr__(self) -> str:
        return f"NullReferenceError({super().__repr__()}, name={self.name!r})"


class UnsupportedOperationError(FunctionalError, TypeError):
    """Raised when a read-only view is asked to change."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} is not supported on a read-only view")


class StreamConsumedError(FunctionalError, RuntimeError):
    """Raised when a stream over a one-shot iterator is evaluated twice."""

    def __init__(self, message: str = "stream has already been operated upon or closed") -> None:
        super().__init__(message)


class ElementBudgetExceeded(FunctionalError, RuntimeError):
    """Raised when a terminal operation pulls more elements than configured."""

    def __init__(self, budget: int) -> None:
        self.budget = budget
        super().__init__(f"terminal operation exceeded element budget of {budget}")

    def __repr__(self) -> str:
        return f"ElementBudgetExceeded(budget={self.budget!r})"


def require_non_null(value: T | None, name: str = "value") -> T:
    """Return ``value`` unchanged, or raise NullReferenceError if it is None."""
    if value is None:
        raise NullReferenceError(f"{name} must not be None", name=name)
    return value
