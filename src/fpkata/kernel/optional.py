"""Optional - a value-or-absence container used in place of None checks."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fpkata.kernel.errors import NoSuchElementError, require_non_null

if TYPE_CHECKING:
    from fpkata.kernel.stream import Stream

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Optional(Generic[T]):
    """
    Holds at most one non-None value.

    States:
    - present: ``_value`` is the held value
    - absent: ``_value`` is None

    An absent Optional never hands out a value unless a fallback is given.
    """

    _value: T | None = None

    @staticmethod
    def of(value: T) -> Optional[T]:
        """Wrap a value that must not be None."""
        return Optional(require_non_null(value, "value"))

    @staticmethod
    def of_nullable(value: T | None) -> Optional[T]:
        return Optional(value)

    @staticmethod
    def empty() -> Optional[Any]:
        return _EMPTY

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        """Return the value, or raise NoSuchElementError when absent."""
        if self._value is None:
            raise NoSuchElementError()
        return self._value

    def if_present(self, action: Callable[[T], None]) -> None:
        if self._value is not None:
            action(self._value)

    def if_present_or_else(self, action: Callable[[T], None], empty_action: Callable[[], None]) -> None:
        if self._value is not None:
            action(self._value)
        else:
            empty_action()

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Apply ``mapper`` when present; a None result becomes absent."""
        if self._value is None:
            return _EMPTY
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], Optional[U]]) -> Optional[U]:
        """Apply an Optional-returning ``mapper`` without re-wrapping its result."""
        if self._value is None:
            return _EMPTY
        result = require_non_null(mapper(self._value), "flat_map result")
        if not isinstance(result, Optional):
            raise TypeError(f"flat_map mapper must return Optional, got {type(result).__name__}")
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        if self._value is None or predicate(self._value):
            return self
        return _EMPTY

    def or_(self, supplier: Callable[[], Optional[T]]) -> Optional[T]:
        """Return self when present, otherwise the Optional produced by ``supplier``."""
        if self._value is not None:
            return self
        return require_non_null(supplier(), "or_ supplier result")

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value, or call ``supplier`` only when absent."""
        if self._value is not None:
            return self._value
        return supplier()

    def or_else_throw(self, error_supplier: Callable[[], BaseException] | None = None) -> T:
        """Return the value, or raise.

        Args:
            error_supplier: Builds the exception to raise when absent. Without
                one, NoSuchElementError is raised.
        """
        if self._value is not None:
            return self._value
        if error_supplier is None:
            raise NoSuchElementError()
        raise error_supplier()

    def stream(self) -> Stream[T]:
        """A stream of zero or one element."""
        from fpkata.kernel.stream import Stream

        if self._value is None:
            return Stream.empty()
        return Stream.of(self._value)

    def __iter__(self) -> Iterator[T]:
        if self._value is not None:
            yield self._value

    def __bool__(self) -> bool:
        return self._value is not None

    def __repr__(self) -> str:
        if self._value is None:
            return "Optional.empty"
        return f"Optional[{self._value!r}]"


_EMPTY: Optional[Any] = Optional()
