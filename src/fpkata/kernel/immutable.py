"""Immutable values: defensive copies, records and read-only views.

To make a value immutable:
- assign every field once, at construction
- offer read accessors only
- never hand out a reference to internal mutable state; copy it on the way
  in and on the way out
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, NoReturn, TypeVar, overload

from pydantic import BaseModel, ConfigDict, field_validator

from fpkata.kernel.errors import UnsupportedOperationError, require_non_null

T = TypeVar("T")


class Address:
    """Class-based value object with read-only attributes."""

    __slots__ = ("_street", "_city")

    def __init__(self, street: str | None, city: str | None) -> None:
        object.__setattr__(self, "_street", street)
        object.__setattr__(self, "_city", city)

    @property
    def street(self) -> str | None:
        return self._street

    @property
    def city(self) -> str | None:
        return self._city

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"cannot assign to field '{name}'")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Address):
            return NotImplemented
        return self._street == other._street and self._city == other._city

    def __hash__(self) -> int:
        return hash((self._street, self._city))

    def __repr__(self) -> str:
        return f"Address(street={self._street!r}, city={self._city!r})"


class AddressRecord(BaseModel):
    """Record-style equivalent of Address."""

    model_config = ConfigDict(frozen=True)

    street: str | None
    city: str | None

    def compose(self) -> str:
        """Street followed by city; both must be set."""
        return require_non_null(self.street, "street") + require_non_null(self.city, "city")


class Circle(BaseModel):
    """Record with a validating constructor."""

    model_config = ConfigDict(frozen=True)

    radius: float

    @field_validator("radius")
    @classmethod
    def _radius_not_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Radius must be positive")
        return value


@dataclass(frozen=True, init=False)
class ImmutableData:
    """Holds a list of items and an address without sharing either.

    ``items`` hands back a fresh list on every call; ``immutable_items`` is a
    tuple and can be shared as is.
    """

    _items: list[str] = field(compare=False)
    _immutable_items: tuple[str, ...]
    _address: Address

    def __init__(self, items: Iterable[str], address: Address) -> None:
        require_non_null(items, "items")
        require_non_null(address, "address")
        copied = list(items)
        object.__setattr__(self, "_items", copied)
        object.__setattr__(self, "_immutable_items", tuple(copied))
        object.__setattr__(self, "_address", Address(address.street, address.city))

    @property
    def items(self) -> list[str]:
        return list(self._items)

    @property
    def immutable_items(self) -> tuple[str, ...]:
        return self._immutable_items

    @property
    def address(self) -> Address:
        return Address(self._address.street, self._address.city)


class UnmodifiableListView(Sequence[T]):
    """Read-only window onto a list.

    Writes through the view raise UnsupportedOperationError; writes to the
    backing list stay visible through it.
    """

    __slots__ = ("_backing",)

    def __init__(self, backing: list[T]) -> None:
        self._backing = require_non_null(backing, "backing")

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        if isinstance(index, slice):
            return tuple(self._backing[index])
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __iter__(self) -> Iterator[T]:
        return iter(self._backing)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (UnmodifiableListView, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UnmodifiableListView({self._backing!r})"

    def _unsupported(self, operation: str) -> NoReturn:
        raise UnsupportedOperationError(operation)

    def append(self, value: T) -> NoReturn:
        self._unsupported("append")

    def extend(self, values: Iterable[T]) -> NoReturn:
        self._unsupported("extend")

    def insert(self, index: int, value: T) -> NoReturn:
        self._unsupported("insert")

    def remove(self, value: T) -> NoReturn:
        self._unsupported("remove")

    def pop(self, index: int = -1) -> NoReturn:
        self._unsupported("pop")

    def clear(self) -> NoReturn:
        self._unsupported("clear")

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self._unsupported("item assignment")

    def __delitem__(self, index: Any) -> NoReturn:
        self._unsupported("item deletion")


def freeze(value: Any) -> Any:
    """Deep-convert lists, sets and dicts into tuples, frozensets and read-only mappings.

    Other values are returned unchanged.
    """
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    return value
