"""Collectors - reusable recipes for Stream.collect()."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from fpkata.kernel.functions import identity

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")
K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Collector(Generic[T, A, R]):
    """A mutable reduction.

    Attributes:
        supplier: Creates a fresh accumulation container.
        accumulator: Folds one element into the container in place.
        finisher: Turns the container into the final result.
    """

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], None]
    finisher: Callable[[A], R] = identity  # type: ignore[assignment]


def to_list() -> Collector[Any, list[Any], list[Any]]:
    return Collector(list, list.append)


def to_unmodifiable_list() -> Collector[Any, list[Any], tuple[Any, ...]]:
    return Collector(list, list.append, tuple)


def to_set() -> Collector[Any, set[Any], set[Any]]:
    return Collector(set, set.add)


def to_dict(
    key_mapper: Callable[[T], K],
    value_mapper: Callable[[T], V],
    merge: Callable[[V, V], V] | None = None,
) -> Collector[T, dict[K, V], dict[K, V]]:
    """Collect into a dict.

    Duplicate keys raise ValueError unless ``merge`` combines the values.
    """
    def accumulate(acc: dict[K, V], item: T) -> None:
        key = key_mapper(item)
        value = value_mapper(item)
        if key in acc:
            if merge is None:
                raise ValueError(f"Duplicate key {key!r}")
            value = merge(acc[key], value)
        acc[key] = value

    return Collector(dict, accumulate)


def to_unmodifiable_dict(
    key_mapper: Callable[[T], K],
    value_mapper: Callable[[T], V],
) -> Collector[T, dict[K, V], MappingProxyType[K, V]]:
    base = to_dict(key_mapper, value_mapper)
    return Collector(base.supplier, base.accumulator, MappingProxyType)


def joining(separator: str = "", prefix: str = "", suffix: str = "") -> Collector[Any, list[str], str]:
    return Collector(
        list,
        lambda acc, item: acc.append(str(item)),
        lambda acc: prefix + separator.join(acc) + suffix,
    )


def counting() -> Collector[Any, list[int], int]:
    def accumulate(acc: list[int], _: Any) -> None:
        acc[0] += 1

    return Collector(lambda: [0], accumulate, lambda acc: acc[0])


def summing(mapper: Callable[[T], Any]) -> Collector[T, list[Any], Any]:
    def accumulate(acc: list[Any], item: T) -> None:
        acc[0] += mapper(item)

    return Collector(lambda: [0], accumulate, lambda acc: acc[0])


def mapping(mapper: Callable[[T], Any], downstream: Collector[Any, A, R]) -> Collector[T, A, R]:
    """Adapt ``downstream`` to accept elements after applying ``mapper``."""
    return Collector(
        downstream.supplier,
        lambda acc, item: downstream.accumulator(acc, mapper(item)),
        downstream.finisher,
    )


def grouping_by(
    classifier: Callable[[T], K],
    downstream: Collector[T, Any, Any] | None = None,
) -> Collector[T, dict[K, Any], dict[K, Any]]:
    """Group elements by ``classifier``; each group is reduced by ``downstream``.

    Groups appear in first-seen order. The default downstream is to_list().
    """
    down = downstream or to_list()

    def accumulate(acc: dict[K, Any], item: T) -> None:
        key = classifier(item)
        if key not in acc:
            acc[key] = down.supplier()
        down.accumulator(acc[key], item)

    def finish(acc: dict[K, Any]) -> dict[K, Any]:
        return {key: down.finisher(container) for key, container in acc.items()}

    return Collector(dict, accumulate, finish)


def partitioning_by(
    predicate: Callable[[T], bool],
    downstream: Collector[T, Any, Any] | None = None,
) -> Collector[T, dict[bool, Any], dict[bool, Any]]:
    """Split elements into ``True`` and ``False`` groups; both keys are always present."""
    down = downstream or to_list()

    def supply() -> dict[bool, Any]:
        return {False: down.supplier(), True: down.supplier()}

    def accumulate(acc: dict[bool, Any], item: T) -> None:
        down.accumulator(acc[bool(predicate(item))], item)

    def finish(acc: dict[bool, Any]) -> dict[bool, Any]:
        return {key: down.finisher(container) for key, container in acc.items()}

    return Collector(supply, accumulate, finish)
