"""Stream - a lazy, pull-based sequence pipeline.

A Stream is a source plus a tuple of stages. Intermediate operations return a
new Stream with one more stage and never touch the source. Terminal
operations build the iterator chain and pull elements one at a time, so each
element passes through every stage before the next one is produced.
"""

from __future__ import annotations

import functools
import itertools
import logging
import re
import time
from collections.abc import Callable, Hashable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from fpkata.config import StreamConfig, default_config
from fpkata.kernel.errors import ElementBudgetExceeded, StreamConsumedError
from fpkata.kernel.optional import Optional
from fpkata.kernel.trace import Trace

if TYPE_CHECKING:
    from fpkata.kernel.collectors import Collector

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K")
V = TypeVar("V")

_NO_OP = object()


@dataclass(frozen=True)
class Operation:
    """One intermediate stage: a named iterator-to-iterator transformation."""

    op: str
    apply: Callable[[Iterator[Any]], Iterator[Any]]


@dataclass
class _SourceState:
    """Shared by every view over a one-shot iterator."""

    consumed: bool = False


@dataclass
class _Stats:
    pulled: int = 0


@dataclass(frozen=True, eq=False)
class Stream(Generic[T]):
    """Lazy sequence of elements.

    Sources backed by a re-iterable collection or a generator function may be
    evaluated any number of times. Sources backed by a one-shot iterator may
    be evaluated once; a second terminal operation raises StreamConsumedError.
    """

    _source: Callable[[], Iterator[Any]]
    _operations: tuple[Operation, ...] = ()
    _state: _SourceState | None = None
    _config: StreamConfig | None = None
    _trace: Trace | None = field(default=None)

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    @staticmethod
    def of(*items: T) -> Stream[T]:
        return Stream(lambda: iter(items))

    @staticmethod
    def empty() -> Stream[Any]:
        return Stream(lambda: iter(()))

    @staticmethod
    def from_iterable(iterable: Iterable[T]) -> Stream[T]:
        """Stream over any iterable.

        Iterators can only be walked once and the returned stream inherits
        that restriction.
        """
        if iter(iterable) is iterable:
            return Stream(lambda: iterable, _state=_SourceState())  # type: ignore[arg-type,return-value]
        return Stream(lambda: iter(iterable))

    @staticmethod
    def iterate(
        seed: T,
        has_next_or_next: Callable[[T], Any],
        next_fn: Callable[[T], T] | None = None,
    ) -> Stream[T]:
        """Sequence seed, f(seed), f(f(seed)), ...

        ``Stream.iterate(seed, f)`` is unbounded.
        ``Stream.iterate(seed, has_next, f)`` stops at the first element that
        fails ``has_next``.
        """
        if next_fn is None:
            step = has_next_or_next

            def unbounded() -> Iterator[T]:
                current = seed
                while True:
                    yield current
                    current = step(current)

            return Stream(unbounded)

        has_next = has_next_or_next
        step = next_fn

        def bounded() -> Iterator[T]:
            current = seed
            while has_next(current):
                yield current
                current = step(current)

        return Stream(bounded)

    @staticmethod
    def generate(supplier: Callable[[], T]) -> Stream[T]:
        """Unbounded sequence of supplier() results."""
        def generated() -> Iterator[T]:
            while True:
                yield supplier()

        return Stream(generated)

    @staticmethod
    def range(start: int, stop: int) -> Stream[int]:
        """Integers from start (inclusive) to stop (exclusive)."""
        return Stream(lambda: iter(range(start, stop)))

    @staticmethod
    def range_closed(start: int, stop: int) -> Stream[int]:
        """Integers from start to stop, both inclusive."""
        return Stream(lambda: iter(range(start, stop + 1)))

    @staticmethod
    def split(pattern: str | re.Pattern[str], text: str) -> Stream[str]:
        """Pieces of ``text`` around matches of ``pattern``.

        Capture groups in ``pattern`` are not emitted. A zero-width match at
        the start of ``text`` produces no leading empty piece. Trailing empty
        pieces are dropped; empty input yields one empty piece.
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

        def pieces() -> Iterator[str]:
            if not text:
                yield text
                return
            parts: list[str] = []
            index = 0
            for match in compiled.finditer(text):
                start, end = match.span()
                if end == 0:
                    continue
                parts.append(text[index:start])
                index = end
            parts.append(text[index:])
            while parts and parts[-1] == "":
                parts.pop()
            yield from parts

        return Stream(pieces)

    @staticmethod
    def concat(first: Stream[T], second: Stream[T]) -> Stream[T]:
        """All elements of ``first`` followed by all elements of ``second``."""
        return Stream(lambda: itertools.chain(first.iterator(), second.iterator()))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_config(self, config: StreamConfig) -> Stream[T]:
        trace = self._trace
        if trace is None and config.trace_enabled:
            trace = Trace()
        return replace(self, _config=config, _trace=trace)

    def with_trace(self, trace: Trace) -> Stream[T]:
        return replace(self, _trace=trace)

    @property
    def trace(self) -> Trace | None:
        return self._trace

    @property
    def stages(self) -> tuple[str, ...]:
        """Names of the intermediate stages, in application order."""
        return tuple(operation.op for operation in self._operations)

    # ------------------------------------------------------------------
    # Intermediate operations
    # ------------------------------------------------------------------

    def _with_op(self, op: str, apply: Callable[[Iterator[Any]], Iterator[Any]]) -> Stream[Any]:
        return replace(self, _operations=self._operations + (Operation(op=op, apply=apply),))

    def map(self, mapper: Callable[[T], R]) -> Stream[R]:
        return self._with_op("map", lambda it: map(mapper, it))

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        return self._with_op("filter", lambda it: filter(predicate, it))

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> Stream[R]:
        """Replace each element with the elements of ``mapper(element)``."""
        def flatten(it: Iterator[T]) -> Iterator[R]:
            for item in it:
                yield from mapper(item)

        return self._with_op("flat_map", flatten)

    def peek(self, action: Callable[[T], None]) -> Stream[T]:
        """Call ``action`` on each element as it flows past."""
        def peeking(it: Iterator[T]) -> Iterator[T]:
            for item in it:
                action(item)
                yield item

        return self._with_op("peek", peeking)

    def limit(self, max_size: int) -> Stream[T]:
        if max_size < 0:
            raise ValueError(f"limit must be non-negative, got {max_size}")
        return self._with_op("limit", lambda it: itertools.islice(it, max_size))

    def skip(self, n: int) -> Stream[T]:
        if n < 0:
            raise ValueError(f"skip must be non-negative, got {n}")
        return self._with_op("skip", lambda it: itertools.islice(it, n, None))

    def take_while(self, predicate: Callable[[T], bool]) -> Stream[T]:
        return self._with_op("take_while", lambda it: itertools.takewhile(predicate, it))

    def drop_while(self, predicate: Callable[[T], bool]) -> Stream[T]:
        return self._with_op("drop_while", lambda it: itertools.dropwhile(predicate, it))

    def distinct(self) -> Stream[T]:
        """Drop repeated elements, keeping first occurrences in order."""
        def unique(it: Iterator[T]) -> Iterator[T]:
            seen: set[Any] = set()
            seen_unhashable: list[Any] = []
            for item in it:
                if isinstance(item, Hashable):
                    try:
                        is_new = item not in seen
                    except TypeError:
                        # hashable type holding unhashable members, e.g. a tuple of lists
                        pass
                    else:
                        if is_new:
                            seen.add(item)
                            yield item
                        continue
                if item in seen_unhashable:
                    continue
                seen_unhashable.append(item)
                yield item

        return self._with_op("distinct", unique)

    def sorted(self, key: Callable[[T], Any] | None = None, reverse: bool = False) -> Stream[T]:
        """Sort elements; buffers everything upstream once evaluation starts."""
        def sorting(it: Iterator[T]) -> Iterator[T]:
            yield from sorted(it, key=key, reverse=reverse)  # type: ignore[type-var]

        return self._with_op("sorted", sorting)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _claim(self) -> None:
        if self._state is None:
            return
        if self._state.consumed:
            raise StreamConsumedError()
        self._state.consumed = True

    def _pull(
        self,
        source: Iterator[Any],
        stats: _Stats,
        trace: Trace | None,
        begin_id: int | None,
        budget: int | None,
    ) -> Iterator[Any]:
        for item in source:
            if budget is not None and stats.pulled >= budget:
                raise ElementBudgetExceeded(budget)
            stats.pulled += 1
            if trace is not None:
                trace.record("element", info={"index": stats.pulled - 1}, parent_id=begin_id)
            yield item

    @contextmanager
    def _evaluate(self, terminal: str) -> Iterator[Iterator[Any]]:
        """Claim the source and yield the fully staged iterator."""
        self._claim()
        config = self._config or default_config()
        trace = self._trace
        stats = _Stats()

        begin_id: int | None = None
        if trace is not None:
            begin_id = trace.record(
                "terminal_begin",
                info={"terminal": terminal, "stages": list(self.stages)},
            )

        start_time = time.perf_counter()
        try:
            items: Iterator[Any] = self._pull(self._source(), stats, trace, begin_id, config.max_elements)
            for operation in self._operations:
                items = operation.apply(items)
            yield items
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            if trace is not None and begin_id is not None:
                trace.record(
                    "terminal_end",
                    info={"terminal": terminal, "pulled": stats.pulled},
                    parent_id=begin_id,
                    duration_ms=duration_ms,
                )
            logger.debug(
                "%s pulled %d element(s) through %d stage(s) in %.3f ms",
                terminal,
                stats.pulled,
                len(self._operations),
                duration_ms,
            )

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def iterator(self) -> Iterator[T]:
        """Lazily yield results; evaluation starts at the first next()."""
        with self._evaluate("iterator") as items:
            yield from items

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def to_list(self) -> list[T]:
        with self._evaluate("to_list") as items:
            return list(items)

    def collect(self, collector: Collector[T, Any, R]) -> R:
        with self._evaluate("collect") as items:
            container = collector.supplier()
            for item in items:
                collector.accumulator(container, item)
            return collector.finisher(container)

    def for_each(self, action: Callable[[T], None]) -> None:
        with self._evaluate("for_each") as items:
            for item in items:
                action(item)

    def count(self) -> int:
        with self._evaluate("count") as items:
            return sum(1 for _ in items)

    def reduce(self, identity_or_op: Any, op: Callable[[Any, T], Any] | object = _NO_OP) -> Any:
        """Fold elements left to right.

        ``reduce(identity, op)`` returns the folded value, ``identity`` for an
        empty stream. ``reduce(op)`` returns an Optional that is empty for an
        empty stream.
        """
        with self._evaluate("reduce") as items:
            if op is _NO_OP:
                accumulator: Callable[[T, T], T] = identity_or_op
                try:
                    first = next(items)
                except StopIteration:
                    return Optional.empty()
                return Optional.of(functools.reduce(accumulator, items, first))
            return functools.reduce(op, items, identity_or_op)  # type: ignore[arg-type]

    def sum(self, start: Any = 0) -> Any:
        with self._evaluate("sum") as items:
            return sum(items, start)

    def find_first(self) -> Optional[T]:
        with self._evaluate("find_first") as items:
            for item in items:
                return Optional.of(item)
            return Optional.empty()

    def any_match(self, predicate: Callable[[T], bool]) -> bool:
        with self._evaluate("any_match") as items:
            return any(predicate(item) for item in items)

    def all_match(self, predicate: Callable[[T], bool]) -> bool:
        with self._evaluate("all_match") as items:
            return all(predicate(item) for item in items)

    def none_match(self, predicate: Callable[[T], bool]) -> bool:
        with self._evaluate("none_match") as items:
            return not any(predicate(item) for item in items)

    def min(self, key: Callable[[T], Any] | None = None) -> Optional[T]:
        with self._evaluate("min") as items:
            found = min(items, key=key, default=_NO_OP)  # type: ignore[type-var]
            return Optional.empty() if found is _NO_OP else Optional.of(found)

    def max(self, key: Callable[[T], Any] | None = None) -> Optional[T]:
        with self._evaluate("max") as items:
            found = max(items, key=key, default=_NO_OP)  # type: ignore[type-var]
            return Optional.empty() if found is _NO_OP else Optional.of(found)

    def to_dict(self, key_mapper: Callable[[T], K], value_mapper: Callable[[T], V]) -> dict[K, V]:
        """Map each element to a key/value pair; later keys overwrite earlier ones."""
        with self._evaluate("to_dict") as items:
            result: dict[K, V] = {}
            for item in items:
                result[key_mapper(item)] = value_mapper(item)
            return result

    def __repr__(self) -> str:
        return f"Stream(stages={list(self.stages)!r})"
