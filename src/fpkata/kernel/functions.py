"""Function values, composition and single-operation function types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
V = TypeVar("V")

# Single-operation capability types.
Predicate: TypeAlias = Callable[[T], bool]
Consumer: TypeAlias = Callable[[T], None]
Supplier: TypeAlias = Callable[[], T]
Function: TypeAlias = Callable[[T], R]
BiFunction: TypeAlias = Callable[[T, U], R]
UnaryOperator: TypeAlias = Callable[[T], T]
BinaryOperator: TypeAlias = Callable[[T, T], T]


class Greeting(Protocol):
    """A custom single-method capability."""

    def say_hello(self, name: str) -> None:
        ...


@dataclass(frozen=True)
class GreetingAdapter:
    """Adapt any one-argument callable to the Greeting capability."""

    fn: Consumer[str]

    def say_hello(self, name: str) -> None:
        self.fn(name)


def identity(x: T) -> T:
    return x


class ComposedFunction:
    """Applies its functions from right to left."""

    def __init__(self, *funcs: Callable[[Any], Any]) -> None:
        self.funcs = funcs

    def __call__(self, x: Any) -> Any:
        result = x
        for f in reversed(self.funcs):
            result = f(result)
        return result

    def __repr__(self) -> str:
        names = ", ".join(getattr(f, "__name__", repr(f)) for f in self.funcs)
        return f"ComposedFunction({names})"


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Combine functions right to left: compose(f, g)(x) == f(g(x))."""
    if not funcs:
        return identity
    return ComposedFunction(*funcs)


def pipe(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Combine functions left to right: pipe(f, g)(x) == g(f(x))."""
    return compose(*reversed(funcs))


@dataclass(frozen=True)
class Fn(Generic[T, R]):
    """A unary function value with composition helpers.

    ``square.and_then(double)`` squares first; ``square.compose(double)``
    doubles first.
    """

    fn: Callable[[T], R]

    def __call__(self, x: T) -> R:
        return self.fn(x)

    def apply(self, x: T) -> R:
        return self.fn(x)

    def and_then(self, after: Callable[[R], V]) -> Fn[T, V]:
        return Fn(compose(after, self.fn))

    def compose(self, before: Callable[[V], T]) -> Fn[V, R]:
        return Fn(compose(self.fn, before))

    @staticmethod
    def identity() -> Fn[T, T]:
        return Fn(identity)


@dataclass(frozen=True)
class BiFn(Generic[T, U, R]):
    """A two-argument function value."""

    fn: Callable[[T, U], R]

    def __call__(self, x: T, y: U) -> R:
        return self.fn(x, y)

    def apply(self, x: T, y: U) -> R:
        return self.fn(x, y)

    def and_then(self, after: Callable[[R], V]) -> BiFn[T, U, V]:
        fn = self.fn
        return BiFn(lambda x, y: after(fn(x, y)))


@dataclass(frozen=True)
class Pred(Generic[T]):
    """A predicate value that chains with and_/or_/negate or & | ~."""

    fn: Callable[[T], bool]

    def __call__(self, x: T) -> bool:
        return self.fn(x)

    def test(self, x: T) -> bool:
        return bool(self.fn(x))

    def and_(self, other: Callable[[T], bool]) -> Pred[T]:
        fn = self.fn
        return Pred(lambda x: bool(fn(x)) and bool(other(x)))

    def or_(self, other: Callable[[T], bool]) -> Pred[T]:
        fn = self.fn
        return Pred(lambda x: bool(fn(x)) or bool(other(x)))

    def negate(self) -> Pred[T]:
        fn = self.fn
        return Pred(lambda x: not fn(x))

    __and__ = and_
    __or__ = or_
    __invert__ = negate

    @staticmethod
    def not_(target: Callable[[T], bool]) -> Pred[T]:
        return Pred(target).negate()

    @staticmethod
    def is_equal(target: Any) -> Pred[Any]:
        return Pred(lambda x: x == target)


def and_then_consumer(first: Consumer[T], second: Consumer[T]) -> Consumer[T]:
    """Run ``first`` then ``second`` with the same argument."""
    def both(x: T) -> None:
        first(x)
        second(x)

    return both


def min_by(key: Callable[[T], Any]) -> BinaryOperator[T]:
    """Binary operator keeping the smaller argument; ties keep the first."""
    return lambda a, b: a if key(a) <= key(b) else b


def max_by(key: Callable[[T], Any]) -> BinaryOperator[T]:
    """Binary operator keeping the larger argument; ties keep the first."""
    return lambda a, b: a if key(a) >= key(b) else b
