"""Tests for function values, composition and function types."""

import math

from fakes import Recorder
from fpkata import Fn, Pred, Stream, compose, pipe
from fpkata.kernel import (
    BiFn,
    BiFunction,
    BinaryOperator,
    Consumer,
    Function,
    GreetingAdapter,
    Predicate,
    Supplier,
    UnaryOperator,
    and_then_consumer,
    identity,
    max_by,
    min_by,
)


def square(x: int) -> int:
    return x * x


def double(x: int) -> int:
    return x * 2


def test_functions_compose_in_both_orders() -> None:
    square_fn = Fn(square)
    assert square_fn.and_then(double)(5) == 50
    assert square_fn.compose(double)(5) == 100
    assert square_fn.apply(3) == 9


def test_module_level_compose_and_pipe() -> None:
    assert compose(square, double)(5) == 100
    assert pipe(square, double)(5) == 50
    assert compose()(7) == 7
    assert Fn.identity()("same") == "same"
    assert identity(None) is None
    assert "square" in repr(compose(square, double))


def test_functions_as_values() -> None:
    transforms: dict[str, Function[int, int]] = {"square": square, "double": double}
    assert [transforms[name](3) for name in ("square", "double")] == [9, 6]

    def apply_twice(f: UnaryOperator[int], x: int) -> int:
        return f(f(x))

    def make_adder(n: int) -> Function[int, int]:
        return lambda x: x + n

    assert apply_twice(double, 3) == 12
    assert make_adder(10)(5) == 15


def test_predicates_chain() -> None:
    is_long: Predicate[str] = lambda s: len(s) > 5  # noqa: E731
    starts_with_f = Pred(lambda s: s.lower().startswith("f"))

    assert not Pred(is_long).test("hello")
    assert Pred(is_long).test("functional")
    assert starts_with_f.test("functional")
    assert Pred(is_long).and_(starts_with_f).test("functional")
    assert (Pred(is_long) & starts_with_f)("functional")
    assert (Pred(is_long) | starts_with_f)("fun")
    assert (~starts_with_f)("lambda")
    assert Pred.not_(is_long).test("short")
    assert Pred.is_equal("x").test("x")
    assert not Pred(is_long).negate().test("functional")


def test_predicates_filter_collections() -> None:
    expected = [6, 12, 18, 24, 30, 36, 42, 48, 54, 60, 66, 72, 78, 84, 90, 96]
    by_two = Pred(lambda n: n % 2 == 0)
    by_three = Pred(lambda n: n % 3 == 0)

    numbers = Stream.range_closed(1, 100)
    assert numbers.filter(by_two).filter(by_three).to_list() == expected
    assert numbers.filter(by_two.and_(by_three)).to_list() == expected


def test_function_types() -> None:
    int_to_string: Function[int, str] = lambda i: f"Number: {i}"  # noqa: E731
    assert int_to_string(42) == "Number: 42"

    log = Recorder()
    print_message: Consumer[str] = lambda s: log(f"Logging: {s}")  # noqa: E731
    print_message("Example log message")
    assert log.seen == ["Logging: Example log message"]

    random_value: Supplier[float] = lambda: 0.5  # noqa: E731
    assert 0.0 <= random_value() < 1.0


def test_bi_functions() -> None:
    same_name: BiFunction[str, str, bool] = lambda a, b: a.casefold() == b.casefold()  # noqa: E731
    assert not same_name("John", "Peter")
    assert same_name("John", "joHN")

    def distance(p1: tuple[int, int], p2: tuple[int, int]) -> float:
        return math.hypot(p2[0] - p1[0], p2[1] - p1[1])

    assert math.isclose(BiFn(distance).apply((0, 0), (3, 4)), 5.0)
    assert BiFn(distance).and_then(round)((0, 0), (1, 1)) == 1


def test_binary_operator_is_a_bi_function() -> None:
    full_name_op: BinaryOperator[str] = lambda first, last: f"{last}, {first}"  # noqa: E731
    full_name_fn: BiFunction[str, str, str] = lambda first, last: f"{last}, {first}"  # noqa: E731
    assert full_name_op("John", "Doe") == "Doe, John"
    assert full_name_fn("John", "Doe") == "Doe, John"


def test_min_by_and_max_by() -> None:
    shorter = min_by(len)
    longer = max_by(len)
    assert shorter("aa", "b") == "b"
    assert longer("aa", "b") == "aa"
    assert shorter("x", "y") == "x"
    assert Stream.of("pear", "fig", "banana").reduce(longer).get() == "banana"


def test_consumers_chain() -> None:
    first, second = Recorder(), Recorder()
    both = and_then_consumer(first, second)
    Stream.of(1, 2).for_each(both)
    assert first.seen == [1, 2]
    assert second.seen == [1, 2]


def test_custom_single_method_capability() -> None:
    greetings = Recorder()
    greeter = GreetingAdapter(lambda name: greetings(f"Hello, {name}"))
    greeter.say_hello("Alice")
    assert greetings.seen == ["Hello, Alice"]


def test_discount_operator_maps_prices() -> None:
    apply_discount: UnaryOperator[float] = lambda price: price * 0.9  # noqa: E731
    discounted = Stream.of(100.0, 200.0, 300.0).map(apply_discount).to_list()
    assert [round(p, 2) for p in discounted] == [90.0, 180.0, 270.0]
