"""Custom single-method capabilities and unary operators."""

from fpkata import Stream
from fpkata.kernel import Greeting, GreetingAdapter, UnaryOperator


def custom_capability_example() -> None:
    print("custom_capability_example")
    greet: Greeting = GreetingAdapter(lambda name: print(f"Hello, {name}"))
    greet.say_hello("Alice")


def unary_operator_example() -> None:
    apply_discount: UnaryOperator[float] = lambda price: price * 0.9  # noqa: E731

    discounted = Stream.of(100.0, 200.0, 300.0).map(apply_discount).to_list()
    for price in discounted:
        print(round(price, 2))


if __name__ == "__main__":
    custom_capability_example()
    unary_operator_example()
