"""
Four ways to build the same consumer.

1. A class implementing __call__
2. A class whose __call__ runs several statements
3. A lambda expression
4. A reference to an existing function
"""

from fpkata import Stream
from fpkata.kernel import Consumer


class PrintNumber:
    def __call__(self, n: int) -> None:
        print(n)


class PrintNumberVerbose:
    def __call__(self, n: int) -> None:
        print("Integer is... ", end="")
        print(n)


def build_lambda() -> Consumer[int]:
    return lambda n: print(n)


def build_function_reference() -> Consumer[int]:
    return print


if __name__ == "__main__":
    numbers = Stream.of(1, 2, 3, 4, 5)

    for label, consumer in [
        ("callable class", PrintNumber()),
        ("callable class with statements", PrintNumberVerbose()),
        ("lambda expression", build_lambda()),
        ("function reference", build_function_reference()),
    ]:
        print(f"result using {label}")
        numbers.for_each(consumer)
