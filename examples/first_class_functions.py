"""
Functions as values: stored in variables, passed as arguments,
returned as results and composed.
"""

from fpkata import Fn, compose, pipe


def square(x: int) -> int:
    return x * x


def double(x: int) -> int:
    return x * 2


if __name__ == "__main__":
    square_fn = Fn(square)

    # (5 ^ 2) * 2 = 50
    print("square.and_then(double) =", square_fn.and_then(double)(5))
    # (5 * 2) ^ 2 = 100
    print("square.compose(double) =", square_fn.compose(double)(5))

    print("pipe(square, double) =", pipe(square, double)(5))
    print("compose(square, double) =", compose(square, double)(5))
