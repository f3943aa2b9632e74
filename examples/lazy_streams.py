"""
Lazy streams with an evaluation trace.

Building the pipeline produces nothing; the terminal call pulls exactly the
elements it needs. Run with --verbose to see the debug log of each terminal.
"""

import argparse
import logging

from fpkata import ElementBudgetExceeded, Optional, Stream, StreamConfig, Trace, collectors


def expensive_square(n: int) -> int:
    print(f"  squaring {n}")
    return n * n


def main(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    trace = Trace()
    pipeline = (
        Stream.iterate(1, lambda n: n + 1)
        .with_trace(trace)
        .filter(lambda n: n % 2 == 0)
        .map(expensive_square)
        .limit(3)
    )
    print(f"pipeline built, {len(trace)} events recorded")
    print("result:", pipeline.to_list())
    print(f"source elements pulled: {trace.count('element')}")

    words = Stream.of("apple", "banana", "apple", "orange", "banana")
    print("distinct:", words.distinct().to_list())
    print("by first letter:", words.distinct().collect(collectors.grouping_by(lambda w: w[0])))

    guarded = Stream.generate(lambda: 0).with_config(StreamConfig(max_elements=1_000))
    print("first positive (guarded):", end=" ")
    try:
        print(guarded.filter(lambda n: n > 0).find_first())
    except ElementBudgetExceeded as exc:
        print(exc)

    city: Optional[str] = Stream.of("London", "New York").filter(lambda c: c.startswith("New")).find_first()
    print("city:", city.map(str.upper).or_else("Unknown"))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="log terminal operations at DEBUG level")
    args = parser.parse_args()
    main(args.verbose)
