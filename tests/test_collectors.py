"""Tests for Stream.collect() recipes."""

from types import MappingProxyType

import pytest

from fpkata import Stream, collectors


def test_basic_containers() -> None:
    assert Stream.of(1, 2, 2).collect(collectors.to_list()) == [1, 2, 2]
    assert Stream.of(1, 2, 2).collect(collectors.to_set()) == {1, 2}


def test_unmodifiable_list_rejects_changes() -> None:
    numbers = Stream.range_closed(1, 100).collect(collectors.to_unmodifiable_list())
    assert len(numbers) == 100
    with pytest.raises(AttributeError):
        numbers.append(101)  # type: ignore[attr-defined]


def test_collected_list_stays_mutable() -> None:
    numbers = Stream.range_closed(1, 100).collect(collectors.to_list())
    numbers.append(101)
    assert len(numbers) == 101


def test_to_dict_rejects_duplicate_keys_without_merge() -> None:
    words = Stream.of("apple", "avocado", "banana")
    with pytest.raises(ValueError, match="Duplicate key"):
        words.collect(collectors.to_dict(lambda w: w[0], len))

    merged = words.collect(collectors.to_dict(lambda w: w[0], len, merge=lambda a, b: a + b))
    assert merged == {"a": 12, "b": 6}


def test_to_unmodifiable_dict() -> None:
    result = Stream.of("x", "yy").collect(collectors.to_unmodifiable_dict(lambda s: s, len))
    assert isinstance(result, MappingProxyType)
    assert dict(result) == {"x": 1, "yy": 2}
    with pytest.raises(TypeError):
        result["z"] = 3  # type: ignore[index]


def test_joining() -> None:
    names = Stream.of("Alice", "Bob", "Charlie")
    assert names.collect(collectors.joining(", ")) == "Alice, Bob, Charlie"
    assert names.collect(collectors.joining(", ", "[", "]")) == "[Alice, Bob, Charlie]"
    assert Stream.empty().collect(collectors.joining(",", "<", ">")) == "<>"


def test_counting_and_summing() -> None:
    assert Stream.range_closed(1, 5).collect(collectors.counting()) == 5
    assert Stream.of("a", "bb", "ccc").collect(collectors.summing(len)) == 6


def test_grouping_by_preserves_first_seen_order() -> None:
    words = Stream.of("banana", "apple", "blueberry", "avocado", "cherry")

    grouped = words.collect(collectors.grouping_by(lambda w: w[0]))
    assert list(grouped) == ["b", "a", "c"]
    assert grouped == {"b": ["banana", "blueberry"], "a": ["apple", "avocado"], "c": ["cherry"]}

    counted = words.collect(collectors.grouping_by(lambda w: w[0], collectors.counting()))
    assert counted == {"b": 2, "a": 2, "c": 1}


def test_grouping_with_mapping_downstream() -> None:
    lengths = Stream.of("aa", "b", "cc").collect(
        collectors.grouping_by(len, collectors.mapping(str.upper, collectors.joining("+")))
    )
    assert lengths == {2: "AA+CC", 1: "B"}


def test_partitioning_by_always_has_both_keys() -> None:
    parts = Stream.range_closed(1, 6).collect(collectors.partitioning_by(lambda n: n % 2 == 0))
    assert parts == {False: [1, 3, 5], True: [2, 4, 6]}

    empty = Stream.empty().collect(collectors.partitioning_by(bool))
    assert empty == {False: [], True: []}
