"""Tests for StreamConfig and the per-terminal element budget."""

import pytest

from fakes import Counter
from fpkata import ElementBudgetExceeded, Stream, StreamConfig, default_config, set_default_config


def test_default_config_has_no_budget() -> None:
    config = default_config()
    assert config.max_elements is None
    assert config.trace_enabled is False


def test_negative_budget_is_rejected() -> None:
    with pytest.raises(ValueError):
        StreamConfig(max_elements=-1)


def test_budget_stops_unbounded_pipeline() -> None:
    supplier = Counter()
    stream = Stream.generate(supplier).with_config(StreamConfig(max_elements=100))

    with pytest.raises(ElementBudgetExceeded) as exc_info:
        stream.filter(lambda n: n < 0).find_first()

    assert exc_info.value.budget == 100
    assert supplier.calls == 101


def test_budget_allows_bounded_pipeline() -> None:
    stream = Stream.generate(Counter()).with_config(StreamConfig(max_elements=5)).limit(5)
    assert stream.to_list() == [0, 1, 2, 3, 4]


def test_budget_applies_per_terminal_operation() -> None:
    stream = Stream.range(0, 3).with_config(StreamConfig(max_elements=3))
    assert stream.count() == 3
    assert stream.count() == 3


def test_process_default_is_used_when_stream_has_no_config() -> None:
    previous = set_default_config(StreamConfig(max_elements=2))
    try:
        with pytest.raises(ElementBudgetExceeded):
            Stream.range(0, 10).to_list()
    finally:
        set_default_config(previous)
    assert Stream.range(0, 10).count() == 10
