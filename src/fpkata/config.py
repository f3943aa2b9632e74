"""Process-wide configuration for stream evaluation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StreamConfig:
    """Settings applied to terminal operations.

    Attributes:
        max_elements: Upper bound on elements a single terminal operation may
            pull from its source. None disables the budget.
        trace_enabled: Whether streams without an explicit Trace create one.
    """

    max_elements: int | None = None
    trace_enabled: bool = False

    def __post_init__(self) -> None:
        if self.max_elements is not None and self.max_elements < 0:
            raise ValueError("max_elements must be non-negative")


_default = StreamConfig()


def default_config() -> StreamConfig:
    return _default


def set_default_config(config: StreamConfig) -> StreamConfig:
    """Replace the process default and return the previous one."""
    global _default
    previous = _default
    _default = config
    return previous
