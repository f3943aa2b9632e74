"""Evaluation trace for lazy pipelines.

A Trace records what terminal operations actually pulled from their sources.
It does not take part in element transformation; streams only append to it.
Every event names its parent explicitly, so several terminals may share one
Trace and interleave freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single evaluation event captured while a pipeline runs."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Append-only log of evaluation events.

    A disabled Trace costs one flag check per record() and stores nothing.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Append an event.

        Args:
            action: "terminal_begin", "element" or "terminal_end"
            info: Additional context
            parent_id: ID of the terminal_begin event this belongs to
            duration_ms: Execution duration

        Returns:
            Event ID, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    @property
    def events(self) -> tuple[Evidence, ...]:
        return tuple(self._events)

    def count(self, action: str) -> int:
        return sum(1 for ev in self._events if ev.action == action)

    def find_all(self, **criteria: Any) -> list[Evidence]:
        """Events whose attributes or info entries match every criterion."""
        return [
            ev
            for ev in self._events
            if all(getattr(ev, k, None) == v or ev.info.get(k) == v for k, v in criteria.items())
        ]

    def children(self, event_id: int) -> list[Evidence]:
        """Events recorded under the terminal_begin with the given id."""
        return [ev for ev in self._events if ev.parent_id == event_id]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent_id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
