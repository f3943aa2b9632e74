from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CountingSupplier:
    """Supplier returning a fixed value and counting its calls."""

    value: Any = None
    calls: int = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.value


@dataclass
class Counter:
    """Sequential supplier 0, 1, 2, ... counting its calls."""

    calls: int = 0

    def __call__(self) -> int:
        current = self.calls
        self.calls += 1
        return current


@dataclass
class Recorder:
    """Consumer that records everything it is given."""

    seen: list[Any] = field(default_factory=list)

    def __call__(self, item: Any) -> None:
        self.seen.append(item)

    @property
    def calls(self) -> int:
        return len(self.seen)


def make_country_lookup() -> tuple[Any, Any]:
    """Lookups used by the country/capital kata."""
    from fpkata import Optional

    def find_country_name(code: str | None) -> Optional[str]:
        return Optional.of_nullable("Spain" if code is not None and code.lower() == "es" else None)

    def find_capital_name(country: str) -> Optional[str]:
        return Optional.of_nullable("Madrid" if country.lower() == "spain" else None)

    return find_country_name, find_capital_name
