"""Name filters applied to directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Pattern, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Filters:
    """An optional include pattern and an optional exclude pattern."""

    name: Optional[Pattern[str]] = None
    iname: Optional[Pattern[str]] = None

    def accepts(self, name: str) -> bool:
        """True if ``name`` matches ``name`` (if set) and not ``iname`` (if set)."""
        if self.name is not None and not self.name.search(name):
            return False
        if self.iname is not None and self.iname.search(name):
            return False
        return True


def filter_entries(entries: Iterable[T], filters: Filters) -> Iterator[T]:
    """Yield the entries whose ``name`` attribute the filters accept."""
    return (entry for entry in entries if filters.accepts(entry.name))