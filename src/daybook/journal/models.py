"""Core data models for the journal.

Plain dataclasses; nothing here touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path


class SelectorKind(Enum):
    """What a ``view`` argument refers to."""

    DATE = "date"  # YYYY-MM-DD, every entry written that day
    PATH = "path"  # YYYY/MM/DD/YYYY-MM-DD_HHMMSS.txt, a single entry


@dataclass(frozen=True)
class Selector:
    """A parsed ``view`` argument.

    Attributes:
        kind: Whether this names a whole day or one entry.
        raw: The text as the user typed it.
        day: The calendar date the selector points into.
    """

    kind: SelectorKind
    raw: str
    day: date


@dataclass
class Entry:
    """One stored journal entry.

    Attributes:
        path: Absolute path of the entry file.
        relative_path: POSIX path relative to the journal root.
        timestamp: Moment encoded in the filename (second resolution).
    """

    path: Path
    relative_path: str
    timestamp: datetime

    @property
    def display_date(self) -> str:
        return self.timestamp.strftime("%Y-%m-%d")

    @property
    def display_time(self) -> str:
        return self.timestamp.strftime("%H:%M:%S")

    def __repr__(self) -> str:
        return f"Entry('{self.relative_path}')"


@dataclass
class EntryPage:
    """One page of a listing, newest entries first.

    Attributes:
        entries: Entries on this page.
        page: 1-based page number.
        page_size: Maximum entries per page.
        total_entries: Entries in the whole journal.
        total_pages: ``ceil(total_entries / page_size)``; 0 for an empty journal.
    """

    entries: list[Entry] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total_entries: int = 0
    total_pages: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_entries == 0

    @property
    def first_index(self) -> int:
        """1-based position of the first entry on this page within the full listing."""
        return (self.page - 1) * self.page_size + 1
