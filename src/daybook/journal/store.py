"""JournalStore protocol: the contract for journal backends.

Anything that can keep dated text entries addressed by a
``YYYY/MM/DD/YYYY-MM-DD_HHMMSS.txt`` path can implement this protocol and
sit behind the daybook CLI. ``LocalJournalStore`` is the filesystem one.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from .models import EntryPage, Selector


@runtime_checkable
class JournalStore(Protocol):
    """Protocol for appending, listing and reading journal entries.

    Implementations raise ``daybook.core.exceptions.JournalError``
    subclasses on failure and never exit the process.
    """

    clock: Callable[[], datetime]

    def append(self, content: bytes | BinaryIO) -> Path:
        """Store a new entry stamped with the current time.

        Args:
            content: Raw entry bytes, or a binary stream read to EOF.

        Returns:
            Path of the stored entry.
        """
        ...

    def list_entries(self, page: int = 1, page_size: int | None = None) -> EntryPage:
        """Return one page of entries, newest first.

        Args:
            page: 1-based page number.
            page_size: Entries per page. None = the store's default.
        """
        ...

    def find(self, selector: str | Selector) -> list[Path]:
        """Return entry paths matching a date or an exact entry path.

        An unparseable selector raises ``InvalidSelectorError``; a valid one
        with no matches returns an empty list.
        """
        ...

    def read(self, path: Path) -> bytes:
        """Return the raw bytes of an entry."""
        ...

    def relative_to_root(self, path: Path) -> str:
        """Return the entry's POSIX path relative to the journal root."""
        ...
