"""
Local filesystem journal store.

Entries live under ``root/YYYY/MM/DD/YYYY-MM-DD_HHMMSS.txt``. The root is
created on the first append and never removed.
"""

from __future__ import annotations

import math
import shutil
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from daybook.core.exceptions import (
    DirectoryCreateError,
    EntryReadError,
    EntryWriteError,
    InvalidPageError,
    InvalidPageSizeError,
)

from .config import PaginationConfig
from .models import Entry, EntryPage, Selector, SelectorKind
from .naming import day_dir_parts, entry_relative_path, is_entry_filename, parse_entry_filename
from .selector import parse_selector


class LocalJournalStore:
    """Journal store backed by a directory tree."""

    def __init__(
        self,
        root: str | Path = "~/.journal_cli/entries",
        clock: Callable[[], datetime] = datetime.now,
        pagination: PaginationConfig | None = None,
    ):
        """
        Args:
            root: Journal root directory.
            clock: Returns the current moment; swapped out in tests.
            pagination: Page size limits for ``list_entries``.
        """
        self.root = Path(root).expanduser().resolve()
        self.clock = clock
        self.pagination = pagination or PaginationConfig()

    # -- append -------------------------------------------------------------

    def append(self, content: bytes | BinaryIO) -> Path:
        moment = self.clock().replace(microsecond=0)
        path = self.root / entry_relative_path(moment)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(f"Could not create directory {path.parent}: {e}") from e

        if path.exists():
            logger.warning(f"Entry {self.relative_to_root(path)} already exists; overwriting")

        try:
            with open(path, "wb") as f:
                if isinstance(content, (bytes, bytearray)):
                    f.write(content)
                else:
                    shutil.copyfileobj(content, f)
        except OSError as e:
            if path.is_file():
                path.unlink()
            raise EntryWriteError(f"Failed to save journal entry {path}: {e}") from e

        logger.debug(f"Saved entry {path}")
        return path

    # -- list ---------------------------------------------------------------

    def list_entries(self, page: int = 1, page_size: int | None = None) -> EntryPage:
        if page_size is None:
            page_size = self.pagination.default_page_size
        if not self.pagination.validate_page_size(page_size):
            raise InvalidPageSizeError(
                f"Entries per page must be between 1 and {self.pagination.max_page_size}, got {page_size}."
            )

        paths = sorted(self._iter_entry_paths(), key=self.relative_to_root, reverse=True)
        total = len(paths)
        if total == 0:
            logger.debug(f"No entries under {self.root}")
            return EntryPage(page=page, page_size=page_size)

        total_pages = math.ceil(total / page_size)
        if not 1 <= page <= total_pages:
            raise InvalidPageError(page, total_pages)

        start = (page - 1) * page_size
        window = paths[start : start + page_size]
        logger.debug(f"Listing entries {start + 1}-{start + len(window)} of {total}")
        return EntryPage(
            entries=[self._to_entry(p) for p in window],
            page=page,
            page_size=page_size,
            total_entries=total,
            total_pages=total_pages,
        )

    def _iter_entry_paths(self):
        if not self.root.is_dir():
            return
        for path in self.root.rglob("*.txt"):
            if not (path.is_file() and is_entry_filename(path.name)):
                continue
            try:
                parse_entry_filename(path.name)
            except ValueError:
                logger.warning(f"Skipping {self.relative_to_root(path)}: filename is not a real date and time")
                continue
            yield path

    def _to_entry(self, path: Path) -> Entry:
        return Entry(
            path=path,
            relative_path=self.relative_to_root(path),
            timestamp=parse_entry_filename(path.name),
        )

    # -- find / read --------------------------------------------------------

    def find(self, selector: str | Selector) -> list[Path]:
        if isinstance(selector, str):
            selector = parse_selector(selector)

        if selector.kind is SelectorKind.PATH:
            path = self.root / selector.raw
            return [path] if path.is_file() else []

        day_dir = self.root.joinpath(*day_dir_parts(selector.day))
        if not day_dir.is_dir():
            logger.debug(f"No directory for {selector.raw}")
            return []
        return sorted(
            (p for p in day_dir.iterdir() if p.is_file() and is_entry_filename(p.name)),
            key=lambda p: p.name,
        )

    def read(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise EntryReadError(f"Cannot read {path}: {e}") from e

    def relative_to_root(self, path: Path) -> str:
        return Path(path).relative_to(self.root).as_posix()
