"""Entry naming scheme: ``YYYY/MM/DD/YYYY-MM-DD_HHMMSS.txt``.

The path is the entry's identity. Fields are fixed width, so sorting
relative paths as strings sorts entries chronologically.
"""

from __future__ import annotations

import re
from datetime import date, datetime

ENTRY_SUFFIX = ".txt"
FILENAME_FORMAT = "%Y-%m-%d_%H%M%S"
DATE_FORMAT = "%Y-%m-%d"

ENTRY_FILENAME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}_\d{6}\.txt\Z")
ENTRY_PATH_RE = re.compile(r"^(\d{4})/(\d{2})/(\d{2})/(\d{4}-\d{2}-\d{2}_\d{6}\.txt)\Z")
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}\Z")


def entry_filename(moment: datetime) -> str:
    """Filename for an entry written at ``moment``."""
    return moment.strftime(FILENAME_FORMAT) + ENTRY_SUFFIX


def day_dir_parts(day: date) -> tuple[str, str, str]:
    """``(YYYY, MM, DD)`` directory components for a day."""
    return f"{day.year:04d}", f"{day.month:02d}", f"{day.day:02d}"


def entry_relative_path(moment: datetime) -> str:
    """Relative POSIX path for an entry written at ``moment``.

    Directory and filename are both derived from the same ``moment``.
    """
    return "/".join((*day_dir_parts(moment.date()), entry_filename(moment)))


def is_entry_filename(name: str) -> bool:
    return bool(ENTRY_FILENAME_RE.match(name))


def parse_entry_filename(name: str) -> datetime:
    """Return the timestamp encoded in an entry filename.

    Raises:
        ValueError: If ``name`` is not shaped like an entry filename or
            encodes an impossible date or time.
    """
    if not is_entry_filename(name):
        raise ValueError(f"Not an entry filename: {name!r}")
    return datetime.strptime(name[: -len(ENTRY_SUFFIX)], FILENAME_FORMAT)


def parse_date(text: str) -> date:
    """Parse a bare ``YYYY-MM-DD`` date, rejecting any other shape."""
    if not DATE_RE.match(text):
        raise ValueError(f"Not a YYYY-MM-DD date: {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()
