"""Parsing of ``view`` selectors.

A selector is either a bare date (``2024-07-05``) or a full relative entry
path (``2024/07/05/2024-07-05_103000.txt``). Anything else is a format
error, which callers must report differently from "no entries found".
"""

from __future__ import annotations

from daybook.core.exceptions import InvalidSelectorError

from .models import Selector, SelectorKind
from .naming import ENTRY_PATH_RE, parse_date, parse_entry_filename

INVALID_SELECTOR_MESSAGE = "Invalid format for view. Use YYYY-MM-DD or a full entry file path."


def parse_selector(text: str) -> Selector:
    """Classify and validate a selector string.

    Raises:
        InvalidSelectorError: If ``text`` is neither a real calendar date nor
            an entry path whose directory and filename agree on the date.
    """
    match = ENTRY_PATH_RE.match(text)
    if match:
        year, month, day, filename = match.groups()
        try:
            timestamp = parse_entry_filename(filename)
        except ValueError as e:
            raise InvalidSelectorError(INVALID_SELECTOR_MESSAGE) from e
        if (year, month, day) != (f"{timestamp.year:04d}", f"{timestamp.month:02d}", f"{timestamp.day:02d}"):
            raise InvalidSelectorError(f"{INVALID_SELECTOR_MESSAGE} Directory date does not match '{filename}'.")
        return Selector(kind=SelectorKind.PATH, raw=text, day=timestamp.date())

    try:
        day = parse_date(text)
    except ValueError as e:
        raise InvalidSelectorError(INVALID_SELECTOR_MESSAGE) from e
    return Selector(kind=SelectorKind.DATE, raw=text, day=day)
