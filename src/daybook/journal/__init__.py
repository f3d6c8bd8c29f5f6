"""Journal storage.

Provides entry models, the entry naming scheme, selector parsing, a
JournalStore protocol and the local filesystem implementation.
"""

from .config import PaginationConfig
from .local import LocalJournalStore
from .models import Entry, EntryPage, Selector, SelectorKind
from .selector import parse_selector
from .store import JournalStore

__all__ = [
    "Entry",
    "EntryPage",
    "JournalStore",
    "LocalJournalStore",
    "PaginationConfig",
    "Selector",
    "SelectorKind",
    "parse_selector",
]
