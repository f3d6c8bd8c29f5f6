"""Tests for daybook.journal.models."""

from datetime import date, datetime
from pathlib import Path

from daybook.journal.models import Entry, EntryPage, Selector, SelectorKind


class TestEntry:
    def test_display_fields(self):
        entry = Entry(
            path=Path("/j/2024/07/05/2024-07-05_093005.txt"),
            relative_path="2024/07/05/2024-07-05_093005.txt",
            timestamp=datetime(2024, 7, 5, 9, 30, 5),
        )
        assert entry.display_date == "2024-07-05"
        assert entry.display_time == "09:30:05"

    def test_repr(self):
        entry = Entry(Path("/j/x"), "2024/07/05/2024-07-05_093005.txt", datetime(2024, 7, 5, 9, 30, 5))
        assert "2024-07-05_093005" in repr(entry)


class TestEntryPage:
    def test_defaults_are_empty(self):
        page = EntryPage()
        assert page.is_empty
        assert page.entries == []
        assert page.total_pages == 0

    def test_first_index(self):
        assert EntryPage(page=1, page_size=10).first_index == 1
        assert EntryPage(page=3, page_size=4).first_index == 9


class TestSelector:
    def test_kinds(self):
        assert {k.value for k in SelectorKind} == {"date", "path"}

    def test_frozen_equality(self):
        a = Selector(SelectorKind.DATE, "2024-07-05", date(2024, 7, 5))
        b = Selector(SelectorKind.DATE, "2024-07-05", date(2024, 7, 5))
        assert a == b
        assert hash(a) == hash(b)
