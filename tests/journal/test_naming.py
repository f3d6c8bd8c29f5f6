"""Tests for daybook.journal.naming."""

from datetime import date, datetime

import pytest

from daybook.journal.naming import (
    entry_filename,
    entry_relative_path,
    is_entry_filename,
    parse_date,
    parse_entry_filename,
)


def test_entry_relative_path():
    moment = datetime(2024, 7, 5, 10, 30, 0)
    assert entry_relative_path(moment) == "2024/07/05/2024-07-05_103000.txt"


def test_entry_filename_zero_pads():
    assert entry_filename(datetime(2025, 1, 2, 3, 4, 5)) == "2025-01-02_030405.txt"


def test_relative_paths_sort_chronologically():
    moments = [datetime(2023, 12, 31, 23, 59, 59), datetime(2024, 1, 1, 0, 0, 0), datetime(2024, 1, 1, 0, 0, 1)]
    paths = [entry_relative_path(m) for m in moments]
    assert sorted(paths) == paths


@pytest.mark.parametrize(
    "name,expected",
    [
        ("2024-07-05_103000.txt", True),
        ("2024-07-05_103000.md", False),
        ("2024-07-05.txt", False),
        ("notes.txt", False),
        ("2024-07-05_1030.txt", False),
    ],
)
def test_is_entry_filename(name, expected):
    assert is_entry_filename(name) is expected


def test_parse_entry_filename():
    assert parse_entry_filename("2024-07-05_103000.txt") == datetime(2024, 7, 5, 10, 30, 0)


def test_parse_entry_filename_impossible_time():
    with pytest.raises(ValueError):
        parse_entry_filename("2024-07-05_256000.txt")


def test_parse_date():
    assert parse_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("text", ["2023-02-29", "2024-13-45", "2024-7-5", "20240705", "yesterday"])
def test_parse_date_rejects(text):
    with pytest.raises(ValueError):
        parse_date(text)
