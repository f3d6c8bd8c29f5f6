"""Tests for daybook.core.exceptions."""

from daybook.core.exceptions import (
    ConfigurationError,
    DaybookError,
    DirectoryCreateError,
    EntryReadError,
    EntryWriteError,
    FileIOError,
    InvalidPageError,
    InvalidPageSizeError,
    InvalidSelectorError,
    JournalError,
    MissingArgumentError,
)


def test_hierarchy():
    """All exceptions should inherit from DaybookError."""
    for exc_cls in [
        ConfigurationError,
        FileIOError,
        JournalError,
        DirectoryCreateError,
        EntryWriteError,
        EntryReadError,
        InvalidPageSizeError,
        InvalidPageError,
        InvalidSelectorError,
        MissingArgumentError,
    ]:
        assert issubclass(exc_cls, DaybookError)


def test_io_errors_are_journal_and_file_errors():
    for exc_cls in [DirectoryCreateError, EntryWriteError, EntryReadError]:
        assert issubclass(exc_cls, JournalError)
        assert issubclass(exc_cls, FileIOError)


def test_selector_error_is_not_io_error():
    assert not issubclass(InvalidSelectorError, FileIOError)


def test_invalid_page_message():
    err = InvalidPageError(3, 2)
    assert err.page == 3
    assert err.total_pages == 2
    assert "Page number 3 is out of range" in str(err)
    assert "Total pages: 2" in str(err)
