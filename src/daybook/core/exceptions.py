"""
Daybook exception hierarchy.

All daybook exceptions inherit from DaybookError, so the CLI can catch
library-level errors in one place while still distinguishing failure modes.
"""


class DaybookError(Exception):
    """Base exception class for all daybook errors."""


class ConfigurationError(DaybookError):
    """Raised for configuration errors (missing keys, invalid values)."""


class FileIOError(DaybookError):
    """Raised for file I/O errors."""


class JournalError(DaybookError):
    """Base class for journal store errors."""


class DirectoryCreateError(JournalError, FileIOError):
    """Raised when an entry directory cannot be created."""


class EntryWriteError(JournalError, FileIOError):
    """Raised when an entry file cannot be written."""


class EntryReadError(JournalError, FileIOError):
    """Raised when an entry file does not exist or cannot be read."""


class InvalidPageSizeError(JournalError):
    """Raised when a page size falls outside the allowed range."""


class InvalidPageError(JournalError):
    """Raised when a page number falls outside the computed page range."""

    def __init__(self, page: int, total_pages: int):
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Page number {page} is out of range. Total pages: {total_pages}.")


class InvalidSelectorError(JournalError):
    """Raised when a selector is neither a date nor a full entry path."""


class MissingArgumentError(DaybookError):
    """Raised when a command is invoked without a required argument."""
