"""Configuration dataclasses for the journal store.

Pure data containers with sensible defaults. The CLI fills them from
``daybook.core.config.Config``.
"""

from __future__ import annotations

from dataclasses import dataclass

PAGE_SIZE_LIMIT = 10


@dataclass
class PaginationConfig:
    """Settings for ``list`` pagination.

    Attributes:
        default_page_size: Page size used when the caller gives none.
        max_page_size: Largest accepted page size, at most ``PAGE_SIZE_LIMIT``.
    """

    default_page_size: int = 10
    max_page_size: int = PAGE_SIZE_LIMIT

    def __post_init__(self):
        if not 1 <= self.max_page_size <= PAGE_SIZE_LIMIT:
            raise ValueError(f"max_page_size must be between 1 and {PAGE_SIZE_LIMIT}")
        if not self.validate_page_size(self.default_page_size):
            raise ValueError(f"default_page_size must be between 1 and {self.max_page_size}")

    def validate_page_size(self, page_size: int) -> bool:
        return 1 <= page_size <= self.max_page_size
