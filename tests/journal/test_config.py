"""Tests for daybook.journal.config."""

import pytest

from daybook.journal.config import PaginationConfig


class TestPaginationConfig:
    def test_defaults(self):
        config = PaginationConfig()
        assert config.default_page_size == 10
        assert config.max_page_size == 10

    def test_validate_page_size(self):
        config = PaginationConfig()
        assert config.validate_page_size(1)
        assert config.validate_page_size(10)
        assert not config.validate_page_size(0)
        assert not config.validate_page_size(11)

    def test_custom_values(self):
        config = PaginationConfig(default_page_size=3, max_page_size=5)
        assert config.validate_page_size(5)
        assert not config.validate_page_size(6)

    @pytest.mark.parametrize("max_page_size", [0, 11, 20])
    def test_max_page_size_capped(self, max_page_size):
        with pytest.raises(ValueError, match="max_page_size"):
            PaginationConfig(default_page_size=1, max_page_size=max_page_size)

    def test_default_above_max(self):
        with pytest.raises(ValueError, match="default_page_size"):
            PaginationConfig(default_page_size=8, max_page_size=5)
