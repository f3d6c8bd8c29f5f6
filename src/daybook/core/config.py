"""
In-process configuration for daybook.

Daybook deliberately reads no config file and no environment variables.
Settings come from built-in defaults, optionally overridden through
constructor args (tests and embedding code use these).

Usage:
    config = Config()
    config.get("paths.entries_dir")      # ~/.journal_cli/entries
    config.get("list.page_size")         # 10

    config = Config(base_dir="/tmp/journal", defaults={"logging": {"level": "DEBUG"}})
"""

import os
from pathlib import Path
from typing import Any

from daybook.journal.config import PAGE_SIZE_LIMIT

from .exceptions import ConfigurationError

_DEFAULT_BASE_DIR_NAME = ".journal_cli"
_ENTRIES_DIR_NAME = "entries"


class Config:
    """
    Central configuration manager.

    Holds a nested dict of settings with dot-notation access. Paths are
    derived from ``base_dir`` at construction time, so the home directory
    lookup happens when the Config is built, not at import.
    """

    def __init__(
        self,
        base_dir: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            base_dir: Base directory for journal data. Defaults to ~/.journal_cli.
            defaults: Extra values merged over the built-in defaults.
        """
        self._base_dir = base_dir or os.path.join("~", _DEFAULT_BASE_DIR_NAME)
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        self.config_data = self._get_default_config()
        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)
        self._validate()

    def _get_default_config(self) -> dict[str, Any]:
        base_dir = os.path.expanduser(self._base_dir)
        return {
            "paths": {
                "base_dir": base_dir,
                "entries_dir": os.path.join(base_dir, _ENTRIES_DIR_NAME),
            },
            "list": {
                "page_size": 10,
                "max_page_size": 10,
            },
            "logging": {
                "level": "WARNING",
                "file": None,
            },
        }

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _validate(self) -> None:
        max_page_size = self.get("list.max_page_size")
        page_size = self.get("list.page_size")
        if not isinstance(max_page_size, int) or not 1 <= max_page_size <= PAGE_SIZE_LIMIT:
            raise ConfigurationError(
                f"list.max_page_size must be between 1 and {PAGE_SIZE_LIMIT}, got {max_page_size!r}"
            )
        if not isinstance(page_size, int) or not 1 <= page_size <= max_page_size:
            raise ConfigurationError(f"list.page_size must be between 1 and {max_page_size}, got {page_size!r}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.entries_dir", "list.page_size"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_entries_dir(self) -> Path:
        """Return the resolved journal root."""
        return Path(os.path.expanduser(self.get("paths.entries_dir"))).resolve()


# Module-level singleton
_config_instance: Config | None = None


def get_config(base_dir: str | None = None) -> Config:
    """Get or create the global Config singleton."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(base_dir=base_dir)
    return _config_instance


def reset_config() -> None:
    """Reset the global Config singleton (useful for testing)."""
    global _config_instance
    _config_instance = None
