"""Daybook: a plain-text journal that lives in your home directory."""

__version__ = "0.1.0"
