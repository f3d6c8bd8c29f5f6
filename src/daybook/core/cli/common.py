"""Shared setup and output helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import click

from daybook.core.config import Config
from daybook.journal import LocalJournalStore, PaginationConfig

SEPARATOR = "-" * 52
TABLE_RULE = "-" * 80


def build_store(config: Config) -> LocalJournalStore:
    """Create the filesystem store described by ``config``."""
    pagination = PaginationConfig(
        default_page_size=config.get("list.page_size"),
        max_page_size=config.get("list.max_page_size"),
    )
    return LocalJournalStore(config.get_entries_dir(), pagination=pagination)


def info(message: str) -> None:
    click.secho(message, fg="yellow")


def error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


def exit_with_error(ctx: click.Context, message: str, show_help: bool = False) -> NoReturn:
    """Report ``message`` on stderr and stop with exit status 1."""
    error(message)
    if show_help:
        click.echo(ctx.find_root().get_help())
    ctx.exit(1)
