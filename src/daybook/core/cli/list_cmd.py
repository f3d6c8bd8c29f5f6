"""daybook list — paginated table of entries, newest first."""

from __future__ import annotations

import click

from daybook.core.exceptions import InvalidPageError, InvalidPageSizeError
from daybook.journal import EntryPage, JournalStore

from .common import TABLE_RULE, exit_with_error, info


def _render(page: EntryPage) -> None:
    click.secho(f"--- Your Journal Entries (Page {page.page} of {page.total_pages}) ---", bold=True)
    click.secho(f"{'ID':<5} {'Date':<20} {'Time':<10} Path", bold=True)
    click.echo(TABLE_RULE)
    for index, entry in enumerate(page.entries, start=page.first_index):
        click.echo(f"{index:<5} {entry.display_date:<20} {entry.display_time:<10} {entry.relative_path}")
    click.echo(TABLE_RULE)
    info(f"Page {page.page} of {page.total_pages}. Total entries: {page.total_entries}.")


def _parse_int(value: str | None) -> int | None:
    """Integer value of a positional argument, or None if it is not a whole number."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


# Arguments are taken as strings so "-5" and "abc" reach our own range checks.
@click.command("list", context_settings={"ignore_unknown_options": True})
@click.argument("page", required=False)
@click.argument("page_size", required=False)
@click.pass_context
def list_entries(ctx: click.Context, page: str | None, page_size: str | None) -> None:
    """List journal entries, PAGE_SIZE (1-10, default 10) per page."""
    store: JournalStore = ctx.obj

    page_number = 1 if page is None else _parse_int(page)
    if page_number is None:
        exit_with_error(ctx, f"Page number must be a whole number, got '{page}'.")

    size = _parse_int(page_size)
    if page_size is not None and size is None:
        exit_with_error(
            ctx, f"Entries per page must be a whole number between 1 and 10, got '{page_size}'.", show_help=True
        )

    try:
        result = store.list_entries(page=page_number, page_size=size)
    except InvalidPageSizeError as e:
        exit_with_error(ctx, str(e), show_help=True)
    except InvalidPageError as e:
        exit_with_error(ctx, str(e))

    if result.is_empty:
        info("No journal entries found.")
        return

    _render(result)
