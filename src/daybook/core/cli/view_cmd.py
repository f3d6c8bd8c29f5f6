"""daybook view — print entries for a date or a single entry path."""

from __future__ import annotations

import click

from daybook.core.exceptions import EntryReadError, InvalidSelectorError, MissingArgumentError
from daybook.journal import JournalStore

from .common import SEPARATOR, exit_with_error, info


@click.command()
@click.argument("selector", required=False)
@click.pass_context
def view(ctx: click.Context, selector: str | None) -> None:
    """View entries for a date (YYYY-MM-DD) or one entry file path."""
    store: JournalStore = ctx.obj

    try:
        if not selector:
            raise MissingArgumentError("Please provide a date (YYYY-MM-DD) or a full entry file path to view.")
        paths = store.find(selector)
    except (MissingArgumentError, InvalidSelectorError) as e:
        exit_with_error(ctx, str(e), show_help=True)

    if not paths:
        info(f"No entries found for '{selector}'.")
        return

    for path in paths:
        try:
            content = store.read(path)
        except EntryReadError as e:
            exit_with_error(ctx, str(e))

        click.secho(f"--- Entry: {store.relative_to_root(path)} ---", bold=True)
        # Raw bytes, as stored; close an unterminated last line before the footer.
        click.echo(content, nl=bool(content) and not content.endswith(b"\n"))
        click.secho(SEPARATOR, bold=True)
        click.echo()
