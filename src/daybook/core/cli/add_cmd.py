"""daybook add — write a new entry from stdin."""

from __future__ import annotations

import click

from daybook.core.exceptions import FileIOError
from daybook.journal import JournalStore

from .common import SEPARATOR, exit_with_error


@click.command()
@click.pass_context
def add(ctx: click.Context) -> None:
    """Add a new journal entry for today (reads stdin until EOF)."""
    store: JournalStore = ctx.obj
    stdin = click.get_binary_stream("stdin")

    now = store.clock()
    click.secho(
        f"Adding a new journal entry for {now:%Y-%m-%d} at {now:%H:%M:%S}",
        fg="yellow",
        err=True,
    )
    if stdin.isatty():
        click.secho("Type your entry. Press Ctrl+D when done.", fg="yellow", err=True)
        click.echo(SEPARATOR, err=True)

    content = stdin.read()

    try:
        path = store.append(content)
    except FileIOError as e:
        exit_with_error(ctx, str(e))

    click.secho(f"Journal entry saved to: {path}", fg="green")
