"""Daybook CLI — entry point for add, list, view and help commands."""

import click

from daybook import __version__
from daybook.core.config import get_config
from daybook.core.utils.logging import level_for_verbosity, setup_logging

from .common import build_store, exit_with_error

EPILOG = """\b
Journal entries live in ~/.journal_cli/entries/YYYY/MM/DD/YYYY-MM-DD_HHMMSS.txt

\b
Examples:
  daybook add
  daybook list
  daybook list 1 5      # page 1, 5 entries per page
  daybook list 2        # page 2, 10 entries per page
  daybook view 2024-07-05
  daybook view 2024/07/04/2024-07-04_154530.txt
"""


class JournalGroup(click.Group):
    """Command group that treats an unknown command as an error plus usage."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            exit_with_error(ctx, "Unknown command or no command provided.", show_help=True)


@click.group(name="daybook", cls=JournalGroup, invoke_without_command=True, epilog=EPILOG)
@click.version_option(version=__version__, package_name="daybook")
@click.option("-v", "--verbose", count=True, help="Log more detail (repeat for debug output).")
@click.pass_context
def main(ctx: click.Context, verbose: int) -> None:
    """Daybook, a plain-text journal in your terminal."""
    config = get_config()
    setup_logging(
        level=level_for_verbosity(verbose, config.get("logging.level", "WARNING")),
        log_file=config.get("logging.file"),
    )

    if ctx.invoked_subcommand is None:
        exit_with_error(ctx, "Unknown command or no command provided.", show_help=True)

    # Tests and embedding code may hand in their own store.
    if ctx.obj is None:
        ctx.obj = build_store(config)


@click.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this help message."""
    click.echo(ctx.find_root().get_help())


# Register subcommands
from .add_cmd import add
from .list_cmd import list_entries
from .view_cmd import view

main.add_command(add)
main.add_command(list_entries)
main.add_command(view)
main.add_command(help_cmd)
