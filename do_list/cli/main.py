"""Main CLI entry point for Do List."""

import logging
import sys

import click

from ..core.constants import DATA_DIR_ENV_VAR, LOG_FORMAT
from .commands.add import add
from .commands.clear import clear
from .commands.config import config
from .commands.delete import delete
from .commands.edit import edit
from .commands.list_tasks import list
from .commands.stats import stats
from .commands.toggle import toggle


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


@click.group()
@click.option('--data-dir', envvar=DATA_DIR_ENV_VAR, type=click.Path(file_okay=False),
              help='Directory holding tasks and config (default: ./.do-list)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, data_dir, verbose):
    """Do List - Organize your tasks from the terminal"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['data_dir'] = data_dir


# Register commands
cli.add_command(add)
cli.add_command(toggle)
cli.add_command(edit)
cli.add_command(delete)
cli.add_command(clear)
cli.add_command(list)
cli.add_command(stats)
cli.add_command(config)


if __name__ == '__main__':
    cli()
