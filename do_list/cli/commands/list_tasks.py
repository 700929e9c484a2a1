"""List tasks command."""

import click

from ..helpers import (
    format_empty_state,
    format_task_table,
    get_config,
    get_project_context,
    get_task_store,
)
from ...core.filters import filter_tasks
from ...models.task import FilterMode


@click.command()
@click.option('--filter', '-f', 'filter_mode', type=click.Choice([m.value for m in FilterMode]),
              help='Show all, pending or completed tasks (default from config)')
def list(filter_mode):
    """List tasks, newest first"""
    data_dir = get_project_context()
    config = get_config(data_dir)
    store = get_task_store(data_dir, config)

    mode = FilterMode(filter_mode) if filter_mode else config.default_filter
    all_tasks = store.tasks
    visible = filter_tasks(all_tasks, mode)

    if not visible:
        click.echo(format_empty_state(mode))
        return

    click.echo(format_task_table(visible, short_id_length=config.short_id_length))
    click.echo(f"\nShowing {len(visible)} of {len(all_tasks)} tasks ({mode.value})")
