"""Task statistics command."""

import click

from ..helpers import format_stats_table, get_project_context, get_task_store
from ...core.stats import compute_stats


@click.command()
def stats():
    """Show task counts and today's progress"""
    data_dir = get_project_context()
    store = get_task_store(data_dir)

    click.echo(format_stats_table(compute_stats(store.tasks)))
