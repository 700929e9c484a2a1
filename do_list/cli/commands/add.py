"""Add task command."""

import click
from rich.console import Console

from ..helpers import fail, get_project_context, get_task_store
from ...services.exceptions import DoListError


@click.command()
@click.argument('title', nargs=-1, required=True)
def add(title):
    """Add a new task to the top of the list"""
    data_dir = get_project_context()
    store = get_task_store(data_dir, console=Console())

    try:
        task_item = store.add(" ".join(title))
    except DoListError as e:
        fail(e)

    click.echo(f"ID: {task_item.id}")
