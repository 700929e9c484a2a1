"""Toggle task command."""

import click
from rich.console import Console

from ..helpers import fail, get_project_context, get_task_store
from ...services.exceptions import DoListError


@click.command()
@click.argument('task_id')
def toggle(task_id):
    """Mark a task completed, or reopen a completed one"""
    data_dir = get_project_context()
    store = get_task_store(data_dir, console=Console())

    try:
        store.toggle(store.resolve(task_id).id)
    except DoListError as e:
        fail(e)
