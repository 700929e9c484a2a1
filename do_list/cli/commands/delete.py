"""Delete task command."""

import click
from rich.console import Console

from ..helpers import fail, get_project_context, get_task_store
from ...services.exceptions import DoListError


@click.command()
@click.argument('task_id')
@click.confirmation_option(prompt='Are you sure you want to delete this task?')
def delete(task_id):
    """Delete a task"""
    data_dir = get_project_context()
    store = get_task_store(data_dir, console=Console())

    try:
        store.delete(store.resolve(task_id).id)
    except DoListError as e:
        fail(e)
