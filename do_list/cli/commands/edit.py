"""Edit task command."""

import click
from rich.console import Console

from ..helpers import fail, get_project_context, get_task_store
from ...services.exceptions import DoListError


@click.command()
@click.argument('task_id')
@click.argument('title', nargs=-1, required=True)
def edit(task_id, title):
    """Change the title of a task"""
    data_dir = get_project_context()
    store = get_task_store(data_dir, console=Console())

    try:
        store.update(store.resolve(task_id).id, " ".join(title))
    except DoListError as e:
        fail(e)
