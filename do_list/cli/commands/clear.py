"""Clear completed tasks command."""

import click
from rich.console import Console

from ..helpers import fail, get_project_context, get_task_store
from ...services.exceptions import DoListError


@click.command()
@click.confirmation_option(prompt='Remove all completed tasks?')
def clear():
    """Remove every completed task"""
    data_dir = get_project_context()
    store = get_task_store(data_dir, console=Console())

    try:
        count = store.clear_completed()
    except DoListError as e:
        fail(e)

    if count == 0:
        click.echo("No completed tasks to clear")
