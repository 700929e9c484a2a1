"""CLI Helper Functions for Do List.

This module provides reusable helper functions for CLI commands so every
command resolves its data directory, builds its task store, reports
errors and formats output the same way.
"""

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from tabulate import tabulate

from do_list.core.constants import (
    DATA_DIR_NAME,
    DEFAULT_SHORT_ID_LENGTH,
    DATETIME_DISPLAY_FORMAT,
    EMPTY_STATE_MESSAGES,
    MAX_TITLE_DISPLAY_LENGTH,
)
from do_list.core.notifications import DESTRUCTIVE, Notification
from do_list.core.task_storage import TaskStorageManager
from do_list.core.task_store import TaskStore
from do_list.models.config import DoListConfig
from do_list.models.task import FilterMode, Task, TaskStats
from do_list.services.exceptions import DoListError
from do_list.utils.config_manager import ConfigManager


def get_project_context(ctx: Optional[click.Context] = None) -> Path:
    """Get the data directory for this invocation.

    Uses the --data-dir value stored on the root context, falling back to
    ./.do-list when a command is invoked on its own.
    """
    ctx = ctx or click.get_current_context(silent=True)
    root = ctx.find_root() if ctx else None
    if root is not None and isinstance(root.obj, dict) and root.obj.get('data_dir'):
        return Path(root.obj['data_dir'])
    return Path.cwd() / DATA_DIR_NAME


def get_config(data_dir: Path) -> DoListConfig:
    """Load the configuration for a data directory."""
    return ConfigManager(data_dir).get_config()


def make_notifier(console: Console):
    """Build a notifier printing successful operations with rich."""

    def notify(notification: Notification) -> None:
        # Failures are reported by fail() with the exit status
        if not notification.succeeded:
            return
        style = "red" if notification.variant == DESTRUCTIVE else "green"
        console.print(f"[bold {style}]{escape(notification.title)}[/bold {style}] "
                      f"{escape(notification.description)}")

    return notify


def get_task_store(data_dir: Path, config: Optional[DoListConfig] = None,
                   console: Optional[Console] = None) -> TaskStore:
    """Initialize TaskStorageManager and TaskStore from context.

    Returns:
        TaskStore with the collection loaded
    """
    config = config or get_config(data_dir)
    storage = TaskStorageManager(data_dir, storage_key=config.storage_key)
    notifier = make_notifier(console or Console()) if config.notifications else None
    return TaskStore(storage, notifier=notifier)


def fail(error: DoListError) -> NoReturn:
    """Report a domain error and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def truncate(text: str, max_length: int = MAX_TITLE_DISPLAY_LENGTH) -> str:
    if len(text) > max_length:
        return text[:max_length - 3] + "..."
    return text


def format_task_table(tasks: list[Task], short_id_length: int = DEFAULT_SHORT_ID_LENGTH) -> str:
    """Format tasks as a table with consistent styling.

    Args:
        tasks: List of tasks to display
        short_id_length: Characters of each ID to show

    Returns:
        Formatted table string
    """
    headers = ["ID", "STATUS", "TITLE", "CREATED", "COMPLETED"]

    table_data = []
    for task_item in tasks:
        if task_item.completed:
            status_display = click.style("DONE", fg='green')
        else:
            status_display = click.style("PENDING", fg='yellow')

        completed_str = ""
        if task_item.completed_at:
            completed_str = task_item.completed_at.strftime(DATETIME_DISPLAY_FORMAT)

        table_data.append([
            task_item.id[:short_id_length],
            status_display,
            truncate(task_item.title),
            task_item.created_at.strftime(DATETIME_DISPLAY_FORMAT),
            completed_str,
        ])

    return tabulate(table_data, headers=headers, tablefmt="simple")


def format_empty_state(mode: FilterMode) -> str:
    """Message shown when a filter matches no tasks."""
    heading, hint = EMPTY_STATE_MESSAGES[mode.value]
    return f"{heading}\n{hint}"


def format_stats_table(stats: TaskStats) -> str:
    """Format task statistics as a two-column table."""
    rows = [
        ["Total Tasks", stats.total, ""],
        ["Completed", stats.completed, f"{stats.completion_rate}% completion rate"],
        ["Pending", stats.pending, ""],
        ["Today", stats.completed_today, "completed today"],
    ]
    return tabulate(rows, tablefmt="plain")


__all__ = [
    'get_project_context',
    'get_config',
    'make_notifier',
    'get_task_store',
    'fail',
    'truncate',
    'format_task_table',
    'format_empty_state',
    'format_stats_table',
]
