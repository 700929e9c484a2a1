"""Core task-state management for Do List."""

from .filters import filter_tasks
from .stats import compute_stats
from .task_storage import TaskStorageManager
from .task_store import TaskStore

__all__ = [
    'TaskStorageManager',
    'TaskStore',
    'compute_stats',
    'filter_tasks',
]
