"""Models for Do List."""

from .config import DoListConfig
from .task import FilterMode, Task, TaskStats

__all__ = [
    'DoListConfig',
    'FilterMode',
    'Task',
    'TaskStats',
]
