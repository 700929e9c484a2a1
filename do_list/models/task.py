"""Task data models."""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class FilterMode(Enum):
    """Display subsets of the task collection."""
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Task:
    """A single to-do entry.

    Instances are immutable; the task store swaps in a new instance on
    every toggle or rename so snapshots handed out earlier never change.
    """
    id: str  # UUID
    title: str  # Stripped, never empty
    created_at: datetime  # Fixed at creation
    completed: bool = False
    completed_at: Optional[datetime] = None  # Present iff completed


@dataclass(frozen=True)
class TaskStats:
    """Aggregate counts derived from a task collection."""
    total: int
    completed: int
    pending: int
    completed_today: int

    @property
    def completion_rate(self) -> int:
        """Completed share of all tasks as a whole percentage."""
        if self.total == 0:
            return 0
        return round(self.completed / self.total * 100)
