"""Feedback messages emitted after task store operations."""
from dataclasses import dataclass
from typing import Callable, Optional


DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    """A human-readable summary of an operation outcome."""
    title: str
    description: str
    variant: str = DEFAULT
    succeeded: bool = True


Notifier = Callable[[Notification], None]


def task_added(title: str) -> Notification:
    return Notification("Task added!", f'"{title}" has been added to your list.')


def task_toggled(title: str, completed: bool) -> Notification:
    if completed:
        return Notification("Task completed!", f'"{title}" marked as completed.')
    return Notification("Task reopened!", f'"{title}" marked as pending.')


def task_updated() -> Notification:
    return Notification("Task updated!", "Your task has been successfully updated.")


def task_deleted(title: str) -> Notification:
    return Notification(
        "Task deleted!",
        f'"{title}" has been removed from your list.',
        variant=DESTRUCTIVE,
    )


def completed_cleared(count: int) -> Notification:
    plural = "" if count == 1 else "s"
    return Notification("Completed tasks cleared!", f"{count} completed task{plural} removed.")


def operation_failed(operation: str, error: Exception) -> Notification:
    return Notification(f"Could not {operation}", str(error), variant=DESTRUCTIVE, succeeded=False)


def send(notifier: Optional[Notifier], notification: Notification) -> None:
    """Deliver a notification if a notifier is attached."""
    if notifier is not None:
        notifier(notification)
