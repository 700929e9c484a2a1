"""Task store owning the canonical task collection."""
import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from do_list.core import notifications
from do_list.core.notifications import Notification, Notifier
from do_list.core.task_storage import TaskStorageManager
from do_list.models.task import Task
from do_list.services.exceptions import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

Listener = Callable[[List[Task]], None]


def local_now() -> datetime:
    """Current time as an offset-aware local timestamp."""
    return datetime.now().astimezone()


class TaskStore:
    """Owns the ordered task collection and every mutation of it.

    The collection is loaded once at construction. Each mutating
    operation validates its input before touching the collection, applies
    the change in memory, and writes the full collection back through the
    storage manager as its last step. A failed write is raised as
    PersistenceError; the in-memory change is kept.
    """

    def __init__(self, storage: TaskStorageManager,
                 clock: Optional[Callable[[], datetime]] = None,
                 notifier: Optional[Notifier] = None):
        """Initialize the task store.

        Args:
            storage: Persistence adapter to load from and save to
            clock: Returns the current time; defaults to local_now
            notifier: Optional sink for operation feedback
        """
        self.storage = storage
        self._clock = clock or local_now
        self._notifier = notifier
        self._listeners: List[Listener] = []
        self._tasks: List[Task] = storage.load()

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the collection, newest first."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback receiving a snapshot after each mutation.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Lookup

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFoundError(f"No task found with ID: {task_id}")

    def get(self, task_id: str) -> Task:
        """Get a task by its full ID.

        Raises:
            NotFoundError: If no task has this ID
        """
        return self._tasks[self._index_of(task_id)]

    def resolve(self, task_id: str) -> Task:
        """Resolve a full or short (prefix) task ID.

        Raises:
            ValidationError: If the ID is empty or the prefix is ambiguous
            NotFoundError: If nothing matches
        """
        task_id = (task_id or "").strip()
        if not task_id:
            raise ValidationError("Task ID must not be empty")

        for task in self._tasks:
            if task.id == task_id:
                return task

        matching = [task for task in self._tasks if task.id.startswith(task_id)]
        if len(matching) > 1:
            raise ValidationError(f"Multiple tasks found starting with '{task_id}'")
        if not matching:
            raise NotFoundError(f"No task found with ID: {task_id}")
        return matching[0]

    # Mutations

    def add(self, title: str) -> Task:
        """Create a task and place it at the top of the list.

        Raises:
            ValidationError: If the title is empty after stripping
        """
        title = self._checked_title(title, "add task")

        task = Task(id=self._new_id(), title=title, created_at=self._now())
        self._tasks.insert(0, task)
        logger.info(f"Added task {task.id}")

        self._commit("add task", notifications.task_added(task.title))
        return task

    def toggle(self, task_id: str) -> Task:
        """Flip a task between completed and pending.

        Raises:
            NotFoundError: If no task has this ID
        """
        index = self._checked_index(task_id, "toggle task")
        task = self._tasks[index]

        if task.completed:
            updated = replace(task, completed=False, completed_at=None)
        else:
            updated = replace(task, completed=True, completed_at=self._now())
        self._tasks[index] = updated
        logger.info(f"Task {task_id} completed={updated.completed}")

        self._commit("toggle task", notifications.task_toggled(updated.title, updated.completed))
        return updated

    def update(self, task_id: str, new_title: str) -> Task:
        """Rename a task.

        Raises:
            ValidationError: If the new title is empty after stripping
            NotFoundError: If no task has this ID
        """
        new_title = self._checked_title(new_title, "update task")
        index = self._checked_index(task_id, "update task")

        updated = replace(self._tasks[index], title=new_title)
        self._tasks[index] = updated
        logger.info(f"Renamed task {task_id}")

        self._commit("update task", notifications.task_updated())
        return updated

    def delete(self, task_id: str) -> None:
        """Remove a task.

        Raises:
            NotFoundError: If no task has this ID
        """
        index = self._checked_index(task_id, "delete task")
        removed = self._tasks.pop(index)
        logger.info(f"Deleted task {task_id}")

        self._commit("delete task", notifications.task_deleted(removed.title))

    def clear_completed(self) -> int:
        """Remove every completed task.

        Returns:
            Number of tasks removed
        """
        remaining = [task for task in self._tasks if not task.completed]
        count = len(self._tasks) - len(remaining)
        self._tasks = remaining
        logger.info(f"Cleared {count} completed tasks")

        self._commit("clear completed tasks", notifications.completed_cleared(count))
        return count

    # Internals

    def _now(self) -> datetime:
        now = self._clock()
        # Naive clock readings are local time
        if now.tzinfo is None:
            now = now.astimezone()
        return now

    def _new_id(self) -> str:
        existing = {task.id for task in self._tasks}
        task_id = str(uuid.uuid4())
        while task_id in existing:
            task_id = str(uuid.uuid4())
        return task_id

    def _checked_title(self, title: str, operation: str) -> str:
        if not isinstance(title, str) or not title.strip():
            self._fail(operation, ValidationError("Task title must not be empty"))
        return title.strip()

    def _checked_index(self, task_id: str, operation: str) -> int:
        try:
            return self._index_of(task_id)
        except NotFoundError as e:
            self._fail(operation, e)

    def _fail(self, operation: str, error: Exception) -> None:
        logger.debug(f"Rejected {operation}: {error}")
        notifications.send(self._notifier, notifications.operation_failed(operation, error))
        raise error

    def _commit(self, operation: str, notification: Notification) -> None:
        try:
            self.storage.save(self._tasks)
        except PersistenceError as e:
            logger.error(f"Task change kept in memory but not saved ({operation}): {e}")
            self._publish()
            notifications.send(self._notifier, notifications.operation_failed("save tasks", e))
            raise

        self._publish()
        notifications.send(self._notifier, notification)

    def _publish(self) -> None:
        snapshot = self.tasks
        for listener in list(self._listeners):
            listener(snapshot)
