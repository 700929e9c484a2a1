"""Task storage manager for persistent task tracking."""
import contextlib
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from do_list.core.constants import DEFAULT_STORAGE_KEY, STORAGE_FORMAT_VERSION
from do_list.models.task import Task
from do_list.services.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class TaskStorageManager:
    """Persists the task collection as a single named JSON record."""

    def __init__(self, data_dir: Path, storage_key: str = DEFAULT_STORAGE_KEY):
        """Initialize task storage manager.

        Args:
            data_dir: The .do-list directory holding the record
            storage_key: Name of the record, used as the file stem
        """
        self.data_dir = Path(data_dir)
        self.storage_key = storage_key
        self.record_file = self.data_dir / f"{storage_key}.json"

    def _serialize_task(self, task: Task) -> dict:
        """Serialize a task to JSON-compatible dict."""
        return {
            "id": task.id,
            "title": task.title,
            "completed": task.completed,
            "created_at": task.created_at.isoformat(),
            "completed_at": task.completed_at.isoformat() if task.completed_at else None,
        }

    @staticmethod
    def _parse_timestamp(value) -> datetime:
        if not isinstance(value, str):
            raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
        parsed = datetime.fromisoformat(value)
        # Naive values predate offset-aware storage; read them as local time
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
        return parsed

    def _deserialize_task(self, data: dict) -> Task:
        """Deserialize a task from JSON data, rejecting invalid records."""
        task_id = data["id"]
        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")

        title = data["title"]
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"task {task_id} has an empty title")

        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"task {task_id} has a non-boolean completed flag")

        raw_completed_at = data.get("completed_at")
        completed_at = self._parse_timestamp(raw_completed_at) if raw_completed_at else None
        if completed != (completed_at is not None):
            raise ValueError(f"task {task_id} completed_at does not match completed flag")

        return Task(
            id=task_id,
            title=title.strip(),
            completed=completed,
            created_at=self._parse_timestamp(data["created_at"]),
            completed_at=completed_at,
        )

    def _read_record(self) -> Optional[list]:
        """Read the raw task list from disk, or None if there is no record."""
        if not self.record_file.exists():
            return None

        try:
            with open(self.record_file, encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read {self.record_file}: {e}") from e

        # Older records were a bare list of tasks
        if isinstance(payload, list):
            return payload
        if isinstance(payload, dict) and isinstance(payload.get("tasks"), list):
            return payload["tasks"]
        raise PersistenceError(f"Unrecognized task record layout in {self.record_file}")

    def load(self) -> list[Task]:
        """Load the task collection.

        Returns:
            The stored tasks in order, or an empty list when no record
            exists or the record is unreadable or corrupt
        """
        try:
            raw_tasks = self._read_record()
            if raw_tasks is None:
                logger.debug(f"No task record at {self.record_file}; starting empty")
                return []

            tasks = []
            seen_ids = set()
            for entry in raw_tasks:
                if not isinstance(entry, dict):
                    raise PersistenceError("Task entries must be objects")
                try:
                    task = self._deserialize_task(entry)
                except (KeyError, TypeError, ValueError) as e:
                    raise PersistenceError(f"Invalid task entry: {e}") from e
                if task.id in seen_ids:
                    raise PersistenceError(f"Duplicate task id: {task.id}")
                seen_ids.add(task.id)
                tasks.append(task)
        except PersistenceError as e:
            logger.warning(f"Discarding stored tasks, starting empty: {e}")
            return []

        logger.info(f"Loaded {len(tasks)} tasks from {self.record_file}")
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Write the task collection to disk.

        Args:
            tasks: The full collection, in order

        Raises:
            PersistenceError: If the record cannot be written
        """
        payload = {
            "version": STORAGE_FORMAT_VERSION,
            "tasks": [self._serialize_task(task) for task in tasks],
        }
        tmp_file = self.record_file.with_suffix(".tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, 'w', encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_file, self.record_file)
        except OSError as e:
            logger.error(f"Failed to save tasks to {self.record_file}: {e}")
            with contextlib.suppress(OSError):
                tmp_file.unlink()
            raise PersistenceError(f"Could not write {self.record_file}: {e}") from e

        logger.debug(f"Saved {len(payload['tasks'])} tasks to {self.record_file}")
