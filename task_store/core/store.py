"""
Task Store - In-memory collection of task records.

Tasks are kept in insertion order. Nothing is persisted: the collection
lives exactly as long as the store object.
"""

import threading
import uuid
from typing import Any, Dict, List, Mapping, Optional

from task_store.models import TaskRecord, seed_task
from task_store.utils.exceptions import TaskNotFoundError
from task_store.utils.logger import get_logger

logger = get_logger(__name__)

ID_PREFIX = "server_"


class TaskStore:
    """Ordered in-memory task collection with list/create/update/delete operations."""

    def __init__(self, seed: bool = True):
        # dict keeps insertion order; reassigning a key keeps its position
        self._tasks: Dict[str, TaskRecord] = {}
        self._lock = threading.Lock()
        if seed:
            record = seed_task()
            self._tasks[record.id] = record
        logger.debug(f"TaskStore ready (seeded={seed}, total={len(self._tasks)})")

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    def count(self) -> int:
        return len(self)

    def _new_id(self) -> str:
        task_id = f"{ID_PREFIX}{uuid.uuid4().hex}"
        while task_id in self._tasks:
            task_id = f"{ID_PREFIX}{uuid.uuid4().hex}"
        return task_id

    def list_all(self) -> List[Dict[str, Any]]:
        """Return every task, oldest first."""
        with self._lock:
            return [record.to_dict() for record in self._tasks.values()]

    def get(self, task_id: str) -> Optional[Dict[str, Any]]:
        """Get a task by ID, or None if it does not exist."""
        with self._lock:
            record = self._tasks.get(task_id)
            return record.to_dict() if record else None

    def create(self, payload: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Create a task from an arbitrary client payload and append it.

        Client-supplied ``id``, ``created_at`` and ``updated_at`` are ignored.
        """
        with self._lock:
            record = TaskRecord.from_payload(self._new_id(), payload or {})
            self._tasks[record.id] = record
        return record.to_dict()

    def update(self, task_id: str, payload: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge *payload* into an existing task and refresh its ``updated_at``.

        Raises:
            TaskNotFoundError: If no task has *task_id*.
        """
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)
            record = current.merged(payload or {})
            self._tasks[task_id] = record
        return record.to_dict()

    def delete(self, task_id: str) -> bool:
        """Delete a task. Returns True if one was removed; a missing id is a no-op."""
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def clear(self) -> None:
        """Remove every task, seed included."""
        with self._lock:
            self._tasks.clear()
