"""In-memory task store.

The store owns its records and is handed to request handlers through a
FastAPI dependency (see ``taskmanager.api.app.get_store``); nothing here is
module-level state. One instance lives for the life of the process, or of a
single test.
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional

from taskmanager.exceptions import TaskNotFoundError
from taskmanager.models.payloads import (
    TaskCreate,
    TaskPatch,
    TaskReplace,
    build_replacement,
    build_task,
    merge_task,
)
from taskmanager.models.task import Task

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """Ordered, in-memory collection of tasks (oldest append first).

    Every public method holds a single lock, so the store stays consistent
    even if handlers run on a worker thread pool.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._tasks: List[Task] = []
        self._lock = threading.RLock()
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.task_id == task_id:
                return index
        return -1

    def _require_index(self, task_id: str) -> int:
        index = self._index_of(task_id)
        if index == -1:
            logger.debug(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)
        return index

    def _new_id(self) -> str:
        """UUID4 (122 random bits); regenerated on the off chance of a clash."""
        while True:
            task_id = str(uuid.uuid4())
            if self._index_of(task_id) == -1:
                return task_id

    def _next_update_time(self, previous: datetime) -> datetime:
        """Current time, nudged forward so updatedAt strictly increases."""
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    def append(self, payload: TaskCreate) -> Task:
        """Create a task with a fresh id and timestamps and add it at the end."""
        with self._lock:
            task = build_task(payload, task_id=self._new_id(), now=self._clock())
            self._tasks.append(task)
            logger.debug(f"Created task {task.task_id}: {task.title[:50]}")
            return task.model_copy(deep=True)

    def find_by_id(self, task_id: str) -> Optional[Task]:
        """Get task by ID, or None if there is no such task."""
        with self._lock:
            index = self._index_of(task_id)
            return self._tasks[index].model_copy(deep=True) if index != -1 else None

    def get(self, task_id: str) -> Task:
        """Get task by ID.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        task = self.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def replace(self, task_id: str, payload: TaskReplace) -> Task:
        """Overwrite every mutable field; id and createdAt are preserved.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        with self._lock:
            index = self._require_index(task_id)
            existing = self._tasks[index]
            updated = build_replacement(existing, payload, now=self._next_update_time(existing.updated_at))
            self._tasks[index] = updated
            logger.debug(f"Replaced task {task_id}: {updated.title[:50]}")
            return updated.model_copy(deep=True)

    def merge(self, task_id: str, patch: TaskPatch) -> Task:
        """Overlay only the supplied fields; id and createdAt are preserved.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        with self._lock:
            index = self._require_index(task_id)
            existing = self._tasks[index]
            updated = merge_task(existing, patch, now=self._next_update_time(existing.updated_at))
            self._tasks[index] = updated
            logger.debug(f"Updated task {task_id} fields {patch.supplied_fields()}")
            return updated.model_copy(deep=True)

    def remove(self, task_id: str) -> None:
        """Delete a task by ID.

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        with self._lock:
            index = self._require_index(task_id)
            del self._tasks[index]
            logger.debug(f"Deleted task {task_id}")

    def all(self) -> List[Task]:
        """Snapshot of every task in store order.

        The returned tasks are copies; changing them does not touch the store.
        """
        with self._lock:
            return [task.model_copy(deep=True) for task in self._tasks]

    def seed(self, tasks: Iterable[Task]) -> None:
        """Replace the store contents with pre-built tasks (startup only).

        Raises:
            ValueError: If two tasks share an ID
        """
        seeded = [task.model_copy(deep=True) for task in tasks]
        seen = set()
        for task in seeded:
            if task.task_id in seen:
                raise ValueError(f"Duplicate task ID in seed data: {task.task_id}")
            seen.add(task.task_id)

        with self._lock:
            self._tasks = seeded
        logger.info(f"Seeded task store with {len(seeded)} tasks")
