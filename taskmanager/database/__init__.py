"""In-memory storage for the Task Management API."""

from taskmanager.database.store import TaskStore
from taskmanager.database.seed import load_seed_tasks, SAMPLE_TASKS_FILE

__all__ = [
    "TaskStore",
    "load_seed_tasks",
    "SAMPLE_TASKS_FILE",
]
