"""Data models for the Task Management API."""

from taskmanager.models.task import Task, TaskStatus, TaskPriority, enum_to_value, parse_datetime
from taskmanager.models.payloads import TaskCreate, TaskReplace, TaskPatch, merge_task

__all__ = [
    "Task",
    "TaskStatus",
    "TaskPriority",
    "enum_to_value",
    "parse_datetime",
    "TaskCreate",
    "TaskReplace",
    "TaskPatch",
    "merge_task",
]
