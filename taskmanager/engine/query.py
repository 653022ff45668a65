"""Filtering and sorting for task listings.

Produces a derived, ordered view of a task snapshot. The input is never
mutated; every sort is stable so ties keep their store order.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from taskmanager.models.constants import PRIORITY_RANK
from taskmanager.models.task import Task, enum_to_value


class SortField(str, Enum):
    """Recognised values of the ``sortBy`` query parameter."""
    DUE_DATE = "dueDate"
    CREATED_AT = "createdAt"
    PRIORITY = "priority"


class QueryResult:
    """Result of a task query."""

    def __init__(self, tasks: List[Task]):
        self.tasks: List[Task] = tasks

    @property
    def count(self) -> int:
        return len(self.tasks)


def query_tasks(
    tasks: Sequence[Task],
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort_by: Optional[str] = None,
) -> QueryResult:
    """Filter then sort a task snapshot.

    Filters are exact string matches and compose with AND; empty values are
    ignored. Unknown ``sort_by`` values leave the order untouched.

    Args:
        tasks: Tasks in store order
        status: Keep only tasks with this status
        priority: Keep only tasks with this priority
        sort_by: One of the SortField values

    Returns:
        QueryResult with the ordered tasks and their count
    """
    selected = list(tasks)

    if status:
        selected = [task for task in selected if enum_to_value(task.status) == status]

    if priority:
        selected = [task for task in selected if enum_to_value(task.priority) == priority]

    sort_key = _SORT_KEYS.get(sort_by or "")
    if sort_key is not None:
        selected = sorted(selected, key=sort_key)

    return QueryResult(selected)


def _due_date_sort_key(task: Task) -> tuple:
    """Get sort key for due date.

    Tasks with due dates come before those without; among dated tasks,
    earlier dates come first.

    Returns:
        Tuple for sorting: (has_due_date: 0 or 1, due_date timestamp or inf)
    """
    if task.due_date:
        return (0, task.due_date.timestamp())
    return (1, float("inf"))


def _created_at_sort_key(task: Task) -> float:
    return task.created_at.timestamp()


def _priority_sort_key(task: Task) -> int:
    return PRIORITY_RANK[enum_to_value(task.priority)]


_SORT_KEYS: Dict[str, Callable[[Task], object]] = {
    SortField.DUE_DATE.value: _due_date_sort_key,
    SortField.CREATED_AT.value: _created_at_sort_key,
    SortField.PRIORITY.value: _priority_sort_key,
}
