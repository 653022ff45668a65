"""Query and validation engine for the Task Management API."""

from taskmanager.engine.query import query_tasks, QueryResult, SortField
from taskmanager.engine.validation import validate_task, ValidationMode, ValidationResult

__all__ = [
    "query_tasks",
    "QueryResult",
    "SortField",
    "validate_task",
    "ValidationMode",
    "ValidationResult",
]
