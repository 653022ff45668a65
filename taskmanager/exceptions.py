"""Domain exceptions for the Task Management API."""

from typing import Dict


class TaskNotFoundError(LookupError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found")


class TaskValidationError(ValueError):
    """Raised when a request payload fails field validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("Validation failed")
