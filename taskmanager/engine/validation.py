"""Request payload validation for the Task Management API.

Every rule runs independently so the caller gets one message per violated
field in a single response, instead of fixing errors one at a time.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field

from taskmanager.models.constants import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH, DESCRIPTION_MAX_LENGTH
from taskmanager.models.task import TaskPriority, TaskStatus, parse_datetime

_MISSING = object()

VALID_STATUSES = [status.value for status in TaskStatus]
VALID_PRIORITIES = [priority.value for priority in TaskPriority]


class ValidationMode(str, Enum):
    """Which request a payload belongs to."""
    CREATE = "create"    # POST: title required, rest defaulted
    REPLACE = "replace"  # PUT: title, status and priority required
    UPDATE = "update"    # PATCH: everything optional


class ValidationResult(BaseModel):
    """Outcome of validating a payload."""
    errors: Dict[str, str] = Field(default_factory=dict, description="Field name to error message")

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_present(value: Any) -> bool:
    return value is not _MISSING


def _check_title(value: Any, mode: ValidationMode) -> str:
    if mode == ValidationMode.UPDATE and not _is_present(value):
        return ""
    if not isinstance(value, str) or not value:
        return "Title is required and must be a string"
    if not TITLE_MIN_LENGTH <= len(value) <= TITLE_MAX_LENGTH:
        return f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
    return ""


def _check_description(value: Any) -> str:
    if not _is_present(value) or value is None:
        return ""
    if not isinstance(value, str):
        return "Description must be a string"
    if len(value) > DESCRIPTION_MAX_LENGTH:
        return f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
    return ""


def _check_choice(value: Any, choices: list, label: str, required: bool) -> str:
    if not _is_present(value) and not required:
        return ""
    if not isinstance(value, str) or value not in choices:
        return f"{label} must be one of: {', '.join(choices)}"
    return ""


def _check_due_date(value: Any) -> str:
    if not _is_present(value) or value is None or value == "":
        return ""
    try:
        parse_datetime(value)
    except ValueError:
        return "Due date must be a valid ISO 8601 datetime"
    return ""


def _check_tags(value: Any) -> str:
    if not _is_present(value):
        return ""
    if not isinstance(value, list):
        return "Tags must be an array"
    if not all(isinstance(tag, str) for tag in value):
        return "All tags must be strings"
    return ""


def validate_task(payload: Any, mode: ValidationMode = ValidationMode.CREATE) -> ValidationResult:
    """Validate a raw task payload.

    Args:
        payload: Decoded JSON request body (any shape)
        mode: CREATE, REPLACE or UPDATE

    Returns:
        ValidationResult whose ``errors`` maps each offending field (wire
        name) to a human-readable message; empty when the payload is valid
    """
    if not isinstance(payload, dict):
        return ValidationResult(errors={"body": "Request body must be a JSON object"})

    required_choice = mode == ValidationMode.REPLACE
    checks = {
        "title": _check_title(payload.get("title", _MISSING), mode),
        "description": _check_description(payload.get("description", _MISSING)),
        "status": _check_choice(payload.get("status", _MISSING), VALID_STATUSES, "Status", required_choice),
        "priority": _check_choice(payload.get("priority", _MISSING), VALID_PRIORITIES, "Priority", required_choice),
        "dueDate": _check_due_date(payload.get("dueDate", _MISSING)),
        "tags": _check_tags(payload.get("tags", _MISSING)),
    }
    return ValidationResult(errors={field: message for field, message in checks.items() if message})
