"""Task data model for the Task Management API."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from taskmanager.models.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

T = TypeVar("T", bound=Enum)


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def enum_to_value(enum_obj: Union[str, T]) -> str:
    """Convert enum to string value (handles both enum and string).

    Pydantic with use_enum_values=True stores plain strings, but unvalidated
    defaults are still enum members.
    """
    if hasattr(enum_obj, "value"):
        return enum_obj.value
    return str(enum_obj)


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO-8601 date or datetime string into an aware UTC datetime.

    Accepts a trailing ``Z`` and date-only values (midnight). Naive values are
    taken to be UTC.

    Raises:
        ValueError: If the value is not a string, cannot be parsed, or falls
            outside the representable range once converted to UTC
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Unsupported datetime value: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        raise ValueError(f"Datetime out of range once converted to UTC: {value!r}") from None


def coerce_due_date(value: Any) -> Optional[datetime]:
    """Normalize an incoming due date: empty means absent."""
    if value is None or value == "":
        return None
    return parse_datetime(value)


def coerce_description(value: Any) -> Any:
    """A null description is stored as an empty string."""
    return "" if value is None else value


class Task(BaseModel):
    """Canonical Task model.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    task_id: str = Field(..., alias="taskId", description="Unique task identifier (UUID v4)")
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Task title")
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH, description="Task description")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Task status")
    priority: TaskPriority = Field(TaskPriority.MEDIUM, description="Task priority")
    due_date: Optional[datetime] = Field(None, alias="dueDate", description="Optional due date (UTC)")
    tags: List[str] = Field(default_factory=list, description="Free-form tags")
    created_at: datetime = Field(..., alias="createdAt", description="Task creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Task last update timestamp")

    @field_validator("due_date", mode="before")
    @classmethod
    def normalize_due_date(cls, value: Any) -> Optional[datetime]:
        return coerce_due_date(value)

    @field_validator("description", mode="before")
    @classmethod
    def normalize_description(cls, value: Any) -> Any:
        return coerce_description(value)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def normalize_timestamps(cls, value: Any) -> datetime:
        return parse_datetime(value)

    @model_validator(mode="after")
    def check_timestamp_order(self) -> "Task":
        if self.updated_at < self.created_at:
            raise ValueError("updatedAt must not be earlier than createdAt")
        return self

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True
