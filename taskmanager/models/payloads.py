"""Request payload models and task construction for the Task Management API.

Request bodies are checked by ``taskmanager.engine.validation`` first and only
then converted into one of the payload models below. The models carry the
defaults and parsing rules; the functions at the bottom turn them into
``Task`` entities so that every write goes through the same code.
"""

from datetime import datetime
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from taskmanager.models.task import (
    Task,
    TaskPriority,
    TaskStatus,
    coerce_description,
    coerce_due_date,
)

# Fields a client may change; everything else is server-owned.
MUTABLE_FIELDS: Tuple[str, ...] = (
    "title",
    "description",
    "status",
    "priority",
    "due_date",
    "tags",
)


class _TaskFields(BaseModel):
    """Shared parsing rules for task payloads."""

    @field_validator("due_date", mode="before", check_fields=False)
    @classmethod
    def normalize_due_date(cls, value: Any) -> Optional[datetime]:
        return coerce_due_date(value)

    @field_validator("description", mode="before", check_fields=False)
    @classmethod
    def normalize_description(cls, value: Any) -> Any:
        return coerce_description(value)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class TaskCreate(_TaskFields):
    """Payload for POST /api/tasks; only the title is required."""

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    tags: List[str] = Field(default_factory=list)


class TaskReplace(TaskCreate):
    """Payload for PUT /api/tasks/{taskId}.

    Title, status and priority are mandatory. Description, due date and tags
    may be omitted, in which case they reset to their defaults.
    """

    status: TaskStatus
    priority: TaskPriority


class TaskPatch(_TaskFields):
    """Payload for PATCH /api/tasks/{taskId}; every field is optional.

    ``model_fields_set`` records which fields the client actually sent, which
    is what separates "clear the due date" from "leave it alone".
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    tags: Optional[List[str]] = None

    def supplied_fields(self) -> List[str]:
        """Mutable fields present in the request, in canonical order."""
        return [name for name in MUTABLE_FIELDS if name in self.model_fields_set]


def build_task(payload: TaskCreate, task_id: str, now: datetime) -> Task:
    """Create a new Task from a validated create payload."""
    return Task(
        task_id=task_id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
        priority=payload.priority,
        due_date=payload.due_date,
        tags=list(payload.tags),
        created_at=now,
        updated_at=now,
    )


def build_replacement(existing: Task, payload: TaskReplace, now: datetime) -> Task:
    """Full replace: every mutable field comes from the payload.

    The id and creation timestamp of ``existing`` are kept.
    """
    return Task(
        task_id=existing.task_id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
        priority=payload.priority,
        due_date=payload.due_date,
        tags=list(payload.tags),
        created_at=existing.created_at,
        updated_at=now,
    )


def merge_task(existing: Task, patch: TaskPatch, now: datetime) -> Task:
    """Partial update: overlay only the fields the client supplied.

    The id and creation timestamp are never taken from the patch, and the
    result is re-validated as a full Task.
    """
    fields = existing.model_dump()
    for name in patch.supplied_fields():
        value = getattr(patch, name)
        fields[name] = list(value) if name == "tags" else value
    fields["task_id"] = existing.task_id
    fields["created_at"] = existing.created_at
    fields["updated_at"] = now
    return Task(**fields)
