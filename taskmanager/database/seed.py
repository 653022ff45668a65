"""Load seed tasks from a JSON file."""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Union

from taskmanager.models.task import Task

logger = logging.getLogger(__name__)

SAMPLE_TASKS_FILE = Path(__file__).resolve().parent.parent / "data" / "sample_tasks.json"


def load_seed_tasks(path: Union[str, Path] = SAMPLE_TASKS_FILE) -> List[Task]:
    """Read a JSON array of tasks in wire format.

    Records missing ``taskId``, ``createdAt`` or ``updatedAt`` get a generated
    id and the current time. A lone timestamp fills in the other one.

    Raises:
        ValueError: If the file does not contain a JSON array
        pydantic.ValidationError: If a record is not a valid task, including
            one whose ``updatedAt`` is earlier than its ``createdAt``
    """
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        records = json.load(fh)

    if not isinstance(records, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")

    now = datetime.now(timezone.utc)
    tasks: List[Task] = []
    for record in records:
        record = dict(record)
        record.setdefault("taskId", str(uuid.uuid4()))
        record.setdefault("createdAt", record.get("updatedAt", now))
        record.setdefault("updatedAt", record["createdAt"])
        tasks.append(Task.model_validate(record))

    logger.debug(f"Loaded {len(tasks)} seed tasks from {path}")
    return tasks
