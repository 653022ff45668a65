"""FastAPI web application for the Task Management API."""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse

from taskmanager.api.errors import register_exception_handlers
from taskmanager.api.responses import success_response
from taskmanager.config import Settings, get_settings
from taskmanager.database.seed import load_seed_tasks
from taskmanager.database.store import TaskStore
from taskmanager.engine.query import query_tasks
from taskmanager.engine.validation import ValidationMode, validate_task
from taskmanager.exceptions import TaskValidationError
from taskmanager.logging_setup import setup_logging
from taskmanager.models.constants import API_VERSION
from taskmanager.models.payloads import TaskCreate, TaskPatch, TaskReplace

logger = logging.getLogger(__name__)


def get_store(request: Request) -> TaskStore:
    """Task store owned by the running app (dependency for FastAPI)."""
    return request.app.state.store


def _require_valid(payload: Any, mode: ValidationMode) -> None:
    result = validate_task(payload, mode)
    if not result.is_valid:
        logger.info(f"Rejected {mode.value} payload: {sorted(result.errors)}")
        raise TaskValidationError(result.errors)


tasks_router = APIRouter(prefix="/api/tasks", tags=["tasks"])
meta_router = APIRouter(tags=["meta"])


@tasks_router.get("")
async def list_tasks(
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    store: TaskStore = Depends(get_store),
) -> JSONResponse:
    """List tasks, optionally filtered by status/priority and sorted."""
    result = query_tasks(store.all(), status=status, priority=priority, sort_by=sort_by)
    return success_response(result.tasks, count=result.count)


@tasks_router.get("/{task_id}")
async def get_task(task_id: str, store: TaskStore = Depends(get_store)) -> JSONResponse:
    """Get a single task."""
    return success_response(store.get(task_id))


@tasks_router.post("", status_code=201)
async def create_task(payload: Any = Body(None), store: TaskStore = Depends(get_store)) -> JSONResponse:
    """Create a task. Only the title is required."""
    _require_valid(payload, ValidationMode.CREATE)
    task = store.append(TaskCreate.model_validate(payload))
    logger.info(f"Created task {task.task_id}")
    return success_response(task, message="Task created successfully", status_code=201)


@tasks_router.put("/{task_id}")
async def replace_task(
    task_id: str,
    payload: Any = Body(None),
    store: TaskStore = Depends(get_store),
) -> JSONResponse:
    """Replace a task. Title, status and priority are required."""
    _require_valid(payload, ValidationMode.REPLACE)
    task = store.replace(task_id, TaskReplace.model_validate(payload))
    logger.info(f"Replaced task {task_id}")
    return success_response(task, message="Task updated successfully")


@tasks_router.patch("/{task_id}")
async def update_task(
    task_id: str,
    payload: Any = Body(None),
    store: TaskStore = Depends(get_store),
) -> JSONResponse:
    """Update only the supplied fields of a task."""
    _require_valid(payload, ValidationMode.UPDATE)
    task = store.merge(task_id, TaskPatch.model_validate(payload))
    logger.info(f"Updated task {task_id}")
    return success_response(task, message="Task updated successfully")


@tasks_router.delete("/{task_id}", status_code=204)
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)) -> Response:
    """Delete a task."""
    store.remove(task_id)
    logger.info(f"Deleted task {task_id}")
    return Response(status_code=204)


@meta_router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {
        "success": True,
        "message": "Task Management API is running",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


@meta_router.get("/")
async def root() -> dict:
    """Root endpoint describing the API."""
    return {
        "success": True,
        "message": "Task Management API",
        "version": API_VERSION,
        "endpoints": {
            "tasks": "/api/tasks",
            "health": "/health",
        },
    }


def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around a task store.

    Args:
        store: Store to serve; when omitted a new one is created and, if
            enabled in settings, seeded from the sample file
        settings: Settings to use (defaults to the environment)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    if store is None:
        store = TaskStore()
        if settings.seed_sample_tasks:
            store.seed(load_seed_tasks(settings.seed_file))

    app = FastAPI(
        title="Task Management API",
        description="Create, read, update, delete, filter and sort tasks held in memory",
        version=API_VERSION,
    )
    app.state.store = store
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response

    register_exception_handlers(app)
    app.include_router(tasks_router)
    app.include_router(meta_router)

    logger.info(f"Task Management API ready (env={settings.app_env}, tasks={len(store)})")
    return app


setup_logging(get_settings().log_level)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=get_settings().host, port=get_settings().port)
