"""Pytest fixtures and configuration for Task Management API tests."""

import pytest
import uuid
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from taskmanager.config import Settings
from taskmanager.database.store import TaskStore
from taskmanager.models.task import Task, TaskStatus, TaskPriority


@pytest.fixture
def task_store():
    """Create an empty TaskStore for testing.

    Each test gets its own store, so nothing leaks between tests.
    """
    return TaskStore()


@pytest.fixture
def test_settings():
    """Settings for tests: no seeding, development mode."""
    return Settings(app_env="development", seed_sample_tasks=False)


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    now = datetime.now(timezone.utc)
    return {
        "task_id": str(uuid.uuid4()),
        "title": "Test Task",
        "description": "Test description",
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.MEDIUM,
        "due_date": None,
        "tags": [],
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def make_task(sample_task_base):
    """Factory for tasks with a fresh id and the given overrides."""
    def _make(**overrides) -> Task:
        return Task(**{**sample_task_base, "task_id": str(uuid.uuid4()), **overrides})
    return _make


@pytest.fixture
def test_client(task_store, test_settings):
    """Create a FastAPI test client around a fresh, unseeded store."""
    from taskmanager.api.app import create_app

    app = create_app(store=task_store, settings=test_settings)
    with TestClient(app) as client:
        yield client
