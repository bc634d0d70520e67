# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasker_pro.core.state import AppState
from tasker_pro.tasks.task_service import TaskService


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasker-test",
        log_level="DEBUG",
        console_enabled=True,
        default_user_id=None,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def service() -> TaskService:
    return TaskService()


@pytest.fixture()
def state(settings: SimpleNamespace, service: TaskService) -> AppState:
    """AppState wired with a fresh in-memory registry and nobody logged in."""
    return AppState(settings=settings, task_store=service)
