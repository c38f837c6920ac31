# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktrack.core.state import AppState
from tasktrack.tasks.task_store import TaskList

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasktrack",
        log_level="WARNING",
        prompt="",
        data_dir=tmp_path,
        tasks_file=tmp_path / "tasks.txt",
        log_dir=tmp_path,
    )


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FakeStorage) -> AppState:
    return AppState(settings=settings, storage=storage, tasks=TaskList())
