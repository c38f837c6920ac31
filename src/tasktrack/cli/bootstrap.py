# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the save file and the task list into AppState,
- loads tasks at startup and dumps them on save.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Storage
from ..core.state import AppState
from ..storage.file_storage import FileStorage
from ..tasks.task_store import TaskList

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, storage: Storage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and storage injectable makes the app easier to test and avoids
    hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = FileStorage(settings.tasks_file)

    return AppState(settings=settings, storage=storage, tasks=TaskList())


def load_tasks(state: AppState) -> None:
    """
    Fill state.tasks from storage.

    Raises IOFailure or CorruptSaveLine. There is no partial recovery: a session
    never starts on top of a save file it could not fully read.
    """
    lines = state.storage.read()
    state.tasks.load_from(lines)
    logger.info("Session starts with %d tasks", len(state.tasks))


def save_tasks(state: AppState) -> None:
    """Write every task to storage. Raises IOFailure."""
    state.storage.write(state.tasks.to_persist_block())
    logger.info("Saved %d tasks", len(state.tasks))
