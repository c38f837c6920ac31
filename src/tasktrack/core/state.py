# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_store import TaskList
from .ports import Storage


@dataclass
class AppState:
    # Settings kept on the state so handlers can read paths/app name.
    settings: object

    storage: Storage
    tasks: TaskList = field(default_factory=TaskList)
