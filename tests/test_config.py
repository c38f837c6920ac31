# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tasktrack.config import Settings
from tasktrack.logging_setup import _ConsoleNoiseFilter


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKTRACK_APP_NAME",
        "TASKTRACK_LOG_LEVEL",
        "TASKTRACK_PROMPT",
        "TASKTRACK_DATA_DIR",
        "TASKTRACK_TASKS_FILE",
        "TASKTRACK_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "tasktrack"
    assert s.log_level == "WARNING"
    assert s.data_dir == Path(".local/tasktrack")
    assert s.tasks_file == Path(".local/tasktrack/tasks.txt")
    assert s.log_dir == s.data_dir


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKTRACK_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKTRACK_PROMPT", "> ")
    monkeypatch.delenv("TASKTRACK_TASKS_FILE", raising=False)
    monkeypatch.delenv("TASKTRACK_LOG_DIR", raising=False)

    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.prompt == "> "
    assert s.tasks_file == tmp_path / "tasks.txt"
    assert s.log_dir == tmp_path


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasktrack.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_console_filter_matches_own_logger_tree_only() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasktrack", logging.INFO))
    assert not f.filter(_record("tasktracker", logging.INFO))
    assert not f.filter(_record("py.warnings", logging.ERROR - 1))
    assert f.filter(_record("py.warnings", logging.ERROR))
