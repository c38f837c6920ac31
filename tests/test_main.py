# tests/test_main.py

from __future__ import annotations

import pytest

from tasktrack.cli import main as cli_main


@pytest.fixture()
def quiet_main(monkeypatch: pytest.MonkeyPatch, settings) -> list[object]:
    """
    Point main() at the tmp settings, keep logging handlers off the root logger
    and record whether the console loop was entered.
    """
    loops: list[object] = []
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_: None)
    monkeypatch.setattr(cli_main, "run_console_loop", lambda state, source: loops.append(state))
    return loops


def test_main_refuses_to_start_on_corrupt_save_file(quiet_main, settings, capsys) -> None:
    settings.tasks_file.write_text("todo 0 fine\ndeadline 0 broken /by someday", "utf-8")

    assert cli_main.main() == 1
    assert quiet_main == []
    assert "line 2 is corrupt" in capsys.readouterr().err
    assert settings.tasks_file.read_text("utf-8").endswith("/by someday")


def test_main_runs_loop_with_loaded_tasks(quiet_main, settings) -> None:
    settings.tasks_file.write_text("todo 1 read book", "utf-8")

    assert cli_main.main() == 0
    assert len(quiet_main) == 1
    assert quiet_main[0].tasks.to_display_list() == "    1. [T][X] read book"
