# tests/test_console_connector.py

from __future__ import annotations

from tasktrack.connectors.console_connector import FRAME, frame, run_console_loop

from .fakes import ScriptedLineSource


def test_frame_appends_separator() -> None:
    assert frame("hi") == "hi\n" + "=" * 21
    assert FRAME == "=" * 21


def test_loop_stops_on_bye_and_saves(state, storage) -> None:
    source = ScriptedLineSource(["todo read book", "bye", "todo never read"])
    printed: list[str] = []

    run_console_loop(state, source, out=printed.append)

    assert printed[1] == frame("added: [T][ ] read book\nYou have 1 tasks.")
    assert printed[-1] == frame("Bye")
    assert storage.written == ["todo 0 read book"]
    assert len(state.tasks) == 1


def test_loop_keeps_going_after_errors(state) -> None:
    source = ScriptedLineSource(["", "fly away", "mark 9", "todo ok", "bye"])
    printed: list[str] = []

    run_console_loop(state, source, out=printed.append)

    assert printed[1] == frame("Err: No command input")
    assert printed[2] == frame("Err: Unknown command - fly")
    assert printed[3] == frame("Err: Index provided is out of position of the list")
    assert len(state.tasks) == 1


def test_end_of_input_saves_like_bye(state, storage) -> None:
    source = ScriptedLineSource(["todo a", "todo b"])
    printed: list[str] = []

    run_console_loop(state, source, out=printed.append)

    assert storage.written == ["todo 0 a\ntodo 0 b"]
    assert printed[-1] == frame("Bye")


def test_loop_uses_prompt_from_settings(state) -> None:
    state.settings.prompt = "> "
    source = ScriptedLineSource(["bye"])

    run_console_loop(state, source, out=lambda _: None)

    assert source.prompts == ["> "]
