# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list and command handlers depend on these Protocols instead of on the
filesystem or on stdin, which keeps the REPL and the save file swappable in tests.
"""

from typing import Protocol


class Storage(Protocol):
    """Line-oriented save file. Both methods raise IOFailure."""

    def read(self) -> list[str]: ...
    def write(self, text: str) -> None: ...


class LineSource(Protocol):
    """Where the console loop reads commands from."""

    def read_line(self, prompt: str) -> str | None:
        """Return the next line without its newline, or None at end of input."""
        ...
