# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import LineSource
from ..core.state import AppState

logger = logging.getLogger(__name__)

FRAME = "=" * 21

Printer = Callable[[str], None]


class StdinLineSource:
    """LineSource backed by input(); EOF and Ctrl+C both end the session."""

    def read_line(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return None
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            return None


def frame(text: str) -> str:
    return f"{text}\n{FRAME}"


def run_console_loop(
    state: AppState,
    source: LineSource,
    *,
    registry: CommandRegistry | None = None,
    out: Printer = print,
) -> None:
    """
    Read commands until "bye" or end of input.

    Every reply is printed followed by a frame line. End of input is treated like
    "bye" so tasks typed in a piped session are not lost.
    """
    registry = registry or command_registry
    prompt = str(getattr(getattr(state, "settings", None), "prompt", ""))
    logger.info("Console connector started.")

    out(frame("Hello! Type help to list commands."))

    while True:
        line = source.read_line(prompt)
        if line is None:
            reply = registry.respond(state, "bye")
            out(frame(reply.text))
            break

        reply = registry.respond(state, line)
        out(frame(reply.text))
        if reply.exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
