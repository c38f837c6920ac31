# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the save file, then runs the console REPL
in the main thread until "bye" or end of input.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, load_tasks
from ..config import get_settings
from ..connectors.console_connector import StdinLineSource, run_console_loop
from ..core.errors import TaskError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        load_tasks(state)
    except TaskError as e:
        # Corrupt or unreadable save file: refuse to start rather than overwrite it on bye.
        logger.error("Cannot start: %s", e.message)
        print(e.message, file=sys.stderr)
        return 1

    run_console_loop(state, StdinLineSource())
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
