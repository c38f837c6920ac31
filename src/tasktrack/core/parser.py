# src/tasktrack/core/parser.py

"""
Translate raw text into tasks and validated operation arguments.

Two kinds of input come through here:
- a console line: "<command> <args>", see parse_command / split_line and the
  per-command helpers (parse_task, parse_index, parse_find, parse_update),
- a save-file line: "<tag> <0|1> <payload>", see parse_persisted_line / parse_file.

All user-input validation errors are raised from this module or from the task
variants it dispatches to.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from enum import StrEnum

from ..tasks.task_models import TASK_TYPES, Task, TaskAttribute
from .errors import CorruptSaveLine, MissingUpdateField, NotAnInteger, TaskError

logger = logging.getLogger(__name__)


class Command(StrEnum):
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    UPDATE = "update"
    HELP = "help"
    BYE = "bye"
    UNKNOWN = "unknown"

    @classmethod
    def get(cls, token: str) -> Command:
        """Map a command word to a member; anything unrecognised is UNKNOWN."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            return cls.UNKNOWN


TASK_COMMANDS = frozenset({Command.TODO, Command.DEADLINE, Command.EVENT})

# Plain ASCII digits only: int() would also take "1_0", "+2" or non-ASCII digits.
_INDEX_RE = re.compile(r"-?\d+", re.ASCII)


def split_line(line: str) -> tuple[str, str]:
    """Split a console line into (command word, argument text)."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def parse_command(line: str) -> Command:
    keyword, _ = split_line(line)
    return Command.get(keyword)


def parse_task(cmd: Command, args: str) -> Task:
    if cmd not in TASK_COMMANDS:
        raise ValueError(f"{cmd} does not create a task")
    return TASK_TYPES[cmd.value].create(args)


def parse_index(raw: str) -> int:
    """Parse a 1-based position. Bounds are checked by the task list."""
    text = raw.strip()
    if not _INDEX_RE.fullmatch(text):
        raise NotAnInteger(raw)
    return int(text)


def parse_find(args: str) -> str:
    return args.strip()


def parse_update(args: str) -> tuple[int, TaskAttribute, str]:
    """
    "<index> <attribute> <value>" -> (index, attribute, value).

    The value keeps its inner spacing so descriptions survive unchanged.
    """
    parts = args.strip().split(maxsplit=2)
    if len(parts) < 3:
        raise MissingUpdateField()
    raw_index, raw_attribute, value = parts
    return parse_index(raw_index), TaskAttribute.from_text(raw_attribute), value


def parse_persisted_line(line: str) -> Task:
    """
    Rebuild one task from "<tag> <0|1> <payload>".

    Raises TaskError (the underlying validation error) when the line is malformed.
    """
    parts = line.split(" ", 2)
    if len(parts) != 3:
        raise TaskError("expected '<type> <0|1> <details>'")
    tag, flag, payload = parts

    task_type = TASK_TYPES.get(tag)
    if task_type is None:
        raise TaskError(f"unknown task type {tag!r}")
    if flag not in ("0", "1"):
        raise TaskError(f"done flag must be 0 or 1, got {flag!r}")

    task = task_type.create(payload)
    if flag == "1":
        task.mark_as_done()
    return task


def parse_file(lines: Iterable[str]) -> list[Task]:
    """Parse a whole save file. The first bad line aborts the load."""
    tasks: list[Task] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            tasks.append(parse_persisted_line(line))
        except TaskError as e:
            logger.error("Save file line %d rejected: %s", line_no, e)
            raise CorruptSaveLine(line_no, line, e.message) from e
    logger.debug("Parsed %d tasks from save file", len(tasks))
    return tasks
