# src/tasktrack/core/errors.py

"""
User-facing failures raised by the task model, the parser and the task list.

Every error carries a ready-to-print message; the command registry turns them into
replies and the console keeps running. Only load errors at startup are fatal.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for failures that are reported to the user as a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmptyDescription(TaskError):
    def __init__(self) -> None:
        super().__init__("Err: Empty Description")


class MissingTemporalField(TaskError):
    def __init__(self, usage: str) -> None:
        super().__init__(f"Err: No date/time given. Format - {usage}")
        self.usage = usage


class InvalidTimestamp(TaskError):
    def __init__(self, text: str, fmt_hint: str = "yyyy-MM-ddTHH:mm") -> None:
        super().__init__(f"Err: Invalid date/time '{text}'. Use {fmt_hint}")
        self.text = text


class InvalidEventRange(TaskError):
    def __init__(self) -> None:
        super().__init__("Err: Event ends before it starts")


class NotAnInteger(TaskError):
    def __init__(self, text: str) -> None:
        super().__init__("Err: Index provided is not an integer")
        self.text = text


class IndexOutOfRange(TaskError):
    def __init__(self, position: int, size: int) -> None:
        super().__init__("Err: Index provided is out of position of the list")
        self.position = position
        self.size = size


class InvalidAttributeForVariant(TaskError):
    def __init__(self, attribute: str, kind: str) -> None:
        super().__init__(f"Err: A {kind} task has no '{attribute}' to update")
        self.attribute = attribute
        self.kind = kind


class UnknownAttribute(TaskError):
    def __init__(self, name: str, choices: str) -> None:
        super().__init__(f"Err: Unknown attribute '{name}'. Choose one of: {choices}")
        self.name = name


class MissingUpdateField(TaskError):
    def __init__(self) -> None:
        super().__init__("Err: Incomplete update. Format - update <index> <attribute> <value>")


class ReservedDelimiter(TaskError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Err: Description may not contain '{token.strip()}'")
        self.token = token


class CorruptSaveLine(TaskError):
    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"Err: Save file line {line_no} is corrupt ({reason}): {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason


class IOFailure(TaskError):
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Err: Could not access save file {path}: {reason}")
        self.path = path
        self.reason = reason
