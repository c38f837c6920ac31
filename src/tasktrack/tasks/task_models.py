# src/tasktrack/tasks/task_models.py

"""
Task variants: ToDo, Deadline and Event.

Each variant is a standalone dataclass that implements the same small surface:
- create(raw)             -> build from the text a user typed after the command word
- to_display_string()     -> "[T][X] read book" (also used by str())
- to_persist_string()     -> "todo 1 read book" (one line of the save file)
- matches(term)           -> case-sensitive substring search on the description
- update(attribute, text) -> replace one field, returns a confirmation line
- mark_as_done() / mark_as_not_done()

The persisted payload after "<tag> <flag> " is exactly what create() accepts,
so loading a line goes through the same validation as typing it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..core.errors import (
    EmptyDescription,
    InvalidAttributeForVariant,
    InvalidEventRange,
    InvalidTimestamp,
    MissingTemporalField,
    ReservedDelimiter,
    UnknownAttribute,
)

DATETIME_FORMAT = "%Y-%m-%dT%H:%M"
DATETIME_HINT = "yyyy-MM-ddTHH:mm"

BY_DELIMITER = " /by "
FROM_DELIMITER = " /from "
TO_DELIMITER = " /to "


class TaskAttribute(StrEnum):
    """Fields that `update <n> <attribute> <value>` can replace."""

    DESCRIPTION = "description"
    BY = "by"
    FROM = "from"
    TO = "to"

    @classmethod
    def from_text(cls, raw: str) -> TaskAttribute:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise UnknownAttribute(raw, ", ".join(a.value for a in cls)) from None


def parse_timestamp(text: str) -> datetime:
    try:
        return datetime.strptime(text.strip(), DATETIME_FORMAT)
    except ValueError:
        raise InvalidTimestamp(text, DATETIME_HINT) from None


def format_timestamp(value: datetime) -> str:
    # Four-digit years always, so strptime reads the value back.
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}"
    )


def _require_description(raw: str) -> str:
    if not raw or not raw.strip():
        raise EmptyDescription()
    return raw


def _check_reserved(description: str, delimiters: tuple[str, ...]) -> None:
    # A description that contains a delimiter would split differently on reload.
    padded = f" {description} "
    for token in delimiters:
        if token in padded:
            raise ReservedDelimiter(token)


@dataclass(slots=True)
class _Status:
    """Shared state and behaviour of every variant."""

    description: str
    is_done: bool = field(default=False, kw_only=True)

    TAG: ClassVar[str] = ""
    ICON: ClassVar[str] = ""
    DELIMITERS: ClassVar[tuple[str, ...]] = ()

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def matches(self, term: str) -> bool:
        return term in self.description

    def _head(self) -> str:
        return f"[{self.ICON}][{self.status_icon}] {self.description}"

    def _persist_head(self) -> str:
        return f"{self.TAG} {1 if self.is_done else 0} {self.description}"

    def _set_description(self, value: str) -> None:
        _require_description(value)
        _check_reserved(value, self.DELIMITERS)
        self.description = value

    def __str__(self) -> str:
        return self.to_display_string()

    def _updated(self) -> str:
        return f"Updated task:\n    {self.to_display_string()}"


@dataclass(slots=True)
class ToDo(_Status):
    TAG: ClassVar[str] = "todo"
    ICON: ClassVar[str] = "T"

    @classmethod
    def create(cls, raw: str) -> ToDo:
        return cls(_require_description(raw))

    def to_display_string(self) -> str:
        return self._head()

    def to_persist_string(self) -> str:
        return self._persist_head()

    def update(self, attribute: TaskAttribute, value: str) -> str:
        if attribute is not TaskAttribute.DESCRIPTION:
            raise InvalidAttributeForVariant(attribute.value, self.TAG)
        self._set_description(value)
        return self._updated()


@dataclass(slots=True)
class Deadline(_Status):
    due_at: datetime

    TAG: ClassVar[str] = "deadline"
    ICON: ClassVar[str] = "D"
    DELIMITERS: ClassVar[tuple[str, ...]] = (BY_DELIMITER,)
    USAGE: ClassVar[str] = f"deadline <description> /by <{DATETIME_HINT}>"

    @classmethod
    def create(cls, raw: str) -> Deadline:
        _require_description(raw)
        parts = raw.split(BY_DELIMITER)
        if len(parts) != 2:
            raise MissingTemporalField(cls.USAGE)
        description, due_text = parts
        return cls(_require_description(description), parse_timestamp(due_text))

    def to_display_string(self) -> str:
        return f"{self._head()} (by {format_timestamp(self.due_at)})"

    def to_persist_string(self) -> str:
        return f"{self._persist_head()}{BY_DELIMITER}{format_timestamp(self.due_at)}"

    def update(self, attribute: TaskAttribute, value: str) -> str:
        if attribute is TaskAttribute.DESCRIPTION:
            self._set_description(value)
        elif attribute is TaskAttribute.BY:
            self.due_at = parse_timestamp(value)
        else:
            raise InvalidAttributeForVariant(attribute.value, self.TAG)
        return self._updated()


@dataclass(slots=True)
class Event(_Status):
    start_at: datetime
    end_at: datetime

    TAG: ClassVar[str] = "event"
    ICON: ClassVar[str] = "E"
    DELIMITERS: ClassVar[tuple[str, ...]] = (FROM_DELIMITER,)
    USAGE: ClassVar[str] = (
        f"event <description> /from <{DATETIME_HINT}> /to <{DATETIME_HINT}>"
    )

    def __post_init__(self) -> None:
        if self.end_at < self.start_at:
            raise InvalidEventRange()

    @classmethod
    def create(cls, raw: str) -> Event:
        _require_description(raw)
        head = raw.split(FROM_DELIMITER)
        if len(head) != 2:
            raise MissingTemporalField(cls.USAGE)
        description, span = head
        times = span.split(TO_DELIMITER)
        if len(times) != 2:
            raise MissingTemporalField(cls.USAGE)
        start_text, end_text = times
        return cls(
            _require_description(description),
            parse_timestamp(start_text),
            parse_timestamp(end_text),
        )

    def to_display_string(self) -> str:
        return (
            f"{self._head()} (from {format_timestamp(self.start_at)}"
            f" to {format_timestamp(self.end_at)})"
        )

    def to_persist_string(self) -> str:
        return (
            f"{self._persist_head()}{FROM_DELIMITER}{format_timestamp(self.start_at)}"
            f"{TO_DELIMITER}{format_timestamp(self.end_at)}"
        )

    def update(self, attribute: TaskAttribute, value: str) -> str:
        if attribute is TaskAttribute.DESCRIPTION:
            self._set_description(value)
        elif attribute is TaskAttribute.FROM:
            start_at = parse_timestamp(value)
            if self.end_at < start_at:
                raise InvalidEventRange()
            self.start_at = start_at
        elif attribute is TaskAttribute.TO:
            end_at = parse_timestamp(value)
            if end_at < self.start_at:
                raise InvalidEventRange()
            self.end_at = end_at
        else:
            raise InvalidAttributeForVariant(attribute.value, self.TAG)
        return self._updated()


Task = ToDo | Deadline | Event

TASK_TYPES: dict[str, type[ToDo] | type[Deadline] | type[Event]] = {
    ToDo.TAG: ToDo,
    Deadline.TAG: Deadline,
    Event.TAG: Event,
}
