# src/tasktrack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import IOFailure, TaskError
from ..core.parser import (
    Command,
    parse_command,
    parse_find,
    parse_task,
    parse_update,
    split_line,
)
from ..core.state import AppState
from ..tasks.task_models import Deadline, Event
from ..tasks.task_store import EMPTY_LIST_MESSAGE
from .bootstrap import save_tasks

CommandHandler = Callable[[AppState, Command, str], str]

logger = logging.getLogger(__name__)

NO_INPUT_MESSAGE = "Err: No command input"
INTERNAL_ERROR_MESSAGE = "Err: Internal error while handling a command."


@dataclass(frozen=True, slots=True)
class CommandReply:
    text: str
    exit: bool = False


class CommandRegistry:
    """Maps command words to handlers and turns their failures into replies."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}

    def register(self, command: Command, handler: CommandHandler, help_text: str) -> None:
        self._handlers[command] = handler
        self._help[command] = help_text

    def respond(self, state: AppState, line: str) -> CommandReply:
        """
        Handle one console line such as "mark 2".
        Never raises: validation failures come back as "Err: ..." replies.
        """
        keyword, args = split_line(line)
        if not keyword:
            return CommandReply(NO_INPUT_MESSAGE)

        command = parse_command(line)
        handler = self._handlers.get(command)
        if handler is None:
            return CommandReply(f"Err: Unknown command - {keyword}")

        try:
            text = handler(state, command, args)
        except TaskError as e:
            logger.debug("Command %s rejected: %s", command, e.message)
            text = e.message
        except Exception:
            logger.exception("Command handler crashed on %r.", line)
            text = INTERNAL_ERROR_MESSAGE

        return CommandReply(text, exit=command is Command.BYE)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for command, help_text in self._help.items():
            lines.append(f"  {command.value} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add_task(state: AppState, command: Command, args: str) -> str:
    task = parse_task(command, args)
    return state.tasks.add(task)


def cmd_list(state: AppState, command: Command, args: str) -> str:
    return state.tasks.to_display_list()


def cmd_mark(state: AppState, command: Command, args: str) -> str:
    return state.tasks.mark_done(args)


def cmd_unmark(state: AppState, command: Command, args: str) -> str:
    return state.tasks.mark_undone(args)


def cmd_delete(state: AppState, command: Command, args: str) -> str:
    return state.tasks.delete(args)


def cmd_find(state: AppState, command: Command, args: str) -> str:
    found = state.tasks.find_all(parse_find(args))
    if not len(found):
        return EMPTY_LIST_MESSAGE
    return f"Here are the matching tasks in your list:\n{found.to_display_list()}"


def cmd_update(state: AppState, command: Command, args: str) -> str:
    position, attribute, value = parse_update(args)
    return state.tasks.update(position, attribute, value)


def cmd_help(state: AppState, command: Command, args: str) -> str:
    return registry.build_help()


def cmd_bye(state: AppState, command: Command, args: str) -> str:
    try:
        save_tasks(state)
    except IOFailure as e:
        # The session still ends; the user sees why nothing was saved.
        return f"{e.message}\nBye"
    return "Bye"


registry.register(Command.TODO, cmd_add_task, help_text="todo <description>")
registry.register(Command.DEADLINE, cmd_add_task, help_text=Deadline.USAGE)
registry.register(Command.EVENT, cmd_add_task, help_text=Event.USAGE)
registry.register(Command.LIST, cmd_list, help_text="Show all tasks.")
registry.register(Command.MARK, cmd_mark, help_text="mark <index> - mark a task as done.")
registry.register(Command.UNMARK, cmd_unmark, help_text="unmark <index> - mark a task as not done.")
registry.register(Command.DELETE, cmd_delete, help_text="delete <index> - remove a task.")
registry.register(Command.FIND, cmd_find, help_text="find <term> - list tasks containing term.")
registry.register(
    Command.UPDATE,
    cmd_update,
    help_text="update <index> <description|by|from|to> <value> - change one field.",
)
registry.register(Command.HELP, cmd_help, help_text="Show available commands.")
registry.register(Command.BYE, cmd_bye, help_text="Save and quit.")
