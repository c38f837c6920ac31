# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRange
from ..core.parser import parse_file, parse_index
from .task_models import Task, TaskAttribute

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "You have no tasks :)."


class TaskList:
    """
    Ordered in-memory task collection.

    Positions exposed to users are 1-based and always equal to list index + 1,
    so deleting task N shifts every later task down by one.

    Persistence is a bulk dump (to_persist_block) and a bulk load (load_from);
    the caller decides when to do either.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def __str__(self) -> str:
        return self.to_display_list()

    # ---- low-level helpers ----

    def _resolve(self, position: int) -> int:
        if position < 1 or position > len(self._tasks):
            raise IndexOutOfRange(position, len(self._tasks))
        return position - 1

    def _count_line(self) -> str:
        return f"You have {len(self._tasks)} tasks."

    # ---- mutation ----

    def add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Added task #%d: %s", len(self._tasks), task.to_persist_string())
        return f"added: {task}\n{self._count_line()}"

    def add_tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks.extend(tasks)

    def mark_done(self, position: str) -> str:
        task = self._tasks[self._resolve(parse_index(position))]
        task.mark_as_done()
        return f"Nice! You have completed the task:\n    {task}"

    def mark_undone(self, position: str) -> str:
        task = self._tasks[self._resolve(parse_index(position))]
        task.mark_as_not_done()
        return f"Ok! Task marked undone:\n    {task}"

    def delete(self, position: str) -> str:
        task = self._tasks.pop(self._resolve(parse_index(position)))
        logger.debug("Removed task: %s", task.to_persist_string())
        return f"removed: {task}\n{self._count_line()}"

    def update(self, position: int, attribute: TaskAttribute, value: str) -> str:
        task = self._tasks[self._resolve(position)]
        return task.update(attribute, value)

    # ---- queries ----

    def find_all(self, term: str) -> TaskList:
        """Return a new list with the tasks whose description contains term."""
        if not term:
            return TaskList(self._tasks)
        return TaskList(t for t in self._tasks if t.matches(term))

    def to_display_list(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        return "\n".join(f"    {i}. {task}" for i, task in enumerate(self._tasks, start=1))

    # ---- persistence ----

    def to_persist_block(self) -> str:
        return "\n".join(task.to_persist_string() for task in self._tasks)

    def load_from(self, lines: Iterable[str]) -> None:
        """Append every task in lines. Any malformed line raises and nothing is added."""
        tasks = parse_file(lines)
        self.add_tasks(tasks)
        logger.info("Loaded %d tasks", len(tasks))
