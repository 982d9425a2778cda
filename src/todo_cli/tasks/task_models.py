# src/todo_cli/tasks/task_models.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgument, ItemNotFound

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Task:
    id: int
    label: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        # "text" is the on-disk key for the label.
        return {"id": self.id, "text": self.label, "done": self.done}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")

        tid = raw.get("id")
        text = raw.get("text")
        done = raw.get("done", False)

        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
            raise ValueError(f"bad id {tid!r}")
        if not isinstance(text, str):
            raise ValueError(f"bad text for item {tid}")
        if not isinstance(done, bool):
            raise ValueError(f"bad done flag for item {tid}")

        return cls(id=tid, label=text, done=done)

    def render(self) -> str:
        """One fixed-width line, e.g. '  1. [X] Walk the dog'."""
        mark = "X" if self.done else " "
        return f"{f'{self.id}.':>4} [{mark}] {self.label}"


class TaskList:
    """
    Ordered, in-memory collection of tasks.

    Insertion order equals id order. Ids start at 1 and are never reused:
    the next id is always one past the highest id ever stored, and tasks
    are never removed.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = []
        for task in tasks:
            if self._tasks and task.id <= self._tasks[-1].id:
                raise ValueError(
                    f"task ids must be strictly increasing (got {task.id} after {self._tasks[-1].id})"
                )
            self._tasks.append(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def next_id(self) -> int:
        return self._tasks[-1].id + 1 if self._tasks else 1

    def add(self, label: str) -> int:
        clean = (label or "").strip()
        if not clean:
            raise InvalidArgument("item text must not be empty")

        task = Task(id=self.next_id, label=clean)
        self._tasks.append(task)
        logger.debug("Added task id=%s", task.id)
        return task.id

    def get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise ItemNotFound(task_id)

    def complete(self, task_id: int) -> bool:
        """
        Mark a task done.

        Returns False when the task was already completed (nothing changed).
        """
        task = self.get(task_id)
        if task.done:
            return False
        task.done = True
        logger.debug("Completed task id=%s", task.id)
        return True

    def list(self, all: bool = False) -> list[Task]:
        if all:
            return list(self._tasks)
        return [t for t in self._tasks if not t.done]
