# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .errors import StorageAlreadyInitialized, StorageCorrupted, StorageNotInitialized
from .task_models import Task, TaskList

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The file holds a single array of {"id", "text", "done"} objects in id
    order. Every save rewrites the whole list through a temp file + os.replace,
    so a crash never leaves a half-written list behind.

    No locking: one user, one process at a time.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def initialize(self) -> None:
        if self._path.exists():
            raise StorageAlreadyInitialized(self._path)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self.save(TaskList())
        logger.info("Initialised todo storage at %s", self._path)

    def load(self) -> TaskList:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError as exc:
            raise StorageNotInitialized(self._path) from exc
        except UnicodeDecodeError as exc:
            raise StorageCorrupted(self._path, f"not UTF-8 text (byte {exc.start})") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageCorrupted(self._path, f"invalid JSON ({exc.msg})") from exc
        except RecursionError as exc:
            raise StorageCorrupted(self._path, "JSON nested too deeply") from exc

        if not isinstance(data, list):
            raise StorageCorrupted(self._path, "expected a JSON array of items")

        try:
            todo_list = TaskList(Task.from_dict(item) for item in data)
        except ValueError as exc:
            raise StorageCorrupted(self._path, str(exc)) from exc

        logger.debug("Loaded %d tasks from %s", len(todo_list), self._path)
        return todo_list

    def save(self, todo_list: TaskList) -> None:
        payload = json.dumps([t.to_dict() for t in todo_list], ensure_ascii=False, indent=2)

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise

        logger.debug("Saved %d tasks to %s", len(todo_list), self._path)
