# src/todo_cli/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for every failure that ends a todo invocation."""


class StorageAlreadyInitialized(TodoError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"todo storage already initialised at {path}")
        self.path = path


class StorageNotInitialized(TodoError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"todo storage not initialised at {path}; run 'todo init' first")
        self.path = path


class StorageCorrupted(TodoError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read todo storage {path}: {reason}")
        self.path = path
        self.reason = reason


class ItemNotFound(TodoError):
    def __init__(self, item_id: int) -> None:
        super().__init__(f"item {item_id} not found")
        self.item_id = item_id


class InvalidArgument(TodoError, ValueError):
    pass
