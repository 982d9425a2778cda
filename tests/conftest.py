# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todo_cli.config import Settings
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's own TODO_* variables never leak into tests."""
    for name in ("TODO_DATA_DIR", "TODO_STORAGE_FILE", "TODO_LOG_LEVEL", "TODO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "todo-data"


@pytest.fixture()
def settings(data_dir: Path) -> Settings:
    """
    Settings pointing at a per-test directory.

    Built directly (not from env) to keep unit tests isolated and deterministic.
    """
    return Settings(
        data_dir=data_dir,
        storage_path=data_dir / "todo.json",
        log_level="WARNING",
        log_file=None,
    )


@pytest.fixture()
def store(settings: Settings) -> TaskStore:
    """An initialised, empty store."""
    s = TaskStore(settings.storage_path)
    s.initialize()
    return s
