# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings for this
invocation and wires the concrete task store into AppState.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import Settings, get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppState:
    settings: Settings
    task_store: TaskStore


def create_initial_state(*, settings: Settings | None = None, data_dir: str | Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). data_dir (the --data-dir
    option) overrides the configured data directory.
    """
    if settings is None:
        settings = get_settings()
    if data_dir is not None:
        settings = settings.with_data_dir(data_dir)

    logger.debug("Using todo storage %s", settings.storage_path)
    return AppState(settings=settings, task_store=TaskStore(settings.storage_path))
