# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object per invocation.
- Every value has a sensible default; nothing is required.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_DATA_DIR = Path("~/.todo")
STORAGE_FILE_NAME = "todo.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    data_dir: Path
    storage_path: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(override=False)

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR.expanduser())
        storage_path = _env_path(_k("STORAGE_FILE"), data_dir / STORAGE_FILE_NAME)

        return Settings(
            data_dir=data_dir,
            storage_path=storage_path,
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_optional_path(_k("LOG_FILE")),
        )

    def with_data_dir(self, data_dir: str | Path) -> "Settings":
        """
        Point the settings at another data directory.

        An explicit TODO_STORAGE_FILE still wins over the directory default.
        """
        new_dir = Path(data_dir).expanduser()
        storage_path = self.storage_path
        if storage_path == self.data_dir / STORAGE_FILE_NAME:
            storage_path = new_dir / STORAGE_FILE_NAME
        return replace(self, data_dir=new_dir, storage_path=storage_path)


def get_settings() -> Settings:
    return Settings.from_env()
