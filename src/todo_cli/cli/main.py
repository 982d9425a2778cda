# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging from settings, then hands argv to the typer app.
Usage errors (unknown command, missing argument) exit with code 1 like every
other failure.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..logging_setup import level_from_name, setup_logging
from .commands import app

logger = logging.getLogger(__name__)

USAGE_ERROR_EXIT_CODE = 2


def _exit_code(code: object) -> int:
    if code is None:
        return 0
    if not isinstance(code, int):
        # sys.exit("message") prints the message and means failure.
        return 1
    if code == USAGE_ERROR_EXIT_CODE:
        return 1
    return code


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(console_level=level_from_name(settings.log_level), log_file=settings.log_file)

    logger.debug("todo invoked with argv=%s", sys.argv[1:] if argv is None else argv)

    # The app reports its own errors and always ends in SystemExit.
    try:
        app(args=argv, prog_name="todo", obj=settings)
    except SystemExit as exc:
        return _exit_code(exc.code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
