# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs one command and prints its reply.
Every handled error is printed; the exit status is always 0.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import StartupError, create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()
    setup_logging(log_dir=settings.log_dir, console_level=settings.log_level)

    logger.debug("Starting %s argv=%r", settings.app_name, argv)

    try:
        state = create_initial_state(settings=settings)
    except StartupError as e:
        logger.debug("Startup aborted: %s", e)
        print(f"Error: {e}")
        return

    print(command_registry.handle(state, argv))


if __name__ == "__main__":
    main()
