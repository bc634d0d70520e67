# src/tasker_pro/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
Tasks are kept in memory only and are gone when the process exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        logger.info(
            "Shutting down with %d task(s) in memory.", state.task_store.count_tasks()
        )
        logger.info("Bye.")


if __name__ == "__main__":
    main()
