# src/tasker_pro/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "tasker_pro"
LOG_FILE_NAME = "tasker.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console filter:
    - tasker_pro records pass (the handler level still applies)
    - captured warnings.warn(...) ('py.warnings') show from WARNING up
    - everything else only from `third_party_level` up
    """

    def __init__(self, third_party_level: int = logging.ERROR) -> None:
        super().__init__()
        self.third_party_level = third_party_level

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == APP_LOGGER or name.startswith(APP_LOGGER + "."):
            return True
        if name == "py.warnings":
            return record.levelno >= logging.WARNING
        return record.levelno >= self.third_party_level


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasker",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    third_party_level: int = logging.ERROR,
) -> Path:
    """
    Install a filtered stderr handler and a full file handler on the root logger.

    Call this once at startup; earlier root handlers are replaced.
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter(third_party_level))
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
