"""Logging configuration for the Six Cities offer service.

All ``sixcities.*`` loggers route through the handlers attached here.
Console output follows ``Settings.LOG_LEVEL``; when ``LOG_TO_FILE`` is
enabled each launch also writes a timestamped file under ``logs/``
(e.g. ``logs/run_20260214_153045.log``) that captures DEBUG and above.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from sixcities.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "sixcities"


def setup_logging(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> Optional[Path]:
    """Initialise the root ``sixcities`` logger.

    Args:
        level: Console log level name (defaults to ``Settings.LOG_LEVEL``)
        log_to_file: Also write a per-run log file (defaults to ``Settings.LOG_TO_FILE``)

    Returns:
        The path of the log file for this run, or ``None`` when file logging is off.
    """
    level = (level or Settings.LOG_LEVEL).upper()
    if log_to_file is None:
        log_to_file = Settings.LOG_TO_FILE

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return None

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)

    log_file = None
    if log_to_file:
        logs_dir: Path = Settings.LOGS_DIR
        logs_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = logs_dir / f"run_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(file_handler)

    root_logger.info("Logging initialised (level=%s, file=%s)", level, log_file)

    return log_file


def get_logger(area: str) -> logging.Logger:
    """Return a child of the project logger, e.g. ``sixcities.offers``."""
    return logging.getLogger(f"{LOGGER_NAME}.{area}")
