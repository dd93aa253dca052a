"""
module askterm.utils.logging

Contains setup_logging(), which routes the askterm logger hierarchy to a log
file. Records are never written to the console as the console is where the
prompts themselves are drawn
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs

from .. import constants

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = f"{constants.APPLICATION_NAME}.log"


def get_log_directory() -> Path:
    """Return the per-user directory askterm writes its log file to."""
    return Path(
        platformdirs.user_log_dir(
            appname=constants.APPLICATION_NAME,
            version=constants.APPLICATION_VERSION,
        )
    )


def setup_logging(level: str = "WARNING", log_dir: Optional[Path] = None) -> Path:
    """
    Attach a file handler to the askterm logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the log file. Defaults to the user log dir

    Returns:
        Path to the log file being written to
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if log_dir is None:
        log_dir = get_log_directory()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    askterm_logger = logging.getLogger(constants.APPLICATION_NAME)
    for handler in askterm_logger.handlers[:]:
        askterm_logger.removeHandler(handler)
        handler.close()

    askterm_logger.setLevel(log_level)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    askterm_logger.addHandler(file_handler)

    # keep records away from the root logger's console handlers
    askterm_logger.propagate = False

    askterm_logger.debug("Logging to %s at level %s", log_file, level.upper())
    return log_file
