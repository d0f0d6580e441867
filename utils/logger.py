"""Logging configuration for tTime."""
import logging
import sys
from pathlib import Path
from typing import Optional

from config import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(level: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger.

    Writes to log_file when given (the TUI owns the terminal, so the app
    logs to a file), otherwise to stderr. Existing handlers are cleared
    first so repeated calls don't duplicate output.

    Args:
        level: Log level name, defaults to config.log_level
        log_file: Optional file to log to instead of stderr
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level or config.log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    # Reduce verbosity of third-party libraries
    logging.getLogger("textual").setLevel(logging.WARNING)
