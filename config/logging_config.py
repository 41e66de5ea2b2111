"""Logging configuration.

Sets up logging to the console and, when a log directory is configured,
to a file named after the current date.
"""

import logging
from datetime import date
from pathlib import Path

from config import settings

LOGGER_NAME = "category_manager"


def setup_logging(level: str | None = None, log_dir: str | None = None) -> logging.Logger:
    """Configure the root logger used by every module.

    Args:
        level: Log level name, defaults to LOG_LEVEL.
        log_dir: Directory for the dated log file, defaults to LOG_DIR.
            An empty string disables file logging.

    Returns:
        The application logger.
    """
    level = level or settings.LOG_LEVEL
    log_dir = settings.LOG_DIR if log_dir is None else log_dir

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers (in case this is called multiple times)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_file_path = Path(log_dir) / f"{LOGGER_NAME}-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    return logging.getLogger(LOGGER_NAME)
