"""Logging setup for applications that embed the calculator.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
helper attaches a handler to the ``apu_savings`` logger for the dashboard.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "apu_savings"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_format: str | None = None,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Calling it again (Streamlit reruns the page script) replaces the
    handlers instead of stacking duplicates.

    Raises ValueError for an unknown level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    formatter = logging.Formatter(log_format or DEFAULT_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
