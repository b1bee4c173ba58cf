"""
Logging setup for applications embedding the layout engine.

Library modules only create ``logging.getLogger(__name__)`` loggers under the
``mediaviz`` namespace; handlers are attached here, once, by the application.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the ``mediaviz`` logger.

    Parameters
    ----------
    level:
        Logging level applied to the logger and every handler.
    log_file:
        Optional path; when given, records are also written there
        (overwritten on each call).

    Returns
    -------
    logging.Logger
        The configured ``mediaviz`` logger.
    """
    logger = logging.getLogger("mediaviz")
    logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured at level {logging.getLevelName(level)}")
    return logger
