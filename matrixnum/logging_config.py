"""
Opt-in log output for applications embedding matrixnum.

Modules in the package only create loggers under the 'matrixnum'
namespace; nothing is printed until an application calls setup_logging().
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = 'matrixnum'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _release_handlers(logger: logging.Logger) -> None:
    """Detach and close every handler installed on logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Route 'matrixnum' records to stdout and, optionally, a file.

    Calling this again replaces the previous configuration; handlers from
    the earlier call are closed, including any open log file.

    Args:
        level: Threshold for the namespace logger and its handlers
        log_file: Path of a log file to (over)write, or None for stdout only

    Returns:
        The 'matrixnum' logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    _release_handlers(logger)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger
