"""Logging configuration for the XSPF tools.

Handlers are attached to the ``xspf_tools`` logger rather than the root
logger, so embedding applications keep control of their own logging.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "xspf_tools"

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(location)-28s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(location)-28s %(message)s"

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET = "\033[0m"


class LocationFormatter(logging.Formatter):
    """Formatter exposing ``%(location)s`` as "file.py:line"."""

    def format(self, record: logging.LogRecord) -> str:
        record.location = f"{record.filename}:{record.lineno}"
        return super().format(record)


class ColoredFormatter(LocationFormatter):
    """Location formatter that colors the padded level name."""

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = LEVEL_COLORS.get(levelname, RESET)
        record.levelname = f"{color}{levelname:<8}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_package_logger() -> logging.Logger:
    """Return the logger every ``xspf_tools`` module logs through."""
    return logging.getLogger(PACKAGE_LOGGER)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True,
    max_file_size: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the package logger.

    Console records go to stderr so that track lists and JSON written to
    stdout stay clean. Calling this again replaces the previous handlers.

    Args:
        log_level: Level name; unknown names fall back to INFO
        log_file: Optional path of a rotating log file
        console_output: Whether to log to stderr
        max_file_size: Size in bytes before the log file rotates
        backup_count: Number of rotated files to keep

    Returns:
        The configured ``xspf_tools`` logger
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    package_logger = get_package_logger()
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)

    handlers = []
    if console_output:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        handlers.append(console)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_file_size, backupCount=backup_count
        )
        rotating.setFormatter(LocationFormatter(FILE_FORMAT))
        handlers.append(rotating)

    for handler in handlers:
        handler.setLevel(level)
        package_logger.addHandler(handler)

    package_logger.debug(
        "Logging at %s%s",
        logging.getLevelName(level),
        f" to {log_file}" if log_file else "",
    )
    return package_logger
