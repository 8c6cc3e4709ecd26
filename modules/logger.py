"""Logging configuration and setup utilities.

Every module obtains its logger through setup_logger(__name__). Console output
is kept to warnings and errors so rendered lists stay readable; the CLI can
raise verbosity for all application loggers at once or mirror them to a file.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

# Public API
__all__ = [
    "setup_logger",
    "set_log_level",
    "setup_console_handler",
    "setup_file_handler",
    "configure_application_logging",
]

# Constants
DEFAULT_LOG_LEVEL = logging.INFO
USER_LOG_LEVEL = logging.WARNING  # Only show warnings and errors to users by default
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"
SIMPLE_FORMAT = "[%(levelname)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names of loggers created through setup_logger()
_APPLICATION_LOGGERS: set[str] = set()


def setup_logger(
    name: str,
    level: int = DEFAULT_LOG_LEVEL,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Set up a standardized logger for the application.

    Args:
        name: Name for the logger (typically __name__ from the calling module)
        level: Logging level of the logger itself (default: INFO)
        format_string: Custom format string for console messages
        date_format: Custom date format for timestamps
        verbose: If True, show all logs on console; if False, only warnings/errors

    Returns:
        Configured Logger instance

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.info("Only visible with --verbose or in the log file")
        >>> logger.warning("Always visible on the console")
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level if verbose else USER_LOG_LEVEL)
        console_handler.setFormatter(
            logging.Formatter(
                fmt=format_string or SIMPLE_FORMAT,
                datefmt=date_format or DEFAULT_DATE_FORMAT,
            )
        )

        logger.addHandler(console_handler)
        logger.setLevel(level)
        logger.propagate = False

    _APPLICATION_LOGGERS.add(name)
    return logger


def setup_console_handler(
    logger: logging.Logger,
    level: int = USER_LOG_LEVEL,
    simple_format: bool = True,
) -> None:
    """
    Replace the stderr console handler of a logger.

    Args:
        logger: Logger instance to modify
        level: Logging level for console output
        simple_format: If True, use simple format; otherwise detailed format
    """
    for handler in logger.handlers[:]:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) is sys.stderr:
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    format_str = SIMPLE_FORMAT if simple_format else DETAILED_FORMAT
    console_handler.setFormatter(logging.Formatter(fmt=format_str, datefmt=DEFAULT_DATE_FORMAT))

    logger.addHandler(console_handler)


def setup_file_handler(
    logger: logging.Logger,
    log_file_path: str,
    level: int = logging.DEBUG,
) -> None:
    """
    Add file handler to logger for detailed logging.

    Args:
        logger: Logger instance to modify
        log_file_path: Path to log file
        level: Logging level for file output (default: DEBUG for full details)
    """
    file_handler = logging.FileHandler(log_file_path, mode='a', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    )

    logger.addHandler(file_handler)


def set_log_level(logger: logging.Logger, level: int) -> None:
    """
    Change the log level of an existing logger and all of its handlers.

    Args:
        logger: The logger instance to modify
        level: New logging level (e.g., logging.DEBUG, logging.INFO)
    """
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def configure_application_logging(
    verbose: bool = False,
    log_file_path: Optional[str] = None,
) -> None:
    """
    Apply CLI logging options to every logger created by setup_logger().

    Args:
        verbose: Show DEBUG output on the console
        log_file_path: Optional file that receives detailed logs from all modules
    """
    for name in sorted(_APPLICATION_LOGGERS):
        logger = logging.getLogger(name)
        if verbose:
            set_log_level(logger, logging.DEBUG)
        if log_file_path:
            already_attached = any(
                isinstance(handler, logging.FileHandler)
                and handler.baseFilename == os.path.abspath(log_file_path)
                for handler in logger.handlers
            )
            if not already_attached:
                logger.setLevel(min(logger.level, logging.DEBUG))
                setup_file_handler(logger, log_file_path)
