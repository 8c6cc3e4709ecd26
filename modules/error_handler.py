"""Centralized error handling and reporting utilities.

This module provides the application's exception hierarchy together with
consistent logging and user-facing reporting of failures.
"""

from __future__ import annotations

import sys
import traceback
from typing import Any

from modules.constants import OUT_OF_RANGE_MESSAGE
from modules.logger import setup_logger
from modules.user_prompts import print_error, print_warning

logger = setup_logger(__name__)


# ============================================================================
# Error Classification
# ============================================================================
class PlaygroundError(Exception):
    """Base exception for list playground errors."""


class ConfigurationError(PlaygroundError):
    """Exception for configuration-related errors."""


class RenderError(PlaygroundError):
    """Exception raised when a list cannot be written to its output format."""


class RomanNumeralRangeError(PlaygroundError, ValueError):
    """Raised when a number has no Roman numeral representation.

    The message is the same text the lenient converter returns, and the
    rejected number is kept on ``value``.
    """

    def __init__(self, value: int, message: str = OUT_OF_RANGE_MESSAGE) -> None:
        super().__init__(message)
        self.value = value


# ============================================================================
# Error Handlers
# ============================================================================
def handle_critical_error(
    error: Exception,
    context: str,
    exit_on_error: bool = False,
    show_user_message: bool = True,
) -> None:
    """Handle critical errors with consistent logging and user feedback."""
    error_msg = f"Critical error in {context}: {error}"
    logger.exception(error_msg)

    if show_user_message:
        print_error(f"Critical error: {context} failed. Check logs for details.")

    if exit_on_error:
        sys.exit(1)


def handle_recoverable_error(
    error: Exception,
    context: str,
    show_user_message: bool = True,
) -> None:
    """Handle recoverable errors with logging and optional user feedback."""
    logger.warning(f"Recoverable error in {context}: {error}")
    logger.debug(traceback.format_exc())

    if show_user_message:
        print_warning(f"{context}: {error}")


# ============================================================================
# Validation Helpers
# ============================================================================
def validate_config_value(
    value: Any,
    expected_type: type | tuple[type, ...],
    name: str,
    allow_none: bool = False,
) -> None:
    """Validate a configuration value, raising ConfigurationError on mismatch."""
    if value is None and allow_none:
        return

    expected = (
        " or ".join(t.__name__ for t in expected_type)
        if isinstance(expected_type, tuple)
        else expected_type.__name__
    )

    # bool is an int subclass; never accept it for numeric settings
    if isinstance(value, bool) and expected_type is not bool:
        raise ConfigurationError(
            f"Invalid configuration for '{name}': expected {expected}, got bool"
        )

    if not isinstance(value, expected_type):
        raise ConfigurationError(
            f"Invalid configuration for '{name}': expected {expected}, "
            f"got {type(value).__name__}"
        )


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "PlaygroundError",
    "ConfigurationError",
    "RenderError",
    "RomanNumeralRangeError",
    "handle_critical_error",
    "handle_recoverable_error",
    "validate_config_value",
]
