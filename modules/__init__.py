"""Modules package for ListPlayground.

This package contains the Roman numeral converter and the shared utility
modules for configuration, logging, types and error handling.
"""

__all__ = [
    "app_config",
    "config_loader",
    "constants",
    "error_handler",
    "logger",
    "roman_numerals",
    "types",
    "user_prompts",
]
