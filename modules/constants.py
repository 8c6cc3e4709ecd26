"""Centralized constants for ListPlayground.

This module provides a single source of truth for all default values,
constants, and configuration defaults used throughout the application.
"""

from __future__ import annotations

# ============================================================================
# Roman Numeral Range
# ============================================================================
MIN_ROMAN_VALUE = 1
MAX_ROMAN_VALUE = 3999
OUT_OF_RANGE_MESSAGE = "Number must be between 1 and 3999"

# ============================================================================
# List Style Defaults (points)
# ============================================================================
DEFAULT_BULLET = "•"
HAPPY_FACE = "😀"
DEFAULT_INDENTATION_PT = 25.0
RIGHT_TAB_GUTTER_PT = 10.0
DEFAULT_TAB_INTERVAL_PT = 28.0
DEFAULT_CONTAINER_PADDING_PT = 16.0
DEFAULT_ITEM_SPACING_PT = 16.0

SAMPLE_ITEMS = [
    "This is list item 1. Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec vitae.",
    "This is list item 2. Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec vitae.",
    "This is list item 3. Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec vitae.",
    "This is list item 4. Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec vitae.",
]

# ============================================================================
# Output Defaults
# ============================================================================
OUTPUT_FORMATS = ("text", "docx", "markdown")
DEFAULT_OUTPUT_FORMAT = "text"
DEFAULT_OUTPUT_FOLDER = "output"
DEFAULT_OUTPUT_STEM = "list_playground"
DEFAULT_LINE_WIDTH = 72
MIN_LINE_WIDTH = 30
DEFAULT_POINTS_PER_COLUMN = 5.0
# Points of system spacing between consecutive lists
SYSTEM_SPACING_PT = 16.0
# Points represented by one rendered text line
LINE_HEIGHT_PT = 16.0
BOX_BORDER_CHARS = ("┌", "┐", "└", "┘", "─", "│")
STACK_BORDER_CHARS = ("╭", "╮", "╰", "╯", "─", "│")

# ============================================================================
# Document Formatting Constants
# ============================================================================
TITLE_HEADING_LEVEL = 0
LIST_HEADING_LEVEL = 1
TITLE_SPACE_AFTER_PT = 6
LIST_TITLE_SPACE_BEFORE_PT = 12
LIST_TITLE_SPACE_AFTER_PT = 4
CONTAINER_TABLE_STYLE = "Table Grid"

# ============================================================================
# CLI Constants
# ============================================================================
EXIT_COMMANDS = frozenset({'exit', 'quit', 'q'})
BACK_COMMANDS = frozenset({'back', 'b'})
ALL_COMMANDS = frozenset({'all', 'a'})
DIVIDER_CHAR = '─'
DIVIDER_LENGTH = 70

# ============================================================================
# Public API
# ============================================================================
__all__ = [
    # Roman numerals
    "MIN_ROMAN_VALUE",
    "MAX_ROMAN_VALUE",
    "OUT_OF_RANGE_MESSAGE",
    # List styles
    "DEFAULT_BULLET",
    "HAPPY_FACE",
    "DEFAULT_INDENTATION_PT",
    "RIGHT_TAB_GUTTER_PT",
    "DEFAULT_TAB_INTERVAL_PT",
    "DEFAULT_CONTAINER_PADDING_PT",
    "DEFAULT_ITEM_SPACING_PT",
    "SAMPLE_ITEMS",
    # Output
    "OUTPUT_FORMATS",
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_OUTPUT_FOLDER",
    "DEFAULT_OUTPUT_STEM",
    "DEFAULT_LINE_WIDTH",
    "MIN_LINE_WIDTH",
    "DEFAULT_POINTS_PER_COLUMN",
    "SYSTEM_SPACING_PT",
    "LINE_HEIGHT_PT",
    "BOX_BORDER_CHARS",
    "STACK_BORDER_CHARS",
    # Document formatting
    "TITLE_HEADING_LEVEL",
    "LIST_HEADING_LEVEL",
    "TITLE_SPACE_AFTER_PT",
    "LIST_TITLE_SPACE_BEFORE_PT",
    "LIST_TITLE_SPACE_AFTER_PT",
    "CONTAINER_TABLE_STYLE",
    # CLI
    "EXIT_COMMANDS",
    "BACK_COMMANDS",
    "ALL_COMMANDS",
    "DIVIDER_CHAR",
    "DIVIDER_LENGTH",
]
