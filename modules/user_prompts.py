"""Centralized user prompt utilities for consistent CLI interactions.

This module provides a standardized way to talk to users through the CLI:
color-coded status messages, dividers and headers, and the interactive list
selection prompt used by the playground menu. Windows consoles get ANSI
support via colorama.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TypeVar

import colorama

from modules.constants import (
    EXIT_COMMANDS,
    BACK_COMMANDS,
    ALL_COMMANDS,
    DIVIDER_CHAR,
    DIVIDER_LENGTH,
)

colorama.just_fix_windows_console()

T = TypeVar('T')

_color_enabled = True


# ============================================================================
# ANSI Color Codes
# ============================================================================
class Colors:
    """ANSI color codes for terminal output formatting."""
    HEADER = colorama.Fore.LIGHTMAGENTA_EX
    OKBLUE = colorama.Fore.LIGHTBLUE_EX
    OKCYAN = colorama.Fore.LIGHTCYAN_EX
    OKGREEN = colorama.Fore.LIGHTGREEN_EX
    WARNING = colorama.Fore.LIGHTYELLOW_EX
    FAIL = colorama.Fore.LIGHTRED_EX
    BOLD = colorama.Style.BRIGHT
    DIM = colorama.Style.DIM
    PROMPT = colorama.Style.BRIGHT + colorama.Fore.WHITE
    INFO = colorama.Fore.CYAN
    ENDC = colorama.Style.RESET_ALL


def set_color_enabled(enabled: bool) -> None:
    """Turn ANSI colors on or off for all subsequent output."""
    global _color_enabled
    _color_enabled = enabled


def colorize(message: str, *codes: str) -> str:
    """Wrap ``message`` in the given color codes when colors are enabled."""
    if not _color_enabled or not codes:
        return message
    return f"{''.join(codes)}{message}{Colors.ENDC}"


# ============================================================================
# Output Functions (Print Messages)
# ============================================================================
def print_header(message: str, subtitle: str = "") -> None:
    """Print a prominent header message with optional subtitle.

    Args:
        message: Main header text
        subtitle: Optional subtitle text
    """
    rule = colorize('=' * DIVIDER_LENGTH, Colors.BOLD, Colors.HEADER)
    print(f"\n{rule}")
    print(colorize(f"  {message}", Colors.BOLD, Colors.HEADER))
    if subtitle:
        print(colorize(f"  {subtitle}", Colors.OKCYAN))
    print(f"{rule}\n")


def print_section(message: str) -> None:
    """Print a section divider with message."""
    rule = colorize(DIVIDER_CHAR * DIVIDER_LENGTH, Colors.BOLD, Colors.OKBLUE)
    print(f"\n{rule}")
    print(colorize(message, Colors.BOLD, Colors.OKBLUE))
    print(f"{rule}\n")


def print_success(message: str) -> None:
    """Print a success message."""
    print(colorize(f"✓ {message}", Colors.OKGREEN))


def print_warning(message: str) -> None:
    """Print a warning message."""
    print(colorize(f"⚠ {message}", Colors.WARNING))


def print_error(message: str) -> None:
    """Print an error message."""
    print(colorize(f"✗ {message}", Colors.FAIL))


def print_info(message: str) -> None:
    """Print an info message."""
    print(colorize(f"ℹ {message}", Colors.OKCYAN))


def print_dim(message: str) -> None:
    """Print a dimmed/secondary message."""
    print(colorize(message, Colors.DIM))


def print_separator(char: str = "-", length: int = DIVIDER_LENGTH) -> None:
    """Print a dimmed separator line."""
    print(colorize(char * length, Colors.DIM))


# ============================================================================
# Program Control Functions
# ============================================================================
def exit_program(message: str = "Exiting program. Goodbye!", exit_code: int = 0) -> None:
    """Exit the program gracefully with a message."""
    print(f"\n{colorize(message, Colors.OKCYAN)}\n")
    sys.exit(exit_code)


# ============================================================================
# Interactive Prompt Functions
# ============================================================================
def prompt_text(message: str, allow_exit: bool = True) -> Optional[str]:
    """
    Read one line of input.

    Returns:
        The stripped response, or None if the user typed an exit command.
    """
    response = input(colorize(f"{message}: ", Colors.PROMPT)).strip()
    if allow_exit and response.lower() in EXIT_COMMANDS:
        return None
    return response


def parse_selection(choice_str: str, item_count: int) -> list[int]:
    """
    Parse a selection such as ``"1,3-5"`` into sorted 0-based indices.

    Raises:
        ValueError: If a part is not a number or range within 1..item_count.
    """
    selected_indices: set[int] = set()
    normalized_input = choice_str.replace(";", ",").replace(" ", "")

    for part in normalized_input.split(","):
        if not part:
            continue

        if "-" in part:
            start_str, end_str = part.split("-", 1)
            if not (start_str.isdigit() and end_str.isdigit()):
                raise ValueError(f"Invalid range '{part}'.")
            start, end = int(start_str), int(end_str)
            if not (1 <= start <= end <= item_count):
                raise ValueError(
                    f"Range {part} is invalid. Must be between 1 and {item_count}."
                )
            selected_indices.update(range(start - 1, end))
        elif part.isdigit():
            index = int(part) - 1
            if not (0 <= index < item_count):
                raise ValueError(
                    f"Selection {part} is out of range. Must be between 1 and {item_count}."
                )
            selected_indices.add(index)
        else:
            raise ValueError(
                f"Invalid input: '{part}'. Use numbers, ranges (e.g., 1-3), or 'all'."
            )

    return sorted(selected_indices)


def prompt_selection(
    items: Sequence[T],
    display_func: Callable[[T], str],
    prompt_message: str = "Enter your choice",
    allow_all: bool = True,
    allow_back: bool = False,
    allow_exit: bool = True,
) -> Optional[list[T]]:
    """
    Prompt user to select one or more items from a list.

    Args:
        items: List of items to select from
        display_func: Function to convert item to display string
        prompt_message: Custom prompt message
        allow_all: Allow selecting all items at once
        allow_back: Allow going back (returns None)
        allow_exit: Allow exiting the program

    Returns:
        List of selected items, or None if user chose to go back
    """
    if not items:
        print_warning("No items available to select.")
        return []

    for index, item in enumerate(items, start=1):
        description = display_func(item)
        if len(description) > 75:
            description = description[:72] + "..."
        print(f"  {colorize(f'{index}.', Colors.BOLD)} {description}")

    print(f"\n  {colorize('Selection options:', Colors.INFO)}")
    print(f"    {colorize('• Enter numbers separated by commas (e.g., 1,3,5)', Colors.DIM)}")
    print(f"    {colorize('• Enter a range with a dash (e.g., 1-5)', Colors.DIM)}")
    if allow_all:
        print(f"    {colorize('• Enter all to select everything', Colors.DIM)}")

    nav_hints = []
    if allow_back:
        nav_hints.append("'back' to go back")
    if allow_exit:
        nav_hints.append("'exit' to quit")
    if nav_hints:
        print(f"\n  {colorize(' | '.join(nav_hints), Colors.DIM)}")

    while True:
        try:
            choice_str = input(colorize(f"\n{prompt_message}: ", Colors.PROMPT)).lower().strip()

            if not choice_str:
                print_warning("No selection made. Please make a choice.")
                continue

            if allow_exit and choice_str in EXIT_COMMANDS:
                exit_program()

            if allow_back and choice_str in BACK_COMMANDS:
                return None

            if allow_all and choice_str in ALL_COMMANDS:
                print_success(f"Selected all {len(items)} items.")
                return list(items)

            selected_items = [items[i] for i in parse_selection(choice_str, len(items))]
            if not selected_items:
                print_warning("No valid items selected. Please try again.")
                continue

            if len(selected_items) == 1:
                print_success(f"Selected: {display_func(selected_items[0])}")
            else:
                print_success(f"Selected {len(selected_items)} item(s).")
            return selected_items

        except ValueError as e:
            print_error(f"Invalid selection: {e}")
        except KeyboardInterrupt:
            if allow_exit:
                exit_program("\n\nInterrupted by user.")
            raise


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "print_header",
    "print_section",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_dim",
    "print_separator",
    "parse_selection",
    "prompt_selection",
    "prompt_text",
    "exit_program",
    "set_color_enabled",
    "colorize",
    "Colors",
]
