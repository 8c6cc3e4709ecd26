"""CLI display and user interaction utilities."""

from __future__ import annotations

import collections.abc
from pathlib import Path

from cli.processing import load_sections
from modules.constants import OUT_OF_RANGE_MESSAGE
from modules.error_handler import ConfigurationError, handle_recoverable_error
from modules.logger import setup_logger
from modules.roman_numerals import convert, roman_to_int
from modules.types import ListSection, ListSpec
from modules.user_prompts import (
    Colors,
    colorize,
    print_header,
    print_section,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_dim,
    print_separator,
    prompt_selection,
    prompt_text,
)
from processors.text_renderer import TextRenderer

logger = setup_logger(__name__)

MENU_PREVIEW = "Preview lists"
MENU_CONVERT = "Roman numeral converter"
MENU_OPTIONS = (MENU_PREVIEW, MENU_CONVERT)


def display_list_catalog(
    specs: collections.abc.Sequence[ListSpec],
    source: Path | None = None,
) -> None:
    """Print a numbered overview of the configured lists."""
    print_section("Configured Lists")
    if source is not None:
        print_dim(f"  Source: {source}")
    if not specs:
        print_warning("No lists are configured.")
        return

    for index, spec in enumerate(specs, start=1):
        details = [spec.kind.value, spec.container.value]
        if spec.lead_icon and spec.kind.value.endswith("bullet"):
            details.append(f"marker {spec.lead_icon}")
        if spec.prefix:
            details.append(f"prefix {spec.prefix!r}")
        print(f"  {colorize(f'{index}.', Colors.BOLD)} {spec.title} "
              f"{colorize('(' + ', '.join(details) + ')', Colors.DIM)}")


def display_sections(
    sections: collections.abc.Sequence[ListSection],
    renderer: TextRenderer | None = None,
) -> None:
    """Print sections as boxed text."""
    renderer = renderer or TextRenderer()
    print()
    print(renderer.render(sections))
    print()


def describe_conversion(entry: str) -> str:
    """Convert one line of converter input in whichever direction it reads.

    Integers become numerals and numerals become integers.

    Raises:
        ValueError: If the entry is neither an integer nor a Roman numeral.
    """
    text = entry.strip()
    try:
        number = int(text)
    except ValueError:
        return f"{text.upper()} = {roman_to_int(text)}"

    result = convert(number)
    if result == OUT_OF_RANGE_MESSAGE:
        raise ValueError(result)
    return f"{number} = {result}"


def run_converter_loop() -> None:
    """Read numbers or numerals until the user types an exit command."""
    print_section("Roman Numeral Converter")
    print_dim("  Enter an integer (1-3999) or a Roman numeral. Type 'q' to return.")

    while True:
        entry = prompt_text("\nNumber or numeral")
        if entry is None:
            return
        if not entry:
            continue
        try:
            print_success(describe_conversion(entry))
        except ValueError as exc:
            print_error(str(exc))


def run_preview_menu(lists_path: str | None = None) -> None:
    try:
        sections = load_sections(lists_path)
    except ConfigurationError as exc:
        handle_recoverable_error(exc, "Loading lists")
        return

    print_section("List Preview")
    selected = prompt_selection(
        items=sections,
        display_func=lambda section: section.display_label(),
        prompt_message="Select lists to preview",
        allow_all=True,
        allow_back=True,
        allow_exit=False,
    )
    if selected:
        display_sections(selected)


def run_interactive(lists_path: str | None = None) -> int:
    """Run the interactive playground until the user exits."""
    print_header("LIST PLAYGROUND", "Bullet, numbered and Roman numeral list styles")

    while True:
        print_section("Main Menu")
        choice = prompt_selection(
            items=MENU_OPTIONS,
            display_func=str,
            prompt_message="Choose an option",
            allow_all=False,
            allow_back=False,
            allow_exit=True,
        )
        if not choice:
            continue

        # Several entries (e.g. "1-2") run in menu order
        for option in choice:
            logger.debug("Menu choice: %s", option)
            if option == MENU_PREVIEW:
                run_preview_menu(lists_path)
            else:
                run_converter_loop()

        print_separator()
        print_info("Back at the main menu. Type 'exit' to quit.")


__all__ = [
    "display_list_catalog",
    "display_sections",
    "describe_conversion",
    "run_converter_loop",
    "run_preview_menu",
    "run_interactive",
]
