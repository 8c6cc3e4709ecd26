"""Command handlers for the CLI: rendering lists and converting numerals."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Sequence

from core.list_builder import build_sections
from modules import app_config as config
from modules.config_loader import ConfigLoader, get_config_loader
from modules.constants import OUT_OF_RANGE_MESSAGE
from modules.error_handler import RomanNumeralRangeError
from modules.logger import setup_logger
from modules.roman_numerals import convert, int_to_roman, roman_to_int
from modules.types import ListSection, ListSpec
from modules.user_prompts import parse_selection, print_error, print_success
from processors.docx_writer import create_docx_document
from processors.markdown_writer import create_markdown_document
from processors.text_renderer import TextRenderer, write_text_document

logger = setup_logger(__name__)

OUTPUT_EXTENSIONS = {
    "text": ".txt",
    "docx": ".docx",
    "markdown": ".md",
}


def _get_loader(lists_path: str | None) -> ConfigLoader:
    return get_config_loader(Path(lists_path) if lists_path else None)


def select_specs(specs: Sequence[ListSpec], selection: str) -> List[ListSpec]:
    """Pick lists by 1-based numbers and ranges, e.g. ``"1,3-5"``.

    Raises:
        ValueError: If ``selection`` does not name valid list numbers.
    """
    return [specs[i] for i in parse_selection(selection, len(specs))]


def load_sections(lists_path: str | None = None, select: str | None = None) -> List[ListSection]:
    """Build the configured list sections, optionally only a selection of them.

    Raises:
        ConfigurationError: If the list definitions are invalid.
        ValueError: If ``select`` does not name valid list numbers.
    """
    loader = _get_loader(lists_path)
    specs = loader.get_list_specs()
    if select:
        specs = select_specs(specs, select)
    return build_sections(specs, loader.get_sample_items())


def resolve_output_path(output_format: str, output: str | None = None) -> Path:
    """Return the file path for a rendered document.

    ``output`` may name a file or an existing directory. Without it, the
    configured output folder and file stem are used.
    """
    extension = OUTPUT_EXTENSIONS[output_format]
    if output is None:
        return Path(config.OUTPUT_FOLDER_PATH) / f"{config.OUTPUT_STEM}{extension}"

    path = Path(output)
    if path.is_dir():
        return path / f"{config.OUTPUT_STEM}{extension}"
    return path


def run_render(args: argparse.Namespace) -> int:
    output_format = args.output_format or config.OUTPUT_FORMAT
    loader = _get_loader(args.lists_path)
    specs = loader.get_list_specs()
    if args.select:
        try:
            specs = select_specs(specs, args.select)
        except ValueError as exc:
            print_error(f"Invalid list selection: {exc}")
            return 1
    sections = build_sections(specs, loader.get_sample_items())

    logger.info("Rendering %s list(s) as %s", len(sections), output_format)
    renderer = TextRenderer(line_width=args.width)

    if output_format == "text" and args.output is None:
        print(renderer.render(sections))
        return 0

    output_path = resolve_output_path(output_format, args.output)
    if output_format == "docx":
        create_docx_document(sections, output_path)
    elif output_format == "markdown":
        create_markdown_document(sections, output_path)
    else:
        write_text_document(sections, output_path, renderer)

    print_success(f"Saved {len(sections)} list(s) to {output_path}")
    return 0


def run_roman(args: argparse.Namespace) -> int:
    """Print the Roman numeral for each number, one per line.

    Out-of-range numbers print the range message, or stop with exit code 1
    when ``--strict`` is given.
    """
    for number in args.numbers:
        if args.strict:
            try:
                print(int_to_roman(number, lowercase=args.lowercase))
            except RomanNumeralRangeError as exc:
                print_error(f"{exc.value}: {exc}")
                return 1
            continue

        result = convert(number)
        print(result.lower() if args.lowercase and result != OUT_OF_RANGE_MESSAGE else result)
    return 0


def run_decode(args: argparse.Namespace) -> int:
    exit_code = 0
    for numeral in args.numerals:
        try:
            print(roman_to_int(numeral))
        except ValueError as exc:
            print_error(str(exc))
            exit_code = 1
    return exit_code


def run_lists(args: argparse.Namespace) -> int:
    from cli.display import display_list_catalog

    loader = _get_loader(args.lists_path)
    display_list_catalog(loader.get_list_specs(), loader.lists_path)
    return 0


__all__ = [
    "OUTPUT_EXTENSIONS",
    "select_specs",
    "load_sections",
    "resolve_output_path",
    "run_render",
    "run_roman",
    "run_decode",
    "run_lists",
]
