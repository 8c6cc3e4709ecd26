"""CLI argument parsing for the list playground."""

from __future__ import annotations

import argparse
from typing import Sequence

from modules.constants import OUTPUT_FORMATS, MIN_LINE_WIDTH
from modules.logger import setup_logger

logger = setup_logger(__name__)

COMMANDS = ("render", "roman", "decode", "lists", "interactive")


def _positive_int(value: str) -> int:
    """Argparse type validator for positive integers."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return parsed


def _line_width(value: str) -> int:
    """Argparse type validator for the rendered line width."""
    parsed = _positive_int(value)
    if parsed < MIN_LINE_WIDTH:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_LINE_WIDTH}")
    return parsed


def _integer(value: str) -> int:
    """Argparse type validator for any integer, including negatives."""
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="list-playground",
        description="Preview plain, bulleted, numbered and Roman numeral list styles, "
        "and convert numbers to and from Roman numerals.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on the console.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Append detailed logs to this file.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored console output.",
    )
    parser.add_argument(
        "--lists",
        type=str,
        default=None,
        dest="lists_path",
        help="YAML file with list definitions (defaults to modules/config/lists.yaml).",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    render_parser = subparsers.add_parser(
        "render",
        help="Render the configured lists as text, DOCX or Markdown.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    render_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        dest="output_format",
        help="Output format. Overrides output.format in app.yaml.",
    )
    render_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file or directory. Text output goes to stdout when omitted.",
    )
    render_parser.add_argument(
        "--width",
        type=_line_width,
        default=None,
        help="Line width for text output. Overrides text_rendering.line_width in app.yaml.",
    )
    render_parser.add_argument(
        "--select",
        type=str,
        default=None,
        help="Render only some lists, by number (e.g., '1,3,5') or range (e.g., '2-4').",
    )

    roman_parser = subparsers.add_parser(
        "roman",
        help="Convert integers to Roman numerals.",
    )
    roman_parser.add_argument("numbers", metavar="INTEGER", type=_integer, nargs="+")
    roman_parser.add_argument(
        "--lowercase",
        action="store_true",
        help="Print lowercase numerals.",
    )
    roman_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on numbers outside 1-3999 instead of printing a message.",
    )

    decode_parser = subparsers.add_parser(
        "decode",
        help="Convert Roman numerals to integers.",
    )
    decode_parser.add_argument("numerals", metavar="NUMERAL", nargs="+")

    subparsers.add_parser("lists", help="Show the configured lists.")
    subparsers.add_parser("interactive", help="Start the interactive playground (default).")

    return parser


def setup_argparse(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; no command means interactive mode."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        args.command = "interactive"
    logger.debug("Parsed arguments: %s", vars(args))
    return args


__all__ = ["COMMANDS", "build_parser", "setup_argparse"]
