"""
List playground: preview list styles and convert Roman numerals.

This script:
1. Builds plain, bulleted, numbered and Roman numeral lists from lists.yaml
2. Renders them as boxed text, a DOCX document or Markdown
3. Converts integers to Roman numerals and back
4. Offers an interactive menu when started without a command
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Sequence

from cli.argument_parser import setup_argparse
from cli.display import run_interactive
from cli.processing import run_decode, run_lists, run_render, run_roman
from modules import app_config as config
from modules.error_handler import PlaygroundError, handle_critical_error
from modules.logger import configure_application_logging, setup_logger
from modules.user_prompts import exit_program, set_color_enabled

logger = setup_logger(__name__)


def _run_interactive(args: argparse.Namespace) -> int:
    return run_interactive(args.lists_path)


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "render": run_render,
    "roman": run_roman,
    "decode": run_decode,
    "lists": run_lists,
    "interactive": _run_interactive,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run the requested command.

    Returns:
        Process exit code.
    """
    args = setup_argparse(argv)
    configure_application_logging(verbose=args.verbose, log_file_path=args.log_file)
    set_color_enabled(config.USE_COLOR and not args.no_color)

    logger.info("Running command: %s", args.command)
    try:
        return COMMAND_HANDLERS[args.command](args)
    except PlaygroundError as exc:
        handle_critical_error(exc, f"'{args.command}' command", exit_on_error=False)
        return 1


def cli() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user (Ctrl+C). Exiting.")
        exit_program("\nInterrupted by user.")


if __name__ == "__main__":
    cli()
