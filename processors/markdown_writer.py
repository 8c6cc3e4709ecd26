"""Markdown document creation for ListPlayground."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import List, Sequence

from modules.constants import DEFAULT_BULLET
from modules.error_handler import RenderError
from modules.logger import setup_logger
from modules.types import FormattedItem, ListSection, ListStyleKind

logger = setup_logger(__name__)

DOCUMENT_TITLE = "List Playground"

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]<>#|])")
_ORDINAL_MARKER = re.compile(r"^\d+\.$")
_LEADING_ORDINAL = re.compile(r"^(\s*\d+)([.)])")
_LEADING_BLOCK = re.compile(r"^(\s*)([-+>])")


def escape_markdown(text: str) -> str:
    """Escape characters that would otherwise start inline Markdown formatting."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def escape_paragraph(text: str) -> str:
    """Escape inline formatting and any list or quote syntax at the line start."""
    text = _LEADING_ORDINAL.sub(r"\1\\\2", escape_markdown(text))
    return _LEADING_BLOCK.sub(r"\1\\\2", text)


def _escape_marker(marker: str) -> str:
    # A period after digits would start an ordered list
    return escape_markdown(marker).replace(".", "\\.")


def split_marker(item: FormattedItem) -> tuple[str, str]:
    """Split a label into its marker and body text."""
    parts = [part for part in item.text.split("\t") if part]
    if len(parts) < 2:
        return "", item.text.replace("\t", " ").strip()
    return parts[0], " ".join(parts[1:])


def _format_section_lines(section: ListSection) -> List[str]:
    lines: List[str] = []
    for item in section.items:
        marker, body = split_marker(item)
        body = escape_paragraph(body)

        if section.kind in (ListStyleKind.BULLET, ListStyleKind.ALIGNED_BULLET) and marker == DEFAULT_BULLET:
            lines.append(f"- {body}")
        elif section.kind is ListStyleKind.NUMERIC and _ORDINAL_MARKER.match(marker):
            lines.append(f"{marker} {body}")
        elif marker:
            lines.append(f"{_escape_marker(marker)} {body}")
            lines.append("")
        else:
            lines.append(body)
            lines.append("")

    while lines and not lines[-1]:
        lines.pop()
    return lines


def create_markdown_document(
    sections: Sequence[ListSection],
    output_path: Path,
    title: str = DOCUMENT_TITLE,
) -> Path:
    """Create a Markdown document from list sections.

    Bullet lists using the default bullet become Markdown bullet lists and
    unprefixed numeric lists become ordered lists. Other markers (emoji,
    prefixed numbers, Roman numerals) are kept as paragraphs starting with the
    marker, because Markdown has no syntax for them.

    Args:
        sections: Built list sections.
        output_path: Path where the markdown file will be written.
        title: Document title.
    """
    lines: List[str] = [f"# {escape_markdown(title)}", ""]
    lines.append(
        f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} | Lists: {len(sections)}*"
    )
    lines.append("")

    for section in sections:
        lines.append(f"## {escape_markdown(section.title)}")
        lines.append("")
        lines.extend(_format_section_lines(section))
        lines.append("")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text("\n".join(lines), encoding="utf-8")
    except OSError as exc:
        raise RenderError(f"Could not write Markdown document to {output_path}: {exc}") from exc

    logger.info("Markdown document saved to %s", output_path)
    return output_path


__all__ = [
    "escape_markdown",
    "escape_paragraph",
    "split_marker",
    "create_markdown_document",
]
