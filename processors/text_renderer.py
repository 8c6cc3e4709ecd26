"""Monospace text rendering of list sections.

Paragraph styles are measured in points and mapped onto terminal columns:

- A styled item's first line starts at its first-line indent and continuation
  lines start at the head indent, which gives the hanging indent.
- A tab advances to the first tab stop strictly right of the cursor. Text
  before a right-aligned stop ends at that stop. Past the last stop, and in
  unstyled labels, tabs advance to the next multiple of the default tab
  interval.
- Only the last tab-separated segment (the item body) is word-wrapped.

Wide characters such as emoji occupy two columns.
"""

from __future__ import annotations

import unicodedata
from pathlib import Path
from typing import Iterable, List, Sequence

from modules import app_config as config
from modules.constants import (
    BOX_BORDER_CHARS,
    DEFAULT_TAB_INTERVAL_PT,
    LINE_HEIGHT_PT,
    STACK_BORDER_CHARS,
    SYSTEM_SPACING_PT,
)
from modules.error_handler import RenderError
from modules.logger import setup_logger
from modules.types import ContainerKind, FormattedItem, ListSection, TabAlignment

logger = setup_logger(__name__)

# Narrowest content area that still fits a marker and a word
MIN_CONTENT_COLUMNS = 10


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies."""
    width = 0
    for char in text:
        if unicodedata.combining(char) or unicodedata.category(char) == "Cf":
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _split_to_width(word: str, columns: int) -> tuple[str, str]:
    """Split ``word`` so the head fits in ``columns`` (at least one character)."""
    used = 0
    for index, char in enumerate(word):
        used += display_width(char)
        if used > columns and index > 0:
            return word[:index], word[index:]
    return word, ""


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


class TextRenderer:
    """Render ListSections as boxed monospace text."""

    def __init__(
        self,
        line_width: int | None = None,
        points_per_column: float | None = None,
    ) -> None:
        self.line_width = line_width if line_width is not None else config.LINE_WIDTH
        self.points_per_column = (
            points_per_column if points_per_column is not None else config.POINTS_PER_COLUMN
        )
        if self.points_per_column <= 0:
            raise ValueError("points_per_column must be positive")

    # ------------------------------------------------------------------
    # Unit conversion
    # ------------------------------------------------------------------
    def columns(self, points: float) -> int:
        """Convert points to whole columns, rounding half up."""
        return int(points / self.points_per_column + 0.5)

    @staticmethod
    def lines(points: float) -> int:
        """Convert vertical points to whole blank lines, rounding half up."""
        return int(points / LINE_HEIGHT_PT + 0.5)

    def _next_tab_stop(
        self, cursor: int, stops: Sequence[tuple[int, TabAlignment]]
    ) -> tuple[int, TabAlignment]:
        for column, alignment in stops:
            if column > cursor:
                return column, alignment
        interval = max(1, self.columns(DEFAULT_TAB_INTERVAL_PT))
        return (cursor // interval + 1) * interval, TabAlignment.LEFT

    # ------------------------------------------------------------------
    # Item layout
    # ------------------------------------------------------------------
    def layout_item(self, item: FormattedItem, width: int) -> List[str]:
        """Lay out one label within ``width`` columns."""
        style = item.paragraph_style
        limit = max(0, width // 2)
        if style is not None:
            first_column = min(self.columns(style.first_line_indent), limit)
            head_column = min(self.columns(style.head_indent), limit)
            stops = [
                (min(self.columns(tab.location), limit), tab.alignment) for tab in style.tab_stops
            ]
        else:
            first_column = head_column = 0
            stops = []

        segments = item.text.split("\t")
        line = " " * first_column
        cursor = first_column

        for position, segment in enumerate(segments[:-1]):
            if position > 0:
                stop, alignment = self._next_tab_stop(cursor, stops)
                start = stop
                if alignment is TabAlignment.RIGHT:
                    start = max(cursor, stop - display_width(segment))
                line += " " * (start - cursor)
                cursor = start
            line += segment
            cursor += display_width(segment)

        body = segments[-1]
        if len(segments) > 1:
            stop, _ = self._next_tab_stop(cursor, stops)
            if stop < width:
                line += " " * (stop - cursor)
                cursor = stop
            else:
                # No stop fits; keep the marker apart from the body
                line += " "
                cursor += 1

        return self._wrap_body(body, line, cursor, head_column, width)

    def _wrap_body(
        self, body: str, line: str, cursor: int, head_column: int, width: int
    ) -> List[str]:
        lines: List[str] = []
        has_words = False

        for word in body.split():
            word_width = display_width(word)
            needed = word_width + (1 if has_words else 0)
            if cursor + needed > width and (has_words or cursor > head_column):
                lines.append(line.rstrip())
                line, cursor, has_words = " " * head_column, head_column, False

            if has_words:
                line += " "
                cursor += 1

            # Words longer than a whole line are broken across lines
            while cursor + display_width(word) > width:
                head, word = _split_to_width(word, width - cursor)
                lines.append((line + head).rstrip())
                line, cursor = " " * head_column, head_column
            line += word
            cursor += display_width(word)
            has_words = True

        lines.append(line.rstrip())
        return lines

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------
    def render_section(self, section: ListSection) -> List[str]:
        """Render a titled, bordered list."""
        if section.container is ContainerKind.STACK:
            top_left, top_right, bottom_left, bottom_right, horizontal, vertical = STACK_BORDER_CHARS
        else:
            top_left, top_right, bottom_left, bottom_right, horizontal, vertical = BOX_BORDER_CHARS

        padding_columns = self.columns(section.padding)
        inner_width = self.line_width - 2 - 2 * padding_columns
        if inner_width < MIN_CONTENT_COLUMNS:
            raise RenderError(
                f"Line width {self.line_width} is too narrow for list '{section.title}' "
                f"with {section.padding:g}pt padding"
            )

        output = self.layout_item(FormattedItem(section.title), self.line_width)
        output.append(top_left + horizontal * (self.line_width - 2) + top_right)
        blank = vertical + " " * (self.line_width - 2) + vertical
        margin = " " * padding_columns

        output.extend([blank] * self.lines(section.padding))
        for index, item in enumerate(section.items):
            if index:
                output.extend([blank] * self.lines(section.item_spacing))
            for text_line in self.layout_item(item, inner_width):
                output.append(f"{vertical}{margin}{_pad(text_line, inner_width)}{margin}{vertical}")
        output.extend([blank] * self.lines(section.padding))

        output.append(bottom_left + horizontal * (self.line_width - 2) + bottom_right)
        return output

    def render(self, sections: Iterable[ListSection]) -> str:
        """Render all sections separated by system spacing."""
        separator = [""] * max(1, self.lines(SYSTEM_SPACING_PT))
        output: List[str] = []
        for index, section in enumerate(sections):
            if index:
                output.extend(separator)
            output.extend(self.render_section(section))
        return "\n".join(output)


def write_text_document(
    sections: Sequence[ListSection],
    output_path: Path,
    renderer: TextRenderer | None = None,
) -> Path:
    """Render sections to a UTF-8 text file and return its path."""
    renderer = renderer or TextRenderer()
    content = renderer.render(sections)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content + "\n", encoding="utf-8")
    except OSError as exc:
        raise RenderError(f"Could not write text output to {output_path}: {exc}") from exc
    logger.info("Text document saved to %s", output_path)
    return output_path


__all__ = [
    "TextRenderer",
    "display_width",
    "write_text_document",
]
