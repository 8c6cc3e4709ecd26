"""DOCX document creation for ListPlayground.

Writes every list to a Word document using native paragraph formatting:
- Hanging indents via left_indent / negative first_line_indent
- Real left and right tab stops, so markers align exactly as configured
- A bordered one-cell table as the list container, with cell margins for padding
- XML sanitization for safe DOCX output
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from docx import Document
from docx.enum.text import WD_PARAGRAPH_ALIGNMENT, WD_TAB_ALIGNMENT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt

from modules.constants import (
    CONTAINER_TABLE_STYLE,
    LIST_HEADING_LEVEL,
    LIST_TITLE_SPACE_AFTER_PT,
    LIST_TITLE_SPACE_BEFORE_PT,
    TITLE_HEADING_LEVEL,
    TITLE_SPACE_AFTER_PT,
)
from modules.error_handler import RenderError
from modules.logger import setup_logger
from modules.types import FormattedItem, ListSection, TabAlignment

logger = setup_logger(__name__)

DOCUMENT_TITLE = "List Playground"
# Word measures cell margins in twentieths of a point
_TWIPS_PER_POINT = 20

_TAB_ALIGNMENTS = {
    TabAlignment.LEFT: WD_TAB_ALIGNMENT.LEFT,
    TabAlignment.RIGHT: WD_TAB_ALIGNMENT.RIGHT,
}


def sanitize_for_xml(text: Optional[str]) -> str:
    """Return XML-safe text for DOCX output by removing control characters."""
    if not text:
        return ""

    # Remove control characters (except tab \x09, newline \x0A, and carriage return \x0D)
    return re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", text)


def set_cell_margins(cell, points: float) -> None:
    """Set all four inner margins of a table cell."""
    tc_pr = cell._tc.get_or_add_tcPr()
    existing = tc_pr.find(qn("w:tcMar"))
    if existing is not None:
        tc_pr.remove(existing)

    tc_mar = OxmlElement("w:tcMar")
    for side in ("top", "left", "bottom", "right"):
        margin = OxmlElement(f"w:{side}")
        margin.set(qn("w:w"), str(int(round(points * _TWIPS_PER_POINT))))
        margin.set(qn("w:type"), "dxa")
        tc_mar.append(margin)
    tc_pr.append(tc_mar)


def apply_item_format(paragraph, item: FormattedItem, space_after: float) -> None:
    """Apply an item's paragraph style (indents and tab stops) to a paragraph."""
    paragraph_format = paragraph.paragraph_format
    paragraph_format.space_before = Pt(0)
    paragraph_format.space_after = Pt(space_after)

    style = item.paragraph_style
    if style is None:
        return

    paragraph_format.left_indent = Pt(style.head_indent)
    paragraph_format.first_line_indent = Pt(style.first_line_head_indent)
    for tab in style.tab_stops:
        paragraph_format.tab_stops.add_tab_stop(Pt(tab.location), _TAB_ALIGNMENTS[tab.alignment])


def add_list_section(document, section: ListSection) -> None:
    """Append a titled, bordered list to ``document``."""
    heading = document.add_heading(sanitize_for_xml(section.title), LIST_HEADING_LEVEL)
    heading.paragraph_format.space_before = Pt(LIST_TITLE_SPACE_BEFORE_PT)
    heading.paragraph_format.space_after = Pt(LIST_TITLE_SPACE_AFTER_PT)

    table = document.add_table(rows=1, cols=1)
    table.style = CONTAINER_TABLE_STYLE
    cell = table.cell(0, 0)
    set_cell_margins(cell, section.padding)

    last_index = len(section.items) - 1
    for index, item in enumerate(section.items):
        paragraph = cell.paragraphs[0] if index == 0 else cell.add_paragraph()
        space_after = 0 if index == last_index else section.item_spacing
        apply_item_format(paragraph, item, space_after)
        paragraph.add_run(sanitize_for_xml(item.text))


def create_docx_document(
    sections: Sequence[ListSection],
    output_path: Path,
    title: str = DOCUMENT_TITLE,
) -> Path:
    """Create a DOCX document containing every list section.

    Output order:
    1. Title + generation timestamp
    2. One heading and bordered container per list

    Raises:
        RenderError: If the document cannot be saved.
    """
    document = Document()

    title_heading = document.add_heading(sanitize_for_xml(title), TITLE_HEADING_LEVEL)
    title_heading.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER
    title_heading.paragraph_format.space_after = Pt(TITLE_SPACE_AFTER_PT)

    metadata = "Generated: %s | Lists: %s" % (
        datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        len(sections),
    )
    meta_paragraph = document.add_paragraph(metadata)
    meta_paragraph.alignment = WD_PARAGRAPH_ALIGNMENT.CENTER

    for section in sections:
        add_list_section(document, section)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(output_path))
    except OSError as exc:
        raise RenderError(f"Could not save DOCX document to {output_path}: {exc}") from exc

    logger.info("DOCX document saved to %s", output_path)
    return output_path


__all__ = [
    "sanitize_for_xml",
    "set_cell_margins",
    "apply_item_format",
    "add_list_section",
    "create_docx_document",
]
