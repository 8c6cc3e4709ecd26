"""Tests for processors/markdown_writer.py - Markdown list output."""

from __future__ import annotations

from pathlib import Path

from core.list_builder import build_section
from modules.constants import HAPPY_FACE
from modules.types import FormattedItem, ListSpec, ListStyleKind
from processors.markdown_writer import (
    create_markdown_document,
    escape_markdown,
    escape_paragraph,
    split_marker,
)


def _render(temp_dir: Path, spec: ListSpec, items: list[str]) -> str:
    output = create_markdown_document([build_section(spec, items)], temp_dir / "lists.md")
    return output.read_text(encoding="utf-8")


class TestHelpers:
    """Tests for escape_markdown() and split_marker()."""

    def test_escape_markdown(self):
        assert escape_markdown("a*b_c #1") == r"a\*b\_c \#1"

    def test_escape_paragraph_leading_ordinal(self):
        assert escape_paragraph("1. not a list") == r"1\. not a list"
        assert escape_paragraph("12) nor this") == r"12\) nor this"

    def test_escape_paragraph_leading_block_syntax(self):
        assert escape_paragraph("- dash") == r"\- dash"
        assert escape_paragraph("+ plus") == r"\+ plus"
        assert escape_paragraph("> quote") == r"\> quote"

    def test_escape_paragraph_keeps_inner_text(self):
        assert escape_paragraph("page 1. a-b") == "page 1. a-b"

    def test_split_marker(self):
        assert split_marker(FormattedItem("II.\tbody")) == ("II.", "body")

    def test_split_marker_skips_leading_tab(self):
        assert split_marker(FormattedItem("\tIII.\tbody")) == ("III.", "body")

    def test_split_marker_without_marker(self):
        assert split_marker(FormattedItem("just text")) == ("", "just text")


class TestCreateMarkdownDocument:
    """Tests for create_markdown_document()."""

    def test_header(self, temp_dir: Path):
        content = _render(temp_dir, ListSpec("Plain"), ["a"])
        lines = content.split("\n")
        assert lines[0] == "# List Playground"
        assert lines[2].startswith("*Generated: ")
        assert "## Plain" in lines

    def test_default_bullets_become_markdown_bullets(self, temp_dir: Path, short_items):
        content = _render(temp_dir, ListSpec("B", ListStyleKind.ALIGNED_BULLET), short_items)
        assert "- alpha\n- beta\n- gamma" in content

    def test_custom_bullets_are_kept(self, temp_dir: Path):
        spec = ListSpec("Happy", ListStyleKind.BULLET, lead_icon=HAPPY_FACE)
        content = _render(temp_dir, spec, ["smile"])
        assert f"{HAPPY_FACE} smile" in content
        assert "- smile" not in content

    def test_numeric_becomes_ordered_list(self, temp_dir: Path, short_items):
        content = _render(temp_dir, ListSpec("N", ListStyleKind.NUMERIC), short_items)
        assert "1. alpha\n2. beta\n3. gamma" in content

    def test_prefixed_numbers_are_escaped(self, temp_dir: Path):
        spec = ListSpec("N", ListStyleKind.NUMERIC, prefix="A.")
        content = _render(temp_dir, spec, ["alpha"])
        assert r"A\.1\. alpha" in content

    def test_roman_markers_are_paragraphs(self, temp_dir: Path, short_items):
        spec = ListSpec("R", ListStyleKind.RIGHT_ALIGNED_ROMAN, indentation=40.0)
        content = _render(temp_dir, spec, short_items)
        assert "I\\. alpha\n\nII\\. beta\n\nIII\\. gamma" in content
        assert "\t" not in content

    def test_plain_items_do_not_become_lists(self, temp_dir: Path):
        content = _render(temp_dir, ListSpec("t"), ["1. not a list", "- nor this"])
        assert "1\\. not a list\n\n\\- nor this" in content

    def test_bullet_body_starting_with_dash(self, temp_dir: Path):
        content = _render(temp_dir, ListSpec("B", ListStyleKind.ALIGNED_BULLET), ["- nested"])
        assert "- \\- nested" in content
