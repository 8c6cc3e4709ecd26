"""List construction for the playground.

Turns a ListSpec and a sequence of item texts into formatted labels:

- Plain and simple bullet lists produce unstyled labels; the tab after the
  marker falls on the default tab interval, so wrapped lines do not align
  with the first line's text.
- Aligned lists (aligned bullets, numeric, Roman) use a hanging indent whose
  single left tab stop coincides with the head indent, so every line of the
  item starts at the same column.
- Right-aligned Roman lists add a right tab stop ``RIGHT_TAB_GUTTER_PT``
  before the head indent; the marker is right-aligned against it so
  ``I.``, ``II.`` and ``III.`` line up on the period.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from modules.constants import (
    DEFAULT_BULLET,
    HAPPY_FACE,
    RIGHT_TAB_GUTTER_PT,
)
from modules.logger import setup_logger
from modules.roman_numerals import int_to_roman
from modules.types import (
    ContainerKind,
    FormattedItem,
    ListSection,
    ListSpec,
    ListStyleKind,
    ParagraphStyle,
    TabAlignment,
    TabStop,
)

logger = setup_logger(__name__)


def hanging_indent_style(
    indentation: float,
    tabs: Optional[Sequence[TabStop]] = None,
) -> ParagraphStyle:
    """
    Build a hanging-indent paragraph style.

    Args:
        indentation: Head indent in points; the first line hangs back by the same amount.
        tabs: Custom tab stops. Defaults to one left tab at ``indentation``.

    Returns:
        ParagraphStyle with the resolved tab stops sorted by location.
    """
    if tabs is None:
        tab_stops = (TabStop(TabAlignment.LEFT, indentation),)
    else:
        tab_stops = tuple(sorted(tabs, key=lambda tab: tab.location))
    return ParagraphStyle(
        head_indent=indentation,
        first_line_head_indent=-indentation,
        tab_stops=tab_stops,
    )


def right_aligned_marker_tabs(indentation: float) -> tuple[TabStop, ...]:
    """Tab stops that right-align the marker just before the text column."""
    return (
        TabStop(TabAlignment.RIGHT, max(0.0, indentation - RIGHT_TAB_GUTTER_PT)),
        TabStop(TabAlignment.LEFT, indentation),
    )


def item_marker(spec: ListSpec, index: int) -> str:
    """
    Return the marker shown before item ``index`` (0-based).

    Raises:
        RomanNumeralRangeError: For Roman lists longer than 3999 items.
    """
    kind = spec.kind
    if kind is ListStyleKind.PLAIN:
        return ""
    if kind in (ListStyleKind.BULLET, ListStyleKind.ALIGNED_BULLET):
        return spec.lead_icon
    if kind is ListStyleKind.NUMERIC:
        return f"{spec.prefix}{index + 1}."
    return f"{int_to_roman(index + 1)}."


def format_item(spec: ListSpec, index: int, text: str) -> FormattedItem:
    """Format one list item according to ``spec``."""
    if spec.kind is ListStyleKind.PLAIN:
        return FormattedItem(text)

    marker = item_marker(spec, index)
    if spec.kind is ListStyleKind.BULLET:
        return FormattedItem(f"{marker}\t{text}")

    if spec.kind is ListStyleKind.RIGHT_ALIGNED_ROMAN:
        style = hanging_indent_style(
            spec.indentation, right_aligned_marker_tabs(spec.indentation)
        )
        return FormattedItem(f"\t{marker}\t{text}", style)

    return FormattedItem(f"{marker}\t{text}", hanging_indent_style(spec.indentation))


def build_section(spec: ListSpec, items: Iterable[str]) -> ListSection:
    """Format every item of a list and wrap them in a ListSection."""
    formatted = [format_item(spec, index, text) for index, text in enumerate(items)]
    logger.debug(
        "Built list '%s' (%s, %d items, container=%s)",
        spec.title,
        spec.kind.value,
        len(formatted),
        spec.container.value,
    )
    return ListSection(
        title=spec.title,
        items=formatted,
        kind=spec.kind,
        container=spec.container,
        padding=spec.padding,
        item_spacing=spec.item_spacing,
    )


def build_sections(specs: Iterable[ListSpec], items: Sequence[str]) -> List[ListSection]:
    """Build one section per spec, all sharing the same item texts."""
    return [build_section(spec, items) for spec in specs]


def default_list_specs() -> List[ListSpec]:
    """The demo lists shown when no ``lists.yaml`` is configured."""
    return [
        ListSpec("Simple list", ListStyleKind.PLAIN),
        ListSpec("Simple bullet list", ListStyleKind.BULLET),
        ListSpec("Happy face bullet list", ListStyleKind.BULLET, lead_icon=HAPPY_FACE),
        ListSpec("Properly aligned bullet list", ListStyleKind.ALIGNED_BULLET, lead_icon=DEFAULT_BULLET),
        ListSpec(
            "Happy faces bullet list with different indentation",
            ListStyleKind.ALIGNED_BULLET,
            lead_icon=HAPPY_FACE * 2,
            indentation=60.0,
        ),
        ListSpec("Numeric ordered list", ListStyleKind.NUMERIC),
        ListSpec("Numeric ordered list with prefix", ListStyleKind.NUMERIC, prefix="A.", indentation=40.0),
        ListSpec("Roman numeral ordered list", ListStyleKind.ROMAN, indentation=40.0),
        ListSpec("Right align lead number ordered list", ListStyleKind.RIGHT_ALIGNED_ROMAN, indentation=40.0),
        ListSpec(
            "Use stack container - smaller padding and list item spacing",
            ListStyleKind.RIGHT_ALIGNED_ROMAN,
            indentation=40.0,
            container=ContainerKind.STACK,
            padding=8.0,
            item_spacing=3.0,
        ),
    ]


__all__ = [
    "hanging_indent_style",
    "right_aligned_marker_tabs",
    "item_marker",
    "format_item",
    "build_section",
    "build_sections",
    "default_list_specs",
]
