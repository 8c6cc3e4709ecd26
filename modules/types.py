"""Type definitions and data structures for ListPlayground.

Lists are described by ListSpec (how to mark and indent items), turned into
FormattedItem labels by core.list_builder, and grouped into ListSection
objects that every renderer consumes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from modules.constants import (
    DEFAULT_BULLET,
    DEFAULT_CONTAINER_PADDING_PT,
    DEFAULT_INDENTATION_PT,
    DEFAULT_ITEM_SPACING_PT,
)
from modules.error_handler import ConfigurationError, validate_config_value


# ============================================================================
# Enumerations
# ============================================================================
class TabAlignment(str, Enum):
    """Alignment of text at a tab stop."""
    LEFT = "left"
    RIGHT = "right"


class ListStyleKind(str, Enum):
    """How list items are marked and indented."""
    PLAIN = "plain"
    BULLET = "bullet"
    ALIGNED_BULLET = "aligned_bullet"
    NUMERIC = "numeric"
    ROMAN = "roman"
    RIGHT_ALIGNED_ROMAN = "right_aligned_roman"


class ContainerKind(str, Enum):
    """Container drawn around a list."""
    BOX = "box"
    STACK = "stack"


def _parse_enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"Invalid value {value!r} for '{name}'. Expected one of: {choices}"
        ) from None


# ============================================================================
# Paragraph Styling
# ============================================================================
@dataclass(frozen=True)
class TabStop:
    """A tab stop at ``location`` points from the paragraph's leading edge."""
    alignment: TabAlignment
    location: float


@dataclass(frozen=True)
class ParagraphStyle:
    """Hanging-indent paragraph style.

    Continuation lines start at ``head_indent``; the first line is pulled
    back by ``first_line_head_indent`` (negative for a hanging indent).
    """
    head_indent: float
    first_line_head_indent: float
    tab_stops: tuple[TabStop, ...] = ()

    @property
    def first_line_indent(self) -> float:
        """Absolute indent of the first line, never negative."""
        return max(0.0, self.head_indent + self.first_line_head_indent)


@dataclass(frozen=True)
class FormattedItem:
    """A single list label. Items without a style are plain labels."""
    text: str
    paragraph_style: Optional[ParagraphStyle] = None


# ============================================================================
# List Definitions
# ============================================================================
@dataclass(frozen=True)
class ListSpec:
    """Configuration for one demo list."""
    title: str
    kind: ListStyleKind = ListStyleKind.PLAIN
    lead_icon: str = DEFAULT_BULLET
    prefix: str = ""
    indentation: float = DEFAULT_INDENTATION_PT
    container: ContainerKind = ContainerKind.BOX
    padding: float = DEFAULT_CONTAINER_PADDING_PT
    item_spacing: float = DEFAULT_ITEM_SPACING_PT

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> ListSpec:
        """Create a ListSpec from a ``lists.yaml`` entry.

        Raises:
            ConfigurationError: If a field is missing or has the wrong type.
        """
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"List definition must be a mapping, got {type(config).__name__}"
            )

        title = config.get("title")
        validate_config_value(title, str, "title")

        indentation = config.get("indentation", DEFAULT_INDENTATION_PT)
        padding = config.get("padding", DEFAULT_CONTAINER_PADDING_PT)
        item_spacing = config.get("item_spacing", DEFAULT_ITEM_SPACING_PT)
        for name, value in (
            ("indentation", indentation),
            ("padding", padding),
            ("item_spacing", item_spacing),
        ):
            validate_config_value(value, (int, float), name)
            if not math.isfinite(value):
                raise ConfigurationError(f"'{name}' must be a finite number, got {value}")
            if value < 0:
                raise ConfigurationError(f"'{name}' must not be negative, got {value}")

        lead_icon = config.get("lead_icon", DEFAULT_BULLET)
        prefix = config.get("prefix", "")
        validate_config_value(lead_icon, str, "lead_icon")
        validate_config_value(prefix, str, "prefix")

        return cls(
            title=title,
            kind=_parse_enum(ListStyleKind, config.get("kind", "plain"), "kind"),
            lead_icon=lead_icon,
            prefix=prefix,
            indentation=float(indentation),
            container=_parse_enum(ContainerKind, config.get("container", "box"), "container"),
            padding=float(padding),
            item_spacing=float(item_spacing),
        )


@dataclass
class ListSection:
    """A titled list whose items are ready for rendering."""
    title: str
    items: List[FormattedItem] = field(default_factory=list)
    kind: ListStyleKind = ListStyleKind.PLAIN
    container: ContainerKind = ContainerKind.BOX
    padding: float = DEFAULT_CONTAINER_PADDING_PT
    item_spacing: float = DEFAULT_ITEM_SPACING_PT

    def display_label(self) -> str:
        """Return a human-readable label for selection menus."""
        return f"{self.title} ({len(self.items)} items, {self.container.value})"


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "TabAlignment",
    "ListStyleKind",
    "ContainerKind",
    "TabStop",
    "ParagraphStyle",
    "FormattedItem",
    "ListSpec",
    "ListSection",
]
