"""Core package for ListPlayground.

This package provides list construction:

- **list_builder**: Markers, hanging-indent styles and the demo list catalog
"""

from core.list_builder import build_section, build_sections, default_list_specs

__all__ = [
    "build_section",
    "build_sections",
    "default_list_specs",
]
