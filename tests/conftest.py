"""Pytest fixtures and configuration for ListPlayground tests.

This module provides shared fixtures and test utilities used across the test
suite.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
import yaml

import modules.config_loader as config_loader_module
from modules.constants import SAMPLE_ITEMS
from modules.user_prompts import set_color_enabled


# ============================================================================
# Path Fixtures
# ============================================================================
@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================================
# Console Fixtures
# ============================================================================
@pytest.fixture(autouse=True)
def plain_console() -> Generator[None, None, None]:
    """Disable ANSI colors so captured output can be compared literally."""
    set_color_enabled(False)
    yield
    set_color_enabled(True)


@pytest.fixture(autouse=True)
def reset_config_loader() -> Generator[None, None, None]:
    """Drop the ConfigLoader singleton between tests."""
    config_loader_module._config_loader_instance = None
    yield
    config_loader_module._config_loader_instance = None


# ============================================================================
# List Fixtures
# ============================================================================
@pytest.fixture
def sample_items() -> list[str]:
    """The item texts shown in every demo list."""
    return list(SAMPLE_ITEMS)


@pytest.fixture
def short_items() -> list[str]:
    """Short item texts that never wrap."""
    return ["alpha", "beta", "gamma"]


@pytest.fixture
def lists_config() -> Dict[str, Any]:
    """A small list catalog in lists.yaml form."""
    return {
        "sample_items": ["First item", "Second item"],
        "lists": [
            {"title": "Bullets", "kind": "aligned_bullet"},
            {"title": "Numbers", "kind": "numeric", "prefix": "A.", "indentation": 40},
            {
                "title": "Roman",
                "kind": "right_aligned_roman",
                "indentation": 40,
                "container": "stack",
                "padding": 8,
                "item_spacing": 3,
            },
        ],
    }


@pytest.fixture
def lists_file(temp_dir: Path, lists_config: Dict[str, Any]) -> Path:
    """Write ``lists_config`` to a YAML file and return its path."""
    path = temp_dir / "lists.yaml"
    path.write_text(yaml.safe_dump(lists_config, allow_unicode=True), encoding="utf-8")
    return path
