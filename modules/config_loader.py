"""Configuration loader for YAML-based list definitions.

This module loads the playground's list catalog from modules/config/lists.yaml
(or a user-supplied file) and converts it into typed ListSpec objects.

Supported keys of the list file:
1. **sample_items**: Texts shown in every list
2. **lists**: Ordered list definitions (see ListSpec.from_dict)

Usage Pattern:
    >>> from modules.config_loader import get_config_loader
    >>> loader = get_config_loader()
    >>> specs = loader.get_list_specs()
    >>> items = loader.get_sample_items()

Path Constants:
- PROJECT_ROOT: Root directory of the project
- MODULES_DIR: modules/ directory
- CONFIG_DIR: modules/config/ directory

A missing list file falls back to the built-in demo lists. Invalid YAML is
logged and also falls back; structurally invalid list definitions raise
ConfigurationError so mistakes are not silently ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from core.list_builder import default_list_specs
from modules.constants import SAMPLE_ITEMS
from modules.error_handler import ConfigurationError
from modules.logger import setup_logger
from modules.types import ListSpec

logger = setup_logger(__name__)

# ============================================================================
# Path Resolution
# ============================================================================
PROJECT_ROOT = Path(__file__).resolve().parents[1]
MODULES_DIR = Path(__file__).resolve().parent
CONFIG_DIR = MODULES_DIR / "config"
LISTS_CONFIG_FILENAME = "lists.yaml"


# ============================================================================
# Configuration Loader Class
# ============================================================================
class ConfigLoader:
    """
    Lightweight loader for the list catalog.

    Example:
        >>> loader = ConfigLoader()
        >>> loader.load_configs()
        >>> [spec.title for spec in loader.get_list_specs()]
    """

    def __init__(self, lists_path: Path | None = None) -> None:
        """Initialize the loader; ``lists_path`` overrides the bundled lists.yaml."""
        self._lists_path = Path(lists_path) if lists_path else CONFIG_DIR / LISTS_CONFIG_FILENAME
        self._lists: dict[str, Any] = {}

    @property
    def lists_path(self) -> Path:
        return self._lists_path

    def load_configs(self) -> None:
        """Load the list file. Errors are logged and leave the config empty."""
        self._lists = self._load_yaml_config(self._lists_path)

    def _load_yaml_config(self, config_path: Path) -> dict[str, Any]:
        """Load a single YAML configuration file."""
        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}")
            return {}

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error in {config_path.name}: {e}")
            return {}
        except OSError as e:
            logger.error(f"Error loading config {config_path.name}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Config file {config_path.name} did not contain a dictionary. Using empty config.")
            return {}

        return data

    def get_lists_config(self) -> dict[str, Any]:
        """Get the raw list configuration."""
        return dict(self._lists)

    def get_sample_items(self) -> list[str]:
        """
        Get the item texts shown in every list.

        Raises:
            ConfigurationError: If ``sample_items`` is not a list of strings.
        """
        items = self._lists.get("sample_items")
        if items is None:
            return list(SAMPLE_ITEMS)
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise ConfigurationError("'sample_items' must be a list of strings")
        return list(items)

    def get_list_specs(self) -> list[ListSpec]:
        """
        Get the configured lists, or the built-in demo lists if none are configured.

        Raises:
            ConfigurationError: If ``lists`` is malformed.
        """
        raw_lists = self._lists.get("lists")
        if raw_lists is None:
            return default_list_specs()

        if not isinstance(raw_lists, list):
            raise ConfigurationError("'lists' must be a list of list definitions")

        specs = []
        for position, entry in enumerate(raw_lists, start=1):
            try:
                specs.append(ListSpec.from_dict(entry))
            except ConfigurationError as exc:
                raise ConfigurationError(f"List #{position} in {self._lists_path.name}: {exc}") from exc
        return specs

    def is_loaded(self) -> bool:
        """Check if a list configuration has been loaded."""
        return bool(self._lists)


# ============================================================================
# Singleton Pattern for Config Loader
# ============================================================================
_config_loader_instance: ConfigLoader | None = None


def get_config_loader(lists_path: Path | None = None) -> ConfigLoader:
    """Get or create a singleton ConfigLoader instance.

    Passing ``lists_path`` replaces the singleton with a loader for that file.
    """
    global _config_loader_instance

    if _config_loader_instance is None or (
        lists_path is not None and Path(lists_path) != _config_loader_instance.lists_path
    ):
        _config_loader_instance = ConfigLoader(lists_path)
        _config_loader_instance.load_configs()
        logger.debug("Initialized ConfigLoader for %s", _config_loader_instance.lists_path)

    return _config_loader_instance


# ============================================================================
# Public API
# ============================================================================
__all__ = [
    "ConfigLoader",
    "get_config_loader",
    "PROJECT_ROOT",
    "MODULES_DIR",
    "CONFIG_DIR",
    "LISTS_CONFIG_FILENAME",
]
