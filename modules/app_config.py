"""Application configuration loader from YAML files.

This module loads configuration from modules/config/app.yaml and exposes
settings as module-level constants:
- Output format and folder
- Text rendering geometry (line width, points per column)
- Console colors

Import as:
    from modules import app_config as config

Configuration is loaded at module import time and exposed as constants:
    - OUTPUT_FORMAT: str ("text", "docx" or "markdown")
    - OUTPUT_FOLDER_PATH: str
    - OUTPUT_STEM: str
    - LINE_WIDTH: int
    - POINTS_PER_COLUMN: float
    - USE_COLOR: bool
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from modules.constants import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_OUTPUT_FOLDER,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_OUTPUT_STEM,
    DEFAULT_POINTS_PER_COLUMN,
    MIN_LINE_WIDTH,
    OUTPUT_FORMATS,
)
from modules.logger import setup_logger

logger = setup_logger(__name__)

# ============================================================================
# Configuration File Paths
# ============================================================================
_MODULES_DIR = Path(__file__).resolve().parent
_APP_CONFIG_PATH = _MODULES_DIR / "config" / "app.yaml"


# ============================================================================
# Configuration Loading Functions
# ============================================================================
def _load_yaml_app_config(path: Path = _APP_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load the application config YAML.

    Returns:
        Configuration dictionary, or empty dict on error
    """
    if not path.exists():
        logger.warning(f"App config file not found: {path}. Using defaults.")
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {path.name}: {e}. Using defaults.")
        return {}
    except OSError as e:
        logger.error(f"Error reading app config: {e}. Using defaults.")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("App config is not a dictionary. Using defaults.")
        return {}
    return data


def _get_str(data: Dict[str, Any], key: str, default: str) -> str:
    """Safely get a string value from config dictionary."""
    value = data.get(key, default)
    return str(value) if value is not None else default


def _get_int(data: Dict[str, Any], key: str, default: int, minimum: int | None = None) -> int:
    """Safely get an integer value from config dictionary."""
    try:
        value = int(data.get(key, default))
    except (ValueError, TypeError):
        logger.warning(f"Invalid integer for '{key}', using default: {default}")
        return default
    if minimum is not None and value < minimum:
        logger.warning(f"'{key}' must be at least {minimum}, using {minimum}")
        return minimum
    return value


def _get_float(data: Dict[str, Any], key: str, default: float) -> float:
    """Safely get a positive float value from config dictionary."""
    try:
        value = float(data.get(key, default))
    except (ValueError, TypeError):
        logger.warning(f"Invalid number for '{key}', using default: {default}")
        return default
    if value <= 0:
        logger.warning(f"'{key}' must be positive, using default: {default}")
        return default
    return value


def _get_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    """Safely get a boolean value from config dictionary."""
    return bool(data.get(key, default))


def _get_choice(data: Dict[str, Any], key: str, default: str, choices: tuple[str, ...]) -> str:
    """Get a string restricted to ``choices``."""
    value = _get_str(data, key, default).lower()
    if value not in choices:
        logger.warning(f"Invalid value '{value}' for '{key}', using default: {default}")
        return default
    return value


# ============================================================================
# Configuration Values (loaded at module import)
# ============================================================================
_APP_CFG: Dict[str, Any] = _load_yaml_app_config()
_OUTPUT: Dict[str, Any] = _APP_CFG.get("output", {}) if isinstance(_APP_CFG.get("output"), dict) else {}
_TEXT: Dict[str, Any] = _APP_CFG.get("text_rendering", {}) if isinstance(_APP_CFG.get("text_rendering"), dict) else {}

# --- Output ---
OUTPUT_FORMAT = _get_choice(_OUTPUT, "format", DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS)
OUTPUT_FOLDER_PATH = _get_str(_OUTPUT, "folder_path", DEFAULT_OUTPUT_FOLDER)
OUTPUT_STEM = _get_str(_OUTPUT, "file_stem", DEFAULT_OUTPUT_STEM)

# --- Text Rendering ---
LINE_WIDTH = _get_int(_TEXT, "line_width", DEFAULT_LINE_WIDTH, minimum=MIN_LINE_WIDTH)
POINTS_PER_COLUMN = _get_float(_TEXT, "points_per_column", DEFAULT_POINTS_PER_COLUMN)

# --- Console ---
USE_COLOR = _get_bool(_APP_CFG, "use_color", True)

# ============================================================================
# Logging
# ============================================================================
logger.debug(f"Configuration loaded: OUTPUT_FORMAT={OUTPUT_FORMAT}, OUTPUT_FOLDER_PATH={OUTPUT_FOLDER_PATH}")
logger.debug(f"Text rendering: LINE_WIDTH={LINE_WIDTH}, POINTS_PER_COLUMN={POINTS_PER_COLUMN}")
