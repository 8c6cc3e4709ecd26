"""Tests for modules/config_loader.py - List catalog loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from core.list_builder import default_list_specs
from modules.config_loader import (
    CONFIG_DIR,
    LISTS_CONFIG_FILENAME,
    MODULES_DIR,
    PROJECT_ROOT,
    ConfigLoader,
    get_config_loader,
)
from modules.constants import SAMPLE_ITEMS
from modules.error_handler import ConfigurationError
from modules.types import ContainerKind, ListStyleKind


class TestPathConstants:
    """Tests for path constants."""

    def test_config_dir_is_under_modules(self):
        assert CONFIG_DIR.parent == MODULES_DIR
        assert MODULES_DIR.parent == PROJECT_ROOT

    def test_bundled_lists_file_exists(self):
        assert (CONFIG_DIR / LISTS_CONFIG_FILENAME).exists()


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_default_path(self):
        assert ConfigLoader().lists_path == CONFIG_DIR / LISTS_CONFIG_FILENAME

    def test_not_loaded_until_load_configs(self, lists_file: Path):
        loader = ConfigLoader(lists_file)
        assert loader.is_loaded() is False
        loader.load_configs()
        assert loader.is_loaded() is True

    def test_loads_custom_file(self, lists_file: Path):
        loader = ConfigLoader(lists_file)
        loader.load_configs()

        specs = loader.get_list_specs()
        assert [spec.title for spec in specs] == ["Bullets", "Numbers", "Roman"]
        assert specs[1].prefix == "A."
        assert specs[2].container is ContainerKind.STACK
        assert loader.get_sample_items() == ["First item", "Second item"]

    def test_bundled_file_matches_demo_lists(self):
        """The shipped lists.yaml describes the same lists as the built-in defaults."""
        loader = ConfigLoader()
        loader.load_configs()
        assert loader.get_list_specs() == default_list_specs()
        assert loader.get_sample_items() == SAMPLE_ITEMS

    def test_missing_file_falls_back_to_defaults(self, temp_dir: Path):
        loader = ConfigLoader(temp_dir / "missing.yaml")
        loader.load_configs()
        assert loader.is_loaded() is False
        assert loader.get_list_specs() == default_list_specs()
        assert loader.get_sample_items() == SAMPLE_ITEMS

    def test_invalid_yaml_falls_back_to_defaults(self, temp_dir: Path):
        path = temp_dir / "broken.yaml"
        path.write_text("lists: [unclosed", encoding="utf-8")
        loader = ConfigLoader(path)
        loader.load_configs()
        assert loader.get_lists_config() == {}
        assert len(loader.get_list_specs()) == 10

    def test_non_mapping_yaml_is_ignored(self, temp_dir: Path):
        path = temp_dir / "list.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        loader = ConfigLoader(path)
        loader.load_configs()
        assert loader.get_lists_config() == {}

    def test_invalid_entry_names_position(self, temp_dir: Path):
        path = temp_dir / "lists.yaml"
        path.write_text(
            yaml.safe_dump({"lists": [{"title": "ok"}, {"title": "bad", "kind": "stars"}]}),
            encoding="utf-8",
        )
        loader = ConfigLoader(path)
        loader.load_configs()
        with pytest.raises(ConfigurationError, match=r"List #2 in lists\.yaml"):
            loader.get_list_specs()

    def test_lists_must_be_a_list(self, temp_dir: Path):
        path = temp_dir / "lists.yaml"
        path.write_text("lists: {title: x}\n", encoding="utf-8")
        loader = ConfigLoader(path)
        loader.load_configs()
        with pytest.raises(ConfigurationError):
            loader.get_list_specs()

    def test_sample_items_must_be_strings(self, temp_dir: Path):
        path = temp_dir / "lists.yaml"
        path.write_text("sample_items: [1, 2]\n", encoding="utf-8")
        loader = ConfigLoader(path)
        loader.load_configs()
        with pytest.raises(ConfigurationError, match="sample_items"):
            loader.get_sample_items()


class TestGetConfigLoader:
    """Tests for the get_config_loader() singleton."""

    def test_returns_same_instance(self):
        assert get_config_loader() is get_config_loader()

    def test_instance_is_loaded(self):
        assert get_config_loader().is_loaded() is True

    def test_new_path_replaces_instance(self, lists_file: Path):
        default_loader = get_config_loader()
        custom_loader = get_config_loader(lists_file)

        assert custom_loader is not default_loader
        assert custom_loader.lists_path == lists_file
        assert get_config_loader() is custom_loader
        assert custom_loader.get_list_specs()[0].kind is ListStyleKind.ALIGNED_BULLET
