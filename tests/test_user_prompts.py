"""Tests for modules/user_prompts.py - Console output and selection prompts."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from modules.user_prompts import (
    Colors,
    colorize,
    exit_program,
    parse_selection,
    print_error,
    print_success,
    prompt_selection,
    prompt_text,
    set_color_enabled,
)


# ============================================================================
# Colors
# ============================================================================
class TestColorize:
    """Tests for colorize() and set_color_enabled()."""

    def test_disabled_returns_plain_text(self):
        assert colorize("hello", Colors.FAIL) == "hello"

    def test_enabled_wraps_with_codes(self):
        set_color_enabled(True)
        assert colorize("hello", Colors.FAIL) == f"{Colors.FAIL}hello{Colors.ENDC}"

    def test_no_codes(self):
        set_color_enabled(True)
        assert colorize("hello") == "hello"


class TestPrintHelpers:
    """Tests for the print_* helpers."""

    def test_success_symbol(self, capsys):
        print_success("done")
        assert capsys.readouterr().out == "✓ done\n"

    def test_error_symbol(self, capsys):
        print_error("failed")
        assert capsys.readouterr().out == "✗ failed\n"

    def test_exit_program(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            exit_program("bye", exit_code=3)
        assert excinfo.value.code == 3
        assert "bye" in capsys.readouterr().out


# ============================================================================
# parse_selection
# ============================================================================
class TestParseSelection:
    """Tests for parse_selection()."""

    def test_single(self):
        assert parse_selection("2", 5) == [1]

    def test_list_and_range(self):
        assert parse_selection("1, 3-5", 5) == [0, 2, 3, 4]

    def test_semicolons_and_duplicates(self):
        assert parse_selection("2;2;1", 3) == [0, 1]

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_selection("6", 5)

    def test_bad_range(self):
        with pytest.raises(ValueError, match="Range"):
            parse_selection("4-2", 5)

    def test_not_a_number(self):
        with pytest.raises(ValueError, match="Invalid input"):
            parse_selection("two", 5)


# ============================================================================
# Prompts
# ============================================================================
class TestPromptText:
    """Tests for prompt_text()."""

    @patch("builtins.input", return_value="  XIV  ")
    def test_returns_stripped_text(self, _mock_input):
        assert prompt_text("Numeral") == "XIV"

    @patch("builtins.input", return_value="Quit")
    def test_exit_command_returns_none(self, _mock_input):
        assert prompt_text("Numeral") is None

    @patch("builtins.input", return_value="q")
    def test_exit_disabled(self, _mock_input):
        assert prompt_text("Numeral", allow_exit=False) == "q"


class TestPromptSelection:
    """Tests for prompt_selection()."""

    ITEMS = ["alpha", "beta", "gamma"]

    @patch("builtins.input", return_value="2")
    def test_single_choice(self, _mock_input, capsys):
        assert prompt_selection(self.ITEMS, str) == ["beta"]
        assert "Selected: beta" in capsys.readouterr().out

    @patch("builtins.input", return_value="all")
    def test_all(self, _mock_input):
        assert prompt_selection(self.ITEMS, str) == self.ITEMS

    @patch("builtins.input", side_effect=["9", "1-2"])
    def test_retries_after_invalid_choice(self, _mock_input, capsys):
        assert prompt_selection(self.ITEMS, str) == ["alpha", "beta"]
        assert "Invalid selection" in capsys.readouterr().out

    @patch("builtins.input", return_value="back")
    def test_back(self, _mock_input):
        assert prompt_selection(self.ITEMS, str, allow_back=True) is None

    @patch("builtins.input", return_value="exit")
    def test_exit(self, _mock_input):
        with pytest.raises(SystemExit):
            prompt_selection(self.ITEMS, str)

    def test_empty_items(self, capsys):
        assert prompt_selection([], str) == []
        assert "No items" in capsys.readouterr().out
