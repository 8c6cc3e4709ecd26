"""Tests for modules/roman_numerals.py - Roman numeral conversion."""

from __future__ import annotations

import re

import pytest

from modules.constants import MAX_ROMAN_VALUE, OUT_OF_RANGE_MESSAGE
from modules.error_handler import PlaygroundError, RomanNumeralRangeError
from modules.roman_numerals import (
    ROMAN_NUMERAL_VALUES,
    convert,
    int_to_roman,
    is_roman_numeral,
    roman_to_int,
)

_CANONICAL = re.compile(r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$")


# ============================================================================
# convert
# ============================================================================
class TestConvert:
    """Tests for convert()."""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "I"),
            (3, "III"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (900, "CM"),
            (944, "CMXLIV"),
            (1000, "M"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_known_values(self, number, expected):
        """Known numbers convert to their standard numerals."""
        assert convert(number) == expected

    @pytest.mark.parametrize("number", [0, -5, 4000, 10000])
    def test_out_of_range_returns_message(self, number):
        """Numbers outside 1..3999 return the range message instead of raising."""
        assert convert(number) == OUT_OF_RANGE_MESSAGE
        assert convert(number) == "Number must be between 1 and 3999"

    def test_output_uses_roman_alphabet_only(self):
        """Every result is made of I, V, X, L, C, D and M."""
        for number in range(1, MAX_ROMAN_VALUE + 1):
            assert set(convert(number)) <= set("IVXLCDM")

    def test_results_are_distinct(self):
        """Different numbers never share a numeral."""
        numerals = [convert(number) for number in range(1, MAX_ROMAN_VALUE + 1)]
        assert len(set(numerals)) == MAX_ROMAN_VALUE

    def test_results_are_canonical(self):
        """Every numeral uses subtractive pairs only in their standard places."""
        for number in range(1, MAX_ROMAN_VALUE + 1):
            assert _CANONICAL.match(convert(number))

    def test_no_symbol_repeats_four_times(self):
        """No symbol appears four times in a row."""
        for number in range(1, MAX_ROMAN_VALUE + 1):
            numeral = convert(number)
            for symbol in "IXCM":
                assert symbol * 4 not in numeral


# ============================================================================
# int_to_roman
# ============================================================================
class TestIntToRoman:
    """Tests for int_to_roman()."""

    def test_matches_convert_in_range(self):
        """int_to_roman agrees with convert() for valid numbers."""
        for number in (1, 58, 444, 1987, 3888):
            assert int_to_roman(number) == convert(number)

    def test_lowercase(self):
        """lowercase=True returns lowercase numerals."""
        assert int_to_roman(1994, lowercase=True) == "mcmxciv"

    @pytest.mark.parametrize("number", [0, -1, 4000])
    def test_out_of_range_raises(self, number):
        """Numbers outside 1..3999 raise RomanNumeralRangeError."""
        with pytest.raises(RomanNumeralRangeError) as excinfo:
            int_to_roman(number)
        assert excinfo.value.value == number
        assert str(excinfo.value) == OUT_OF_RANGE_MESSAGE

    def test_range_error_is_value_error(self):
        """RomanNumeralRangeError can be caught as ValueError or PlaygroundError."""
        with pytest.raises(ValueError):
            int_to_roman(0)
        with pytest.raises(PlaygroundError):
            int_to_roman(0)

    def test_value_table_is_descending(self):
        """The conversion table is ordered from largest to smallest value."""
        values = [value for value, _ in ROMAN_NUMERAL_VALUES]
        assert values == sorted(values, reverse=True)
        assert values[0] == 1000 and values[-1] == 1


# ============================================================================
# roman_to_int / is_roman_numeral
# ============================================================================
class TestRomanToInt:
    """Tests for roman_to_int()."""

    def test_inverse_of_convert(self):
        """roman_to_int(convert(n)) == n for every valid n."""
        for number in range(1, MAX_ROMAN_VALUE + 1):
            assert roman_to_int(convert(number)) == number

    def test_case_and_whitespace_ignored(self):
        """Lowercase input and surrounding whitespace are accepted."""
        assert roman_to_int("  mcmxciv ") == 1994

    @pytest.mark.parametrize("numeral", ["IIII", "IC", "VX", "MMMM", "IIV", "XM"])
    def test_non_canonical_rejected(self, numeral):
        """Numerals not in canonical form raise ValueError."""
        with pytest.raises(ValueError, match="canonical"):
            roman_to_int(numeral)

    def test_invalid_character_rejected(self):
        """Characters outside the Roman alphabet raise ValueError."""
        with pytest.raises(ValueError, match="character"):
            roman_to_int("XIZ")

    def test_empty_rejected(self):
        """Empty input raises ValueError."""
        with pytest.raises(ValueError, match="Empty"):
            roman_to_int("   ")


class TestIsRomanNumeral:
    """Tests for is_roman_numeral()."""

    @pytest.mark.parametrize("text, expected", [
        ("XIV", True),
        ("xiv", True),
        ("IIII", False),
        ("ABC", False),
        ("", False),
    ])
    def test_detection(self, text, expected):
        """Only canonical numerals are recognized."""
        assert is_roman_numeral(text) is expected
