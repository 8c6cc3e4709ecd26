"""Roman numeral conversion utilities."""

from __future__ import annotations

from modules.constants import MAX_ROMAN_VALUE, MIN_ROMAN_VALUE, OUT_OF_RANGE_MESSAGE
from modules.error_handler import RomanNumeralRangeError

# Roman numeral constants
ROMAN_NUMERAL_VALUES = [
    (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
    (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
    (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'), (1, 'I')
]

_SYMBOL_VALUES = {numeral: value for value, numeral in ROMAN_NUMERAL_VALUES if len(numeral) == 1}


def int_to_roman(num: int, lowercase: bool = False) -> str:
    """Convert integer to Roman numeral string.

    Args:
        num: Integer between 1 and 3999 inclusive.
        lowercase: Return lowercase numerals (e.g. for page numbers).

    Returns:
        Canonical Roman numeral string.

    Raises:
        RomanNumeralRangeError: If ``num`` is outside 1..3999.
    """
    if not MIN_ROMAN_VALUE <= num <= MAX_ROMAN_VALUE:
        raise RomanNumeralRangeError(num)
    result = []
    remaining = num
    for value, numeral in ROMAN_NUMERAL_VALUES:
        repeats, remaining = divmod(remaining, value)
        result.append(numeral * repeats)
    roman = "".join(result)
    return roman.lower() if lowercase else roman


def convert(n: int) -> str:
    """Convert ``n`` to uppercase Roman numerals.

    Out-of-range input returns the message ``"Number must be between 1 and
    3999"`` instead of raising. Use int_to_roman() to get an exception.
    """
    try:
        return int_to_roman(n)
    except RomanNumeralRangeError:
        return OUT_OF_RANGE_MESSAGE


def roman_to_int(numeral: str) -> int:
    """Convert a Roman numeral string back to an integer.

    Only canonical numerals are accepted, so the result round-trips through
    int_to_roman(). Case and surrounding whitespace are ignored.

    Raises:
        ValueError: If ``numeral`` is empty, contains characters other than
            I, V, X, L, C, D, M, or is not written in canonical form.
    """
    roman = numeral.strip().upper()
    if not roman:
        raise ValueError("Empty Roman numeral")

    total = 0
    for i, char in enumerate(roman):
        if char not in _SYMBOL_VALUES:
            raise ValueError(f"Invalid Roman numeral character: {char!r}")
        value = _SYMBOL_VALUES[char]
        if i + 1 < len(roman) and value < _SYMBOL_VALUES.get(roman[i + 1], 0):
            total -= value
        else:
            total += value

    # Additive parsing accepts forms like IIII or IC; re-encode to reject them
    if not MIN_ROMAN_VALUE <= total <= MAX_ROMAN_VALUE or int_to_roman(total) != roman:
        raise ValueError(f"Not a canonical Roman numeral: {numeral!r}")
    return total


def is_roman_numeral(text: str) -> bool:
    """Return True if ``text`` is a canonical Roman numeral in 1..3999."""
    try:
        roman_to_int(text)
    except ValueError:
        return False
    return True


__all__ = [
    "ROMAN_NUMERAL_VALUES",
    "int_to_roman",
    "convert",
    "roman_to_int",
    "is_roman_numeral",
]
