"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

import operator

_INT_MAX = 2147483647
_WHITESPACE = "\t\n\v\f\r "


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed int.

    Leading whitespace and one optional sign are skipped and parsing stops
    at the first non-digit. When the number keeps going past the 32-bit
    range, -1 is returned for a positive value and 0 for a negative one;
    a ten-digit value just outside the range wraps around.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        if result > _INT_MAX and sign > 0:
            return -1
        if result > _INT_MAX and sign < 0:
            return 0
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap32(_wrap32(result) * sign)


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(operator.index(n))