"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case conversions return the same kind of value they were given.
"""

from __future__ import annotations

import operator
from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, low: str, high: str, shift: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; leave anything else."""
    return _convert(c, "A", "Z", 32)


def to_upper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; leave anything else."""
    return _convert(c, "a", "z", -32)


def str_is_numeric(text: str) -> bool:
    """True when every character is an ASCII digit (the empty string counts)."""
    return all(is_digit(ch) for ch in text)