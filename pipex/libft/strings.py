"""String searching, comparison and splitting with C string semantics.

A string ends at its first NUL character, as a C string would. Searches
return indices into the string, or None where nothing is found.
"""

from __future__ import annotations

import operator
from typing import List, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _terminated(text: str) -> str:
    """The part of text before its first NUL."""
    end = text.find(_NUL)
    return text if end == -1 else text[:end]


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(text))


def split(text: str, sep: Char) -> List[str]:
    """Split text on the separator character, dropping empty words."""
    separator = _char(sep)
    return [word for word in _terminated(text).split(separator) if word]


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    target = _char(c)
    body = _terminated(text)
    if target == _NUL:
        return len(body)
    index = body.find(target)
    return None if index == -1 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    target = _char(c)
    body = _terminated(text)
    if target == _NUL:
        return len(body)
    index = body.rfind(target)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first needle lying wholly within the first n characters.

    An empty needle is found at index 0.
    """
    wanted = _terminated(needle)
    if not wanted:
        return 0
    if n <= 0:
        return None
    index = _terminated(haystack)[:n].find(wanted)
    return None if index == -1 else index


def strcmp(a: Optional[str], b: Optional[str]) -> int:
    """Difference of the first differing characters, 0 when equal.

    A missing string (None) compares equal to anything.
    """
    if a is None or b is None:
        return 0
    return _compare(_terminated(a), _terminated(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Like strcmp, but looking at no more than the first n characters."""
    if n <= 0:
        return 0
    return _compare(_terminated(a)[:n], _terminated(b)[:n])


def _compare(a: str, b: str) -> int:
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])