"""Copying, joining, trimming and mapping strings with C string semantics.

A string ends at its first NUL character, as a C string would. Functions
that write into a fixed-size destination return the new text together
with the length the C routine reports.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

from .strings import strlen


def _body(text: str) -> str:
    return text[:strlen(text)]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits (at most size - 1 characters) and the full
    length of src. A size of 0 copies nothing.
    """
    _check_non_negative("size", size)
    text = _body(src)
    copied = text[:size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length the append would have had
    with room to spare: len(src) + size when the buffer is already shorter
    than dst, otherwise len(dst) + len(src).
    """
    _check_non_negative("size", size)
    head = _body(dst)
    tail = _body(src)
    if size == 0:
        return head, len(tail)
    room = max(0, size - 1 - len(head))
    result = head + tail[:room]
    if size < len(result):
        return result, len(tail) + size
    return result, len(head) + len(tail)


def strdup(text: str) -> str:
    """A copy of text up to its first NUL."""
    return _body(text)


def strndup(text: str, n: int) -> str:
    """A copy of the first n characters of text."""
    _check_non_negative("n", n)
    return text[:n]


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of text starting at start.

    A start past the end gives the empty string; a missing text gives None.
    """
    if text is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    body = _body(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strjoin(first: Optional[str], second: str) -> str:
    """first followed by second; a missing first gives second unchanged."""
    if first is None:
        return second
    return _body(first) + _body(second)


def strjoin_char(text: Optional[str], c: str) -> str:
    """text with one character appended; a missing text counts as empty."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _body(text or "") + c


def strtrim(text: str, charset: str) -> str:
    """text without the leading and trailing characters found in charset."""
    return _body(text).strip(_body(charset))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from func(index, char) for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_body(text)))


def striteri(
    text: Union[str, MutableSequence[str]],
    func: Callable[[int, MutableSequence[str]], None],
) -> str:
    """Call func(index, chars) for every character, letting it edit chars.

    chars is a mutable list of the characters (or the sequence itself when
    one is given), so func may replace chars[index] in place. Returns the
    resulting text.
    """
    if isinstance(text, str):
        chars: MutableSequence[str] = list(_body(text))
    else:
        chars = text
    for index, _ in enumerate(chars):
        func(index, chars)
    return "".join(chars)