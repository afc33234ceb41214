"""Byte-buffer operations on bytearrays and other bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c within the first n bytes, or None."""
    if n <= 0:
        return None
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes among the first n, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy n bytes from the start of src to the start of dst; return dst."""
    _check_count(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move n bytes inside dst from src_offset to dst_offset; overlap is safe."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    if max(dst_offset, src_offset) + n > len(dst):
        raise ValueError("move runs past the end of the buffer")
    dst[dst_offset:dst_offset + n] = bytes(dst[src_offset:src_offset + n])
    return dst


def memccpy(dst: bytearray, src: bytes, c: int, n: int) -> Optional[int]:
    """Copy up to n bytes, stopping after the first byte equal to c.

    Returns the index in dst just past the copied c, or None when c was
    not among the first n bytes (all n bytes are then copied).
    """
    _check_count(n, dst, src)
    chunk = bytes(src[:n])
    index = chunk.find(bytes([c & 0xFF]))
    if index == -1:
        dst[:n] = chunk
        return None
    dst[:index + 1] = chunk[:index + 1]
    return index + 1