import pytest

from pipex.libft.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 3) is None
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_past_end_rejected():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


@pytest.mark.parametrize("count, size", [(0, 4), (3, 4), (5, 1)])
def test_calloc_is_zero_filled(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert all(byte == 0 for byte in buf)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_fills_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 2)
    assert result is buf
    assert buf[:2] == b"xx"
    assert buf[2:] == b"llo"


def test_memset_uses_low_byte():
    buf = bytearray(1)
    memset(buf, 256 + ord("z"), 1)
    assert buf == b"z"


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 3) is None
    assert memchr(b"hello", ord("h"), 0) is None
    assert memchr(b"hello", ord("h"), -4) is None


def test_memchr_finds_nul_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(b"\x00")


def test_memcmp_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abx", b"aby", 2) == 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"a", b"c", 1) == ord("a") - ord("c")
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF


def test_memcmp_negative_count_rejected():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)


def test_memcpy_copies_prefix():
    dst = bytearray(5)
    assert memcpy(dst, b"xyz", 3) is dst
    assert dst[:3] == b"xyz"
    assert dst[3:] == bytes(2)
    assert len(dst) == 5


def test_memcpy_past_end_rejected():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"xyz", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    assert memmove(buf, 2, 0, 4) is buf
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[0:4]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range_rejected():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memccpy_stops_after_marker():
    src = b"hello world"
    dst = bytearray(len(src))
    pos = memccpy(dst, src, ord(" "), len(src))
    assert pos == src.index(b" ") + 1
    assert dst[:pos] == src[:pos]
    assert dst[pos:] == bytes(len(src) - pos)


def test_memccpy_without_marker_copies_all():
    src = b"hello"
    dst = bytearray(5)
    assert memccpy(dst, src, ord("z"), 5) is None
    assert dst == src


def test_memccpy_marker_beyond_limit():
    src = b"hello"
    dst = bytearray(5)
    assert memccpy(dst, src, ord("o"), 3) is None
    assert dst[:3] == src[:3]
    assert dst[3:] == bytes(2)