import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.memory import INT_MAX, bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == b"lo"


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert list(buf) == [0x41, 0x41]


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == bytearray(b"abc")


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_memset_on_bytes_is_rejected():
    with pytest.raises(TypeError):
        memset(b"abc", 0, 1)


def test_calloc_zeroed():
    buf = calloc(4, 8)
    assert len(buf) == 32
    assert not any(buf)


@pytest.mark.parametrize("count,size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_zero_gives_empty(count, size):
    assert calloc(count, size) == bytearray()


@pytest.mark.parametrize("count,size", [(INT_MAX + 1, 1), (1, INT_MAX + 1), (2**16, 2**16)])
def test_calloc_overflow(count, size):
    with pytest.raises(OverflowError):
        calloc(count, size)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    assert memchr(b"banana", ord("a"), 6) == 1


def test_memchr_not_found_within_n():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_finds_nul_byte():
    assert memchr(b"ab\x00cd", 0, 5) == 2


def test_memchr_uses_low_byte():
    assert memchr(b"xyzA", 0x141, 4) == 3


def test_memcmp_equal():
    assert memcmp(b"abcd", b"abce", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_past_nul():
    assert memcmp(b"a\x00b", b"a\x00c", 3) < 0


def test_memcmp_zero_count():
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc\x00ef", 4)
    assert result is dest
    assert dest == bytearray(b"abc\x00..")


def test_memcpy_dest_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


@given(st.binary(max_size=64), st.data())
def test_memcpy_invariant(src, data):
    n = data.draw(st.integers(0, len(src)))
    dest = bytearray(len(src) + 3)
    memcpy(dest, src, n)
    assert dest[:n] == src[:n]
    assert dest[n:] == bytes(len(dest) - n)


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcd"), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcd"), 0, -1, 1)


@given(st.binary(min_size=1, max_size=64), st.data())
def test_memmove_overlap_invariant(original, data):
    size = len(original)
    n = data.draw(st.integers(0, size))
    src = data.draw(st.integers(0, size - n))
    dest = data.draw(st.integers(0, size - n))
    buf = bytearray(original)
    result = memmove(buf, dest, src, n)
    assert result is buf
    assert buf[dest:dest + n] == original[src:src + n]
    assert buf[:dest] == original[:dest]
    assert buf[dest + n:] == original[dest + n:]