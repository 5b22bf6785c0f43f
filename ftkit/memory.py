"""Byte-buffer helpers: fill, zero, search, compare and copy.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``).  Buffers that are only read may be any bytes-like object.
A count that is negative or runs past the end of a buffer raises
``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

INT_MAX = 2**31 - 1

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    """Ensure ``n`` bytes can be taken from every buffer given."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def _check_span(buffer: ReadableBuffer, offset: int, n: int) -> None:
    """Ensure ``buffer[offset:offset + n]`` lies wholly inside the buffer."""
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if offset + n > len(buffer):
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer length {len(buffer)}"
        )


def memset(buffer: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(n, buffer)
    buffer[:n] = bytes((value & 0xFF,)) * n
    return buffer


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes.

    A zero count or size gives an empty buffer.  A request whose element
    count, element size or total exceeds ``INT_MAX`` raises ``OverflowError``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > INT_MAX or size > INT_MAX or count * size > INT_MAX:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of ``value``
    within the first ``n`` bytes of ``data``, or ``None`` if there is none."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned bytes.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    _check_span(buffer, src, n)
    _check_span(buffer, dest, n)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer