"""Bounded copies into NUL-terminated byte buffers, and per-character mapping.

A buffer holds a C-style string: its content runs up to the first NUL
byte, or to the end of the buffer if it holds none.  Sizes count the whole
destination buffer, terminator included.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _c_string(data: ReadableBuffer) -> bytes:
    """Return the content of ``data`` up to, not including, its first NUL."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _check_room(dst: bytearray, needed: int) -> None:
    if needed > len(dst):
        raise ValueError(
            f"destination of {len(dst)} bytes cannot hold {needed} bytes"
        )


def strlcpy(dst: bytearray, src: ReadableBuffer, size: int) -> int:
    """Copy the string in ``src`` into ``dst``, which has room for ``size`` bytes.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated;
    a ``size`` of 0 leaves ``dst`` untouched.  Returns the length of the
    source string, so a result of ``size`` or more means it was truncated.
    """
    _check_size(size)
    text = _c_string(src)
    if size == 0:
        return len(text)
    copied = text[: size - 1]
    _check_room(dst, len(copied) + 1)
    dst[: len(copied) + 1] = copied + b"\0"
    return len(text)


def strlcat(dst: bytearray, src: ReadableBuffer, size: int) -> int:
    """Append the string in ``src`` to the string in ``dst``, within ``size`` bytes.

    The result is NUL-terminated when anything is appended.  Returns the
    length of the string it tried to build: the length of ``dst`` (capped
    at ``size``) plus the length of ``src``.
    """
    _check_size(size)
    text = _c_string(src)
    dst_len = min(len(_c_string(dst)), size)
    if dst_len == size:
        return dst_len + len(text)
    room = size - dst_len
    if len(text) < room:
        appended = text + b"\0"
    else:
        appended = text[: room - 1] + b"\0"
    _check_room(dst, dst_len + len(appended))
    dst[dst_len:dst_len + len(appended)] = appended
    return dst_len + len(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of ``func(index, char)`` for every character."""
    if func is None:
        raise TypeError("strmapi requires a function")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on every item of ``chars``, in order.

    When ``func`` returns something other than ``None``, that value
    replaces the item in place.
    """
    if func is None:
        raise TypeError("striteri requires a function")
    for index, item in enumerate(chars):
        replacement = func(index, item)
        if replacement is not None:
            chars[index] = replacement