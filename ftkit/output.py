"""Writing characters, strings and numbers, and printf-style formatting.

The formatter knows ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``.  Integers are taken as 32-bit values, as the
fixed-width types they stand for, and pointers as 64-bit addresses.  An
unknown conversion writes nothing and uses no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO, Union

Char = Union[str, int]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: Char) -> str:
    """Return ``c`` as one character; integers keep only their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _signed32(value: Any) -> int:
    value = _integer(value) & _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: Char, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _stream(stream).write(_char(c))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    _stream(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    put_str(text, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    _stream(stream).write(str(_integer(n)))


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format(address & _MASK64, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _format_str,
    "d": lambda v: str(_signed32(v)),
    "i": lambda v: str(_signed32(v)),
    "u": lambda v: str(_integer(v) & _MASK32),
    "x": lambda v: format(_integer(v) & _MASK32, "x"),
    "X": lambda v: format(_integer(v) & _MASK32, "X"),
    "p": _format_pointer,
}


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Raises ``TypeError`` when there are fewer arguments than conversions.
    """
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        parts.append(convert(value))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)