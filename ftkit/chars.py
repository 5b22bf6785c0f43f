"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind as they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACE_CODES = frozenset((9, 10, 11, 12, 13, 32))


def _code(c: Char) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def is_alpha(c: Char) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True if ``c`` lies in the ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True if ``c`` is a printable ASCII character (32-126)."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES


def to_upper(c: Char) -> Char:
    """Convert an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Convert an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code