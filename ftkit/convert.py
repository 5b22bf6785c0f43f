"""Conversions between strings and integers.

The parsers skip leading whitespace, accept one optional sign and stop at
the first character that is not a digit.  Results wrap around to the
width of a 32-bit ``int`` or 64-bit ``long``, as fixed-width arithmetic does.
"""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789abcdef"


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _split_sign(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign; return (sign, rest)."""
    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    rest = text[i:]
    if rest.startswith("+") and not rest.startswith("+-"):
        rest = rest[1:]
    if rest.startswith("-"):
        return -1, rest[1:]
    return 1, rest


def _parse(text: str, base: int) -> int:
    sign, rest = _split_sign(text)
    valid = _DIGITS[:base]
    result = 0
    for ch in rest:
        digit = valid.find(ch.lower()) if ch.isascii() else -1
        if digit < 0:
            break
        result = result * base + digit
    return result * sign


def atoi(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 32-bit signed int."""
    return _wrap(_parse(text, 10), 32)


def atol(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 64-bit signed long."""
    return _wrap(_parse(text, 10), 64)


def atoi_base(text: str, base: int) -> int:
    """Parse an integer prefix of ``text`` in ``base`` (2 to 16), as a 32-bit int.

    Letter digits are accepted in either case.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    return _wrap(_parse(text, base), 32)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)