"""String searching, comparison, slicing, splitting and joining.

Positions are returned as indexes into the string, and ``None`` stands for
"not found".  A search for the NUL character ``"\\0"`` finds the end of
the string, where a terminated string keeps its terminator.  Counts and
offsets must not be negative.
"""

from __future__ import annotations

from typing import List, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: Char) -> List[str]:
    """Split ``text`` on the character ``sep``.

    Runs of separators count as one, and separators at either end are
    ignored, so no word in the result is empty.
    """
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or ``None``.

    Searching for ``"\\0"`` in a string without one gives ``len(text)``.
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or ``None``.

    Searching for ``"\\0"`` gives ``len(text)``, the terminator's place.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _difference(first: str, second: str, limit: Optional[int]) -> int:
    """Difference of the first differing code points, the end counting as 0."""
    span = max(len(first), len(second))
    if limit is not None:
        span = min(span, limit)
    for i in range(span):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b:
            return a - b
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings by code point.

    Returns 0 if they are equal, otherwise the difference between the
    first pair of characters that differ; the end of a string counts as 0.
    """
    return _difference(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, as :func:`strcmp` does."""
    _check_non_negative("n", n)
    return _difference(first, second, n)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` lying wholly in the first ``length``
    characters of ``big``, or ``None``.  An empty ``little`` is found at 0."""
    _check_non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A ``start`` at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second