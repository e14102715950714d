"""Higher-level string building: slicing, joining, trimming, splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence

from minitalk.cstrings import strdup, strlen

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= strlen(text):
        return ""
    return strdup(text)[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return strdup(first) + strdup(second)


def strtrim(text: str | None, charset: str | None) -> str:
    """Remove characters in charset from both ends of text.

    A missing text or charset yields an empty string.
    """
    if text is None or charset is None:
        return ""
    return strdup(text).strip(strdup(charset))


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in strdup(text).split(sep) if word]


def itoa(number: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError("number does not fit in a signed 32-bit integer")
    return str(number)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying func to each index and character."""
    return "".join(func(index, ch) for index, ch in enumerate(strdup(text)))


def striteri(
    buffer: MutableSequence, func: Callable[[int, object], object]
) -> None:
    """Replace each element of buffer, up to a NUL, with func(index, element)."""
    for index, item in enumerate(buffer):
        if item in ("\0", 0):
            break
        buffer[index] = func(index, item)