"""String routines with NUL-terminated semantics on Python strings.

A ``"\\0"`` inside a string ends it, as it would in a C buffer; everything
after it is ignored. Positions are returned as indices, or ``None`` where
nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"
_INT_BITS = 32


def _terminated(text: str) -> str:
    return text.partition("\0")[0]


def _as_char(char: int | str) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return char
    return chr(char & 0xFF)


def _codes(text: str) -> Iterator[int]:
    for ch in _terminated(text):
        yield ord(ch)


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(text))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters.

    Returns the copied string (at most size - 1 characters, empty when size
    is 0) and the full length of src, so truncation shows as total >= size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _terminated(src)
    copied = source[: size - 1] if size else ""
    return copied, len(source)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting string and the length it tried to create. When dest
    already fills the buffer, dest is returned unchanged and the length is
    size plus the length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _terminated(dest)
    source = _terminated(src)
    used = min(len(head), size)
    if used < size:
        head = head + source[: size - used - 1]
    return head, used + len(source)


def strchr(text: str, char: int | str) -> int | None:
    """Return the index of the first occurrence of char, or None.

    Looking for NUL gives the index of the terminator.
    """
    target = _as_char(char)
    body = _terminated(text)
    if target == "\0":
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: int | str) -> int | None:
    """Return the index of the last occurrence of char, or None.

    Looking for NUL gives the index of the terminator.
    """
    target = _as_char(char)
    body = _terminated(text)
    if target == "\0":
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters; return the difference of the first mismatch."""
    if count < 0:
        raise ValueError("count must not be negative")
    pairs = zip_longest(_codes(first), _codes(second), fillvalue=0)
    for a, b in islice(pairs, count):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find needle wholly within the first length characters of haystack.

    Returns its index, 0 for an empty needle, or None if it is not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = _terminated(haystack)[:length].find(pattern)
    return None if index < 0 else index


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. Anything unparsable yields 0. The result
    wraps around to a signed 32-bit value.
    """
    body = _terminated(text)
    pos = 0
    while pos < len(body) and body[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(body) and body[pos] in "+-":
        if body[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in body[pos:]:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    half = 1 << (_INT_BITS - 1)
    return (sign * value + half) % (1 << _INT_BITS) - half


def strdup(text: str) -> str:
    """Return a copy of text up to its first NUL."""
    return _terminated(text)