"""Character classification and case conversion on character codes."""

from __future__ import annotations

from typing import overload


def _code(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return ord(value)
    return value


def is_alpha(code: int | str) -> bool:
    """Return whether the code is an ASCII letter."""
    c = _code(code)
    return ord("a") <= c <= ord("z") or ord("A") <= c <= ord("Z")


def is_digit(code: int | str) -> bool:
    """Return whether the code is an ASCII decimal digit."""
    c = _code(code)
    return ord("0") <= c <= ord("9")


def is_alnum(code: int | str) -> bool:
    """Return whether the code is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """Return whether the code lies in the 7-bit ASCII range."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """Return whether the code is a printable ASCII character."""
    return 32 <= _code(code) <= 126


@overload
def to_upper(code: int) -> int: ...
@overload
def to_upper(code: str) -> str: ...


def to_upper(code):
    """Map a lower-case ASCII letter to upper case; leave anything else alone."""
    c = _code(code)
    if ord("a") <= c <= ord("z"):
        c -= 32
    return chr(c) if isinstance(code, str) else c


@overload
def to_lower(code: int) -> int: ...
@overload
def to_lower(code: str) -> str: ...


def to_lower(code):
    """Map an upper-case ASCII letter to lower case; leave anything else alone."""
    c = _code(code)
    if ord("A") <= c <= ord("Z"):
        c += 32
    return chr(c) if isinstance(code, str) else c