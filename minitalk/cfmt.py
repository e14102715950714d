"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

from minitalk.cstrings import strdup

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF
_INT_HALF = 1 << 31


def _signed32(value: int) -> int:
    return ((value + _INT_HALF) & _UINT_MASK) - _INT_HALF


def _convert_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(arg & 0xFF)


def _convert_str(arg: Any) -> str:
    if arg is None:
        return "(null)"
    return strdup(arg)


def _convert_ptr(arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg & _PTR_MASK
    else:
        address = id(arg) & _PTR_MASK
    if not address:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _convert_char(arg)
    if spec == "s":
        return _convert_str(arg)
    if spec == "p":
        return _convert_ptr(arg)
    if spec in "di":
        return str(_signed32(arg))
    if spec == "u":
        return str(arg & _UINT_MASK)
    return format(arg & _UINT_MASK, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with args and return the resulting text.

    An unknown conversion, or a lone '%' at the end, produces nothing and
    consumes no argument. Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(strdup(fmt))
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            if spec:
                pieces.append(_convert(spec, remaining))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)