"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO

from minitalk.cstrings import strdup
from minitalk.textops import itoa


def putchar_fd(char: int | str, stream: TextIO) -> None:
    """Write a single character, given as a one-character string or a code."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        stream.write(char)
    else:
        stream.write(chr(char & 0xFF))


def putstr_fd(text: str | None, stream: TextIO) -> None:
    """Write text up to its first NUL; a missing text writes nothing."""
    if text is not None:
        stream.write(strdup(text))


def putendl_fd(text: str | None, stream: TextIO) -> None:
    """Write text followed by a newline."""
    putstr_fd(text, stream)
    stream.write("\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write the decimal text of a signed 32-bit integer."""
    stream.write(itoa(number))