"""Reading lines from file descriptors with a per-descriptor buffer."""

from __future__ import annotations

import os
from typing import Iterator

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read one line at a time from any number of file descriptors.

    Data read past a newline is kept per descriptor for the next call.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line from fd, newline included, or None at end of input."""
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        data = self._pending.pop(fd, b"")
        while b"\n" not in data:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            data += chunk
        if not data:
            return None
        line, newline, rest = data.partition(b"\n")
        if rest:
            self._pending[fd] = rest
        return line + newline


def iter_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of fd."""
    reader = LineReader(buffer_size)
    while (line := reader.next_line(fd)) is not None:
        yield line