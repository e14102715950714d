"""Bit-level wire format: one signal per bit, least significant bit first."""

from __future__ import annotations

import signal
from typing import Iterator

SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


def _payload(message: str | bytes) -> bytes:
    """Return the bytes of message up to its first NUL."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return data.partition(b"\0")[0]


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of message and its NUL terminator, low bit of each byte first."""
    for byte in _payload(message) + b"\0":
        for shift in range(8):
            yield (byte >> shift) & 1


def bit_to_signal(bit: int) -> signal.Signals:
    """Map a 0 bit to SIGUSR1 and a 1 bit to SIGUSR2."""
    if bit not in (0, 1):
        raise ValueError(f"not a bit: {bit!r}")
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def signal_to_bit(signum: int) -> int:
    """Map SIGUSR1 to 0 and SIGUSR2 to 1."""
    if signum == signal.SIGUSR1:
        return 0
    if signum == signal.SIGUSR2:
        return 1
    raise ValueError(f"signal {signum} carries no bit")


class Assembler:
    """Collect bits into bytes and bytes into NUL-terminated messages."""

    def __init__(self) -> None:
        self._message = bytearray()
        self._byte = 0
        self._count = 0

    def feed(self, bit: int) -> bytes | None:
        """Add one bit; return the finished message when a NUL byte completes it."""
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")
        self._byte |= int(bit) << self._count
        self._count += 1
        if self._count < 8:
            return None
        byte, self._byte, self._count = self._byte, 0, 0
        if byte:
            self._message.append(byte)
            return None
        message = bytes(self._message)
        self._message.clear()
        return message