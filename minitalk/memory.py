"""Byte-buffer operations on bytearrays and bytes-like objects."""

from __future__ import annotations


def _check_count(count: int, *sizes: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if any(count > size for size in sizes):
        raise IndexError("count exceeds buffer length")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first count bytes of buffer with value (taken modulo 256)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first count bytes of buffer."""
    return memset(buffer, 0, count)


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy count bytes from src to the start of dest."""
    _check_count(count, len(dest), len(src))
    dest[:count] = src[:count]
    return dest


def memmove(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Move count bytes within buffer, correct even when the regions overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dest_offset, len(buffer) - src_offset)
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to value among the first count, or None."""
    _check_count(count, len(data))
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Compare the first count bytes; return -1, 0 or 1."""
    _check_count(count, len(first), len(second))
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return 1 if a > b else -1
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)