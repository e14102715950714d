"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2, with small string, buffer and I/O helpers."""

__version__ = "1.0.0"