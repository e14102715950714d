"""Clients that send a text message to a server one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
from typing import TextIO

from minitalk.cstrings import parse_int
from minitalk.protocol import SIGNALS, _payload, bit_to_signal, encode_bits

_FINAL_ACK_TIMEOUT = 1.0
_RETRY_DELAY = 1.0


class _Delivered(Exception):
    """The server confirmed the whole message."""


class _SignalLink:
    """Signals to one process, with acknowledgements read synchronously."""

    def __init__(self, pid: int) -> None:
        self.pid = pid
        self._previous: set[int] = set()

    def __enter__(self) -> "_SignalLink":
        self._previous = signal.pthread_sigmask(signal.SIG_BLOCK, SIGNALS)
        return self

    def __exit__(self, *exc_info: object) -> None:
        while signal.sigtimedwait(SIGNALS, 0) is not None:
            pass
        signal.pthread_sigmask(signal.SIG_SETMASK, self._previous)

    def send(self, signum: int) -> None:
        os.kill(self.pid, signum)

    def wait(self, timeout: float | None = None) -> int | None:
        if timeout is None:
            return signal.sigwaitinfo(SIGNALS).si_signo
        info = signal.sigtimedwait(SIGNALS, timeout)
        return None if info is None else info.si_signo


def _check_message(message: str | bytes) -> None:
    if not _payload(message):
        raise ValueError("message must not be empty")


def _check_pid(pid: int) -> None:
    if pid <= 0:
        raise ValueError("server pid must be positive")


def _send_basic_over(link, message: str | bytes) -> int:
    """Send each bit after the previous one was acknowledged; return bits sent."""
    _check_message(message)
    sent = 0
    for bit in encode_bits(message):
        if sent:
            link.wait()
        link.send(bit_to_signal(bit))
        sent += 1
    link.wait(_FINAL_ACK_TIMEOUT)
    return sent


def _receive(link, timeout: float | None = None) -> int | None:
    signum = link.wait(timeout)
    if signum == signal.SIGUSR2:
        raise _Delivered
    return signum


def _connect(link, out: TextIO, retry_delay: float) -> None:
    while True:
        link.send(signal.SIGUSR1)
        if _receive(link, 0) is not None:
            return
        out.write("\rSending...")
        out.flush()
        if _receive(link, retry_delay) is not None:
            return


def _send_handshake_over(
    link, message: str | bytes, out: TextIO, retry_delay: float
) -> int:
    """Connect, send the message bit by bit, and wait for the delivery notice."""
    _check_message(message)
    sent = 0
    try:
        _connect(link, out, retry_delay)
        for bit in encode_bits(message):
            if sent:
                _receive(link)
            link.send(bit_to_signal(bit))
            sent += 1
        while True:
            _receive(link)
    except _Delivered:
        out.write("\rMessage Sent!\n")
        out.flush()
    return sent


def send_basic(pid: int, message: str | bytes) -> int:
    """Send message to the server at pid, waiting for an acknowledgement per bit.

    Returns the number of bits sent. Raises ProcessLookupError when the
    server cannot be signalled.
    """
    _check_pid(pid)
    with _SignalLink(pid) as link:
        return _send_basic_over(link, message)


def send_handshake(pid: int, message: str | bytes, out: TextIO | None = None) -> int:
    """Send message to a one-client-at-a-time server and wait until it confirms.

    Progress is written to out. Returns the number of bits sent.
    """
    _check_pid(pid)
    out = out if out is not None else sys.stdout
    with _SignalLink(pid) as link:
        return _send_handshake_over(link, message, out, _RETRY_DELAY)


def _ignore(signum: int, frame: object) -> None:
    pass


def main(argv: list[str] | None = None) -> int:
    """Usage: [--handshake] PID MESSAGE. Bad arguments are silently ignored."""
    args = list(sys.argv[1:] if argv is None else argv)
    handshake = bool(args) and args[0] == "--handshake"
    if handshake:
        args = args[1:]
    if len(args) != 2 or not args[1]:
        return 0
    pid = parse_int(args[0])
    if pid <= 0:
        return 0
    for signum in SIGNALS:
        signal.signal(signum, _ignore)
    try:
        if handshake:
            send_handshake(pid, args[1], sys.stdout)
        else:
            send_basic(pid, args[1])
    except (OSError, ValueError):
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())