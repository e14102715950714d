"""Message servers that receive text one signal per bit."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import Callable, Protocol, TextIO

from minitalk.cfmt import format_printf
from minitalk.protocol import SIGNALS, Assembler, signal_to_bit

Sender = Callable[[int, int], None]


class _Handler(Protocol):
    def handle(self, signum: int, sender: int) -> None: ...


def _report(out: TextIO, pid: int, message: bytes) -> None:
    text = message.decode("utf-8", errors="replace") if message else None
    out.write(format_printf('[Client_%d]:\n"%s"\n', pid, text))
    out.flush()


class BasicServer:
    """Decode bits from any client and acknowledge every signal with SIGUSR2."""

    def __init__(self, send: Sender = os.kill, out: TextIO | None = None) -> None:
        self.send = send
        self.out = out if out is not None else sys.stdout
        self._assembler = Assembler()

    def handle(self, signum: int, sender: int) -> None:
        """Take one bit from sender and acknowledge it."""
        message = self._assembler.feed(signal_to_bit(signum))
        if message is not None:
            _report(self.out, sender, message)
        self.send(sender, signal.SIGUSR2)


class HandshakeServer:
    """Serve one client at a time after a connection signal.

    The first signal from an idle server's point of view opens a session and
    is answered with SIGUSR1. Each bit from that client is answered with
    SIGUSR1, and the end of the message with SIGUSR2, which closes the
    session. Signals from other processes meanwhile are ignored.
    """

    def __init__(self, send: Sender = os.kill, out: TextIO | None = None) -> None:
        self.send = send
        self.out = out if out is not None else sys.stdout
        self.client: int | None = None
        self._assembler = Assembler()

    def handle(self, signum: int, sender: int) -> None:
        """Open a session, take one bit, or ignore a foreign sender."""
        if self.client is None:
            self.client = sender
            self.send(sender, signal.SIGUSR1)
            return
        if sender != self.client:
            return
        message = self._assembler.feed(signal_to_bit(signum))
        if message is None:
            self.send(sender, signal.SIGUSR1)
            return
        _report(self.out, sender, message)
        self.send(sender, signal.SIGUSR2)
        self.client = None


def serve(handler: _Handler, out: TextIO | None = None) -> None:
    """Announce the process id and pass every incoming bit signal to handler."""
    out = out if out is not None else sys.stdout
    out.write(format_printf("Server_PID = [%d]\n", os.getpid()))
    out.flush()
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, SIGNALS)
    try:
        while True:
            info = signal.sigwaitinfo(SIGNALS)
            handler.handle(info.si_signo, info.si_pid)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> None:
    """Run a server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="minitalk-server", description="Receive text sent bit by bit as signals."
    )
    parser.add_argument(
        "--handshake",
        action="store_true",
        help="serve one client at a time and confirm delivery",
    )
    args = parser.parse_args(argv)
    handler = HandshakeServer() if args.handshake else BasicServer()
    serve(handler, sys.stdout)


if __name__ == "__main__":
    main()