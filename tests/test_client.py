import io
import os
import signal
from collections import deque

import pytest

from minitalk.client import (
    _send_basic_over,
    _send_handshake_over,
    main,
    send_basic,
    send_handshake,
)
from minitalk.protocol import encode_bits, signal_to_bit
from minitalk.server import BasicServer, HandshakeServer

CLIENT_PID = 4242


class LoopbackLink:
    """Connects a client directly to an in-process server handler."""

    def __init__(self, server_cls, drop=0):
        self.acks = deque()
        self.sent = []
        self.drop = drop
        self.server_out = io.StringIO()
        self.server = server_cls(send=self._ack, out=self.server_out)

    def _ack(self, pid, signum):
        assert pid == CLIENT_PID
        self.acks.append(signum)

    def send(self, signum):
        self.sent.append(signum)
        if self.drop:
            self.drop -= 1
            return
        self.server.handle(signum, CLIENT_PID)

    def wait(self, timeout=None):
        if self.acks:
            return self.acks.popleft()
        if timeout is None:
            raise AssertionError("client would block forever")
        return None


class AlwaysDoneLink:
    def __init__(self):
        self.sent = []

    def send(self, signum):
        self.sent.append(signum)

    def wait(self, timeout=None):
        return signal.SIGUSR2


def test_basic_client_delivers_message():
    link = LoopbackLink(BasicServer)
    sent = _send_basic_over(link, "hello")
    assert sent == 8 * (len("hello") + 1)
    assert link.server_out.getvalue() == '[Client_4242]:\n"hello"\n'


def test_basic_client_signals_match_encoding():
    link = LoopbackLink(BasicServer)
    _send_basic_over(link, "hey")
    assert [signal_to_bit(s) for s in link.sent] == list(encode_bits("hey"))
    assert not link.acks


def test_handshake_client_delivers_and_confirms():
    link = LoopbackLink(HandshakeServer)
    out = io.StringIO()
    sent = _send_handshake_over(link, "hello", out, 0)
    assert out.getvalue() == "\rMessage Sent!\n"
    assert link.server_out.getvalue() == '[Client_4242]:\n"hello"\n'
    assert sent == 8 * (len("hello") + 1)
    assert link.sent[0] == signal.SIGUSR1
    assert [signal_to_bit(s) for s in link.sent[1:]] == list(encode_bits("hello"))


def test_handshake_client_retries_connection():
    link = LoopbackLink(HandshakeServer, drop=2)
    out = io.StringIO()
    _send_handshake_over(link, "x", out, 0)
    assert out.getvalue() == "\rSending...\rSending...\rMessage Sent!\n"
    assert link.sent[:3] == [signal.SIGUSR1] * 3
    assert link.server_out.getvalue() == '[Client_4242]:\n"x"\n'


def test_handshake_client_stops_on_early_confirmation():
    link = AlwaysDoneLink()
    out = io.StringIO()
    assert _send_handshake_over(link, "abc", out, 0) == 0
    assert out.getvalue() == "\rMessage Sent!\n"
    assert link.sent == [signal.SIGUSR1]


def test_over_functions_reject_empty_message():
    with pytest.raises(ValueError):
        _send_basic_over(LoopbackLink(BasicServer), "")
    with pytest.raises(ValueError):
        _send_handshake_over(LoopbackLink(HandshakeServer), "\0abc", io.StringIO(), 0)


def test_send_basic_rejects_bad_pid():
    with pytest.raises(ValueError):
        send_basic(0, "hi")


def test_send_basic_rejects_empty_message():
    with pytest.raises(ValueError):
        send_basic(os.getpid(), "")


def test_send_handshake_rejects_bad_pid():
    with pytest.raises(ValueError):
        send_handshake(-5, "hi", io.StringIO())


def test_send_basic_to_own_process_echoes_acks():
    assert send_basic(os.getpid(), "hi") == 8 * (len("hi") + 1)


@pytest.mark.parametrize(
    "argv",
    [[], ["123"], ["123", ""], ["0", "hi"], ["-7", "hi"], ["abc", "hi"], ["--handshake"]],
)
def test_main_ignores_bad_arguments(argv):
    assert main(argv) == 0


def test_main_sends_to_own_process():
    assert main([str(os.getpid()), "ok"]) == 0