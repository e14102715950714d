import signal

import pytest

from minitalk.protocol import (
    SIGNALS,
    Assembler,
    bit_to_signal,
    encode_bits,
    signal_to_bit,
)


def _assemble(bits):
    assembler = Assembler()
    results = [assembler.feed(bit) for bit in bits]
    return results


def test_encode_single_letter_low_bit_first():
    assert list(encode_bits("A")) == [1, 0, 0, 0, 0, 0, 1, 0] + [0] * 8


def test_encode_empty_message_is_only_terminator():
    assert list(encode_bits(b"")) == [0] * 8


def test_encode_stops_at_nul():
    assert list(encode_bits("hi\0there")) == list(encode_bits("hi"))


def test_encode_length_is_eight_bits_per_byte_plus_terminator():
    message = "hello world"
    assert len(list(encode_bits(message))) == 8 * (len(message) + 1)


def test_str_and_bytes_encode_alike():
    assert list(encode_bits("caf\u00e9")) == list(encode_bits("caf\u00e9".encode("utf-8")))


def test_bit_to_signal_mapping():
    assert bit_to_signal(0) == signal.SIGUSR1
    assert bit_to_signal(1) == signal.SIGUSR2


def test_signal_to_bit_mapping():
    assert signal_to_bit(signal.SIGUSR1) == 0
    assert signal_to_bit(signal.SIGUSR2) == 1


def test_bit_signal_round_trip():
    assert [signal_to_bit(bit_to_signal(b)) for b in (0, 1)] == [0, 1]


def test_every_listed_signal_decodes_to_a_distinct_bit():
    bits = sorted(signal_to_bit(signum) for signum in SIGNALS)
    assert bits == [0, 1]
    assert {bit_to_signal(bit) for bit in bits} == set(SIGNALS)


def test_bit_to_signal_rejects_non_bits():
    with pytest.raises(ValueError):
        bit_to_signal(2)


def test_signal_to_bit_rejects_other_signals():
    with pytest.raises(ValueError):
        signal_to_bit(signal.SIGINT)


def test_assembler_round_trip():
    results = _assemble(encode_bits("hi"))
    assert results[-1] == b"hi"
    assert all(r is None for r in results[:-1])


def test_assembler_round_trip_utf8():
    text = "\u00e9t\u00e9 \u2603"
    results = _assemble(encode_bits(text))
    assert results[-1].decode("utf-8") == text


def test_assembler_empty_message():
    assert _assemble(encode_bits(""))[-1] == b""


def test_assembler_handles_consecutive_messages():
    bits = list(encode_bits("one")) + list(encode_bits("two"))
    finished = [r for r in _assemble(bits) if r is not None]
    assert finished == [b"one", b"two"]


def test_assembler_rejects_non_bits():
    with pytest.raises(ValueError):
        Assembler().feed(5)