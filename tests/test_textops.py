import pytest

from minitalk.cstrings import parse_int
from minitalk.textops import (
    itoa,
    split,
    strjoin,
    striteri,
    strmapi,
    strtrim,
    substr,
)


def test_substr_is_slice_within_bounds():
    text = "ciao come va"
    for start in range(len(text)):
        for length in (0, 1, 3, 50):
            piece = substr(text, start, length)
            assert len(piece) == min(length, len(text) - start)
            assert text[start:].startswith(piece)


def test_substr_past_end_is_empty():
    assert substr("ciao", 4, 10) == ""
    assert substr("ciao", 100, 1) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("ciao", -1, 2)


def test_strjoin():
    assert strjoin("ciao,", "come va?") == "ciao," + "come va?"
    assert strjoin("", "") == ""


def test_strtrim_removes_set_from_ends():
    text = "111ciao,111come1va?11111"
    trimmed = strtrim(text, "1")
    assert not trimmed.startswith("1")
    assert not trimmed.endswith("1")
    assert trimmed in text
    assert trimmed.startswith("ciao,")


def test_strtrim_all_trimmed_and_none():
    assert strtrim("xxxx", "x") == ""
    assert strtrim(None, "x") == ""
    assert strtrim("abc", None) == ""
    assert strtrim("abc", "") == "abc"


def test_split_drops_empty_pieces():
    assert split("111ciao,111come1va?11111", "1") == ["ciao,", "come", "va?"]


def test_split_edges():
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("abc", ",") == ["abc"]
    with pytest.raises(ValueError):
        split("abc", ",,")


@pytest.mark.parametrize(
    "number", [0, 9, -9, 10, -10, 8124, -9874, 543000, -2147483648, 2147483647]
)
def test_itoa_round_trips_through_parse_int(number):
    assert parse_int(itoa(number)) == number


def test_itoa_limits():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_strmapi_passes_index_and_char():
    text = "ciao"
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch.upper()

    assert strmapi(text, record) == text.upper()
    assert seen == list(enumerate(text))


def test_striteri_modifies_in_place_until_nul():
    buffer = list("ab\0cd")
    striteri(buffer, lambda index, ch: ch.upper())
    assert buffer == ["A", "B", "\0", "c", "d"]


def test_striteri_on_bytearray():
    buffer = bytearray(b"ciao")
    striteri(buffer, lambda index, value: value - 32)
    assert buffer == bytearray(b"CIAO")