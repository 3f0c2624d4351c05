import pytest

from phpserial.errors import MalformedInputError
from phpserial.utf8 import utf8_char_size, utf8_length, utf8_slice


def test_char_size_boundaries():
    assert utf8_char_size(0x41) == 1
    assert utf8_char_size(0x7F) == 1
    assert utf8_char_size(0x80) == 2
    assert utf8_char_size(0x7FF) == 2
    assert utf8_char_size(0x800) == 3
    assert utf8_char_size(0xFFFF) == 3
    assert utf8_char_size(0x10000) == 4
    assert utf8_char_size(0x10FFFF) == 4


@pytest.mark.parametrize("text", ["", "plain", "héllo", "€uro", "日本語", "😀 grin", "mix é € 😀"])
def test_length_matches_utf8_encoding(text):
    assert utf8_length(text) == len(text.encode("utf-8"))


def test_length_of_lone_surrogate_does_not_raise():
    assert utf8_length("\ud800") == 3


def test_slice_consumes_whole_characters():
    assert utf8_slice("a€b", 0, 4) == ("a€", 2)
    assert utf8_slice("a€b", 1, 3) == ("€", 2)
    assert utf8_slice("😀x", 0, 4) == ("😀", 1)


def test_slice_zero_bytes():
    assert utf8_slice("abc", 1, 0) == ("", 1)


def test_slice_past_end():
    with pytest.raises(MalformedInputError):
        utf8_slice("ab", 0, 3)


def test_slice_splitting_character():
    with pytest.raises(MalformedInputError):
        utf8_slice("€", 0, 2)
