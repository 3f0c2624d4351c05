"""UTF-8 byte accounting over ``str`` indices.

The wire format prefixes strings with their length in UTF-8 bytes, while
the decoder walks the source text by character index. These helpers bridge
the two without re-encoding the whole input.

>>> utf8_length("héllo")
6
>>> utf8_slice('s:3:"€";', 5, 3)
('€', 6)
"""

from typing import Tuple

from .errors import MalformedInputError


def utf8_char_size(code: int) -> int:
    """Return the number of bytes UTF-8 uses for a code point.

    Surrogates count as 3 bytes so that lone surrogates never raise.
    """
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def utf8_length(text: str) -> int:
    """Return the UTF-8 byte length of ``text``."""
    return sum(utf8_char_size(ord(char)) for char in text)


def utf8_slice(text: str, start: int, byte_length: int) -> Tuple[str, int]:
    """Take whole characters from ``start`` covering exactly ``byte_length`` bytes.

    Args:
        text: Source text
        start: Character index to start from
        byte_length: Number of UTF-8 bytes to consume

    Returns:
        The substring and the index just past it

    Raises:
        MalformedInputError: If the text ends first or the length splits a character
    """
    pos = start
    remaining = byte_length
    end = len(text)
    while remaining > 0:
        if pos >= end:
            raise MalformedInputError(f"String of {byte_length} bytes runs past end of input", start)
        remaining -= utf8_char_size(ord(text[pos]))
        pos += 1
    if remaining < 0:
        raise MalformedInputError(f"Byte length {byte_length} splits a multi-byte character", start)
    return text[start:pos], pos
