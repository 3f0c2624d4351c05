"""Core decoding functionality.

Decoding is recursive descent over a :class:`Cursor`. Every read routine
takes the cursor explicitly and leaves it just past what it consumed, so a
nested value returns with the cursor positioned after its closing
delimiter. A cursor belongs to a single call and is never shared.
"""

import re
from typing import Any, Dict, Optional

from .constants import (
    ARRAY_TAG,
    BOOL_TAG,
    CLOSE_BRACE,
    FLOAT_TAG,
    INF_LITERAL,
    INT_TAG,
    NAN_LITERAL,
    NEG_INF_LITERAL,
    NULL_TAG,
    OBJECT_TAG,
    OPEN_BRACE,
    PROTECTED_MARKER,
    QUOTE,
    STRING_TAG,
    TAG_SEPARATOR,
    TERMINATOR,
)
from .errors import MalformedInputError
from .normalize import is_php_key
from .types import DecodeOptions, Depth, PhpKey, PhpObject, PhpValue, ResolvedDecodeOptions
from .utf8 import utf8_slice

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Cursor:
    """Read position over serialized text."""

    def __init__(self, text: str, offset: int = 0) -> None:
        self.text = text
        self.offset = offset

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str:
        if self.at_end:
            raise MalformedInputError("Unexpected end of input", self.offset)
        return self.text[self.offset]

    def read_until(self, delimiter: str) -> str:
        """Return the text up to ``delimiter`` and move past the delimiter."""
        pos = self.text.find(delimiter, self.offset)
        if pos < 0:
            raise MalformedInputError(f"{delimiter!r} expected", self.offset)
        chunk = self.text[self.offset : pos]
        self.offset = pos + len(delimiter)
        return chunk

    def skip(self, expected: str, strict: bool = True) -> None:
        """Move past fixed punctuation, verifying it when ``strict``."""
        end = self.offset + len(expected)
        if end > len(self.text):
            raise MalformedInputError(f"Unexpected end of input, {expected!r} expected", self.offset)
        if strict and self.text[self.offset : end] != expected:
            raise MalformedInputError(f"{expected!r} expected, got {self.text[self.offset : end]!r}", self.offset)
        self.offset = end

    def read_utf8(self, byte_length: int) -> str:
        """Return the characters covering the next ``byte_length`` UTF-8 bytes."""
        chunk, self.offset = utf8_slice(self.text, self.offset, byte_length)
        return chunk


def decode(text: str, options: Optional[DecodeOptions] = None) -> PhpValue:
    """Decode PHP serialize() output into Python values.

    Arrays with keys exactly ``0..n-1`` in order come back as lists, all
    other arrays as dicts. Objects come back as :class:`PhpObject`.

    Args:
        text: Serialized string
        options: Optional decoding options

    Returns:
        Decoded value

    Raises:
        MalformedInputError: If the text is not a well-formed serialized value
    """
    resolved_options = resolve_options(options)
    cursor = Cursor(text)
    result = decode_at(cursor, resolved_options)
    if resolved_options.strict and not cursor.at_end:
        raise MalformedInputError("Unexpected trailing data", cursor.offset)
    return result


def decode_at(cursor: Cursor, options: ResolvedDecodeOptions) -> PhpValue:
    """Decode one top-level value at the cursor, leaving the cursor just past it.

    Raises:
        MalformedInputError: If the value is malformed or nested too deeply for the interpreter stack
    """
    try:
        return decode_value(cursor, options)
    except RecursionError as e:
        raise MalformedInputError("Nesting too deep", cursor.offset) from e


def resolve_options(options: Optional[DecodeOptions]) -> ResolvedDecodeOptions:
    """Resolve decoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedDecodeOptions()

    defaults = ResolvedDecodeOptions()
    return ResolvedDecodeOptions(
        strict=options.get("strict", defaults.strict),
        max_depth=options.get("maxDepth", defaults.maxDepth),
    )


def decode_value(cursor: Cursor, options: ResolvedDecodeOptions, depth: Depth = 0) -> PhpValue:
    """Decode one value at the cursor and leave the cursor just past it.

    Args:
        cursor: Read position, advanced in place
        options: Resolved decoding options
        depth: Current nesting level

    Returns:
        Decoded value
    """
    start = cursor.offset
    if cursor.at_end:
        raise MalformedInputError("Type tag expected", start)
    tag = cursor.peek().lower()
    cursor.offset += 1

    if tag == NULL_TAG:
        cursor.skip(TERMINATOR, options.strict)
        return None

    cursor.skip(TAG_SEPARATOR, options.strict)

    if tag == INT_TAG:
        return parse_int(cursor.read_until(TERMINATOR), start)
    if tag == BOOL_TAG:
        # Anything other than a literal "0" is true
        return cursor.read_until(TERMINATOR) != "0"
    if tag == FLOAT_TAG:
        return parse_float(cursor.read_until(TERMINATOR), start)
    if tag == STRING_TAG:
        value = read_string(cursor, options)
        cursor.skip(TERMINATOR, options.strict)
        return value
    if tag == ARRAY_TAG:
        return decode_array(cursor, options, depth + 1, start)
    if tag == OBJECT_TAG:
        return decode_object(cursor, options, depth + 1, start)

    raise MalformedInputError(f"Unknown data type {tag!r}", start)


def parse_int(text: str, offset: int) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise MalformedInputError(f"Invalid integer {text!r}", offset)
    return int(text)


def parse_float(text: str, offset: int) -> float:
    if text == NAN_LITERAL:
        return float("nan")
    if text == INF_LITERAL:
        return float("inf")
    if text == NEG_INF_LITERAL:
        return float("-inf")
    if not _FLOAT_PATTERN.fullmatch(text):
        raise MalformedInputError(f"Invalid float {text!r}", offset)
    return float(text)


def read_count(cursor: Cursor) -> int:
    offset = cursor.offset
    count = parse_int(cursor.read_until(TAG_SEPARATOR), offset)
    if count < 0:
        raise MalformedInputError(f"Negative length {count}", offset)
    return count


def read_string(cursor: Cursor, options: ResolvedDecodeOptions) -> str:
    """Read ``<bytes>:"<text>"`` and leave the cursor after the closing quote."""
    byte_length = read_count(cursor)
    cursor.skip(QUOTE, options.strict)
    value = cursor.read_utf8(byte_length)
    cursor.skip(QUOTE, options.strict)
    return value


def read_key(cursor: Cursor, options: ResolvedDecodeOptions, depth: Depth) -> PhpKey:
    offset = cursor.offset
    key = decode_value(cursor, options, depth)
    if not is_php_key(key):
        raise MalformedInputError(f"Array key must be int or string, got {type(key).__name__}", offset)
    return key


def _check_depth(depth: Depth, options: ResolvedDecodeOptions, offset: int) -> None:
    if options.maxDepth is not None and depth > options.maxDepth:
        raise MalformedInputError(f"Nesting deeper than {options.maxDepth}", offset)


def decode_array(cursor: Cursor, options: ResolvedDecodeOptions, depth: Depth, start: int) -> PhpValue:
    """Decode ``<count>:{<key><value>...}`` into a list or a dict.

    A list is produced only when the keys are the ints 0, 1, 2, ... in order.
    """
    _check_depth(depth, options, start)
    count = read_count(cursor)
    cursor.skip(OPEN_BRACE, options.strict)

    result: Dict[PhpKey, Any] = {}
    sequential = True
    for index in range(count):
        key = read_key(cursor, options, depth)
        value = decode_value(cursor, options, depth)
        if sequential and not (isinstance(key, int) and key == index):
            sequential = False
        result[key] = value

    cursor.skip(CLOSE_BRACE, options.strict)
    return list(result.values()) if sequential else result


def decode_object(cursor: Cursor, options: ResolvedDecodeOptions, depth: Depth, start: int) -> PhpObject:
    """Decode ``<len>:"<type>":<count>:{<key><value>...}`` into a PhpObject."""
    _check_depth(depth, options, start)
    type_name = read_string(cursor, options)
    cursor.skip(TAG_SEPARATOR, options.strict)
    count = read_count(cursor)
    cursor.skip(OPEN_BRACE, options.strict)

    properties: Dict[PhpKey, Any] = {}
    for _ in range(count):
        key = read_key(cursor, options, depth)
        value = decode_value(cursor, options, depth)
        if isinstance(key, str):
            key = key.replace(PROTECTED_MARKER, "", 1)
        properties[key] = value

    cursor.skip(CLOSE_BRACE, options.strict)
    return PhpObject(type_name, properties)
