"""Exceptions raised by pyphpserial."""

from typing import Any


class PhpSerializeError(Exception):
    """Base class for all codec errors."""


class UnsupportedTypeError(PhpSerializeError, TypeError):
    """Raised when a value has no representation in the wire format."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Attempt to serialize an unsupported type: {type(value).__name__}")


class MalformedInputError(PhpSerializeError, ValueError):
    """Raised when serialized text cannot be decoded.

    Attributes:
        offset: Position in the source text where decoding failed
    """

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")
