"""
pyphpserial - PHP serialize() and session formats for Python

Converts Python values to and from the text produced by PHP's serialize()
and session_encode(), with string lengths counted in UTF-8 bytes.
"""

from .decoder import decode
from .encoder import encode
from .errors import MalformedInputError, PhpSerializeError, UnsupportedTypeError
from .session import decode_session, encode_session
from .types import DecodeOptions, EncodeOptions, PhpObject, PhpValue
from .utf8 import utf8_length

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "encode_session",
    "decode_session",
    "PhpObject",
    "PhpValue",
    "EncodeOptions",
    "DecodeOptions",
    "PhpSerializeError",
    "UnsupportedTypeError",
    "MalformedInputError",
    "utf8_length",
]
