"""Encoding of scalar values."""

import math
from decimal import Decimal
from typing import Any

from .constants import (
    BOOL_TAG,
    FLOAT_TAG,
    INF_LITERAL,
    INT_TAG,
    NAN_LITERAL,
    NEG_INF_LITERAL,
    NULL_LITERAL,
    QUOTE,
    STRING_TAG,
    TAG_SEPARATOR,
    TERMINATOR,
)
from .errors import UnsupportedTypeError
from .normalize import is_int32
from .utf8 import utf8_length


def format_float(value: float) -> str:
    """Format a float the way the reference serializer prints numbers.

    Shortest round-trip digits, no fraction for integral values, and
    exponent notation only below 1e-6 or from 1e21 upwards.

    >>> format_float(0.1), format_float(2147483648.0), format_float(1.5e-7), format_float(1e21)
    ('0.1', '2147483648', '1.5e-7', '1e+21')
    """
    if math.isnan(value):
        return NAN_LITERAL
    if math.isinf(value):
        return INF_LITERAL if value > 0 else NEG_INF_LITERAL
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    prefix = "-" if sign else ""
    k = len(digits)
    # n: position of the decimal point relative to the first digit
    n = k + exponent

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return prefix + body


def encode_null() -> str:
    return NULL_LITERAL


def encode_bool(value: bool) -> str:
    return f"{BOOL_TAG}{TAG_SEPARATOR}{1 if value else 0}{TERMINATOR}"


def encode_number(value: int | float) -> str:
    """Encode a number as ``i:`` when it fits 32 bits exactly, else as ``d:``."""
    if is_int32(value):
        return f"{INT_TAG}{TAG_SEPARATOR}{int(value)}{TERMINATOR}"
    if isinstance(value, int):
        try:
            value = float(value)
        except OverflowError as e:
            raise UnsupportedTypeError(value, f"Integer too large to serialize: {value}") from e
    return f"{FLOAT_TAG}{TAG_SEPARATOR}{format_float(value)}{TERMINATOR}"


def encode_string(value: str) -> str:
    """Encode a string; the length prefix counts UTF-8 bytes."""
    return f"{STRING_TAG}{TAG_SEPARATOR}{utf8_length(value)}{TAG_SEPARATOR}{QUOTE}{value}{QUOTE}{TERMINATOR}"


def encode_primitive(value: Any) -> str:
    """Encode a scalar value.

    Args:
        value: None, bool, int, float or str

    Returns:
        The serialized scalar

    Raises:
        UnsupportedTypeError: If value is not a scalar
    """
    if value is None:
        return encode_null()
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return encode_bool(value)
    if isinstance(value, (int, float)):
        return encode_number(value)
    if isinstance(value, str):
        return encode_string(value)
    raise UnsupportedTypeError(value)
