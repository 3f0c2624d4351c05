"""Classification of Python values into wire variants."""

import math
from typing import Any

from .constants import INT32_MAX, INT32_MIN
from .types import PhpObject


def is_php_primitive(value: Any) -> bool:
    """Check if value encodes as a scalar (null, bool, int, float or string)."""
    return value is None or isinstance(value, (bool, int, float, str))


def is_php_list(value: Any) -> bool:
    """Check if value encodes as an array indexed by position."""
    return isinstance(value, (list, tuple))


def is_php_map(value: Any) -> bool:
    """Check if value encodes as an array keyed by its own keys."""
    return isinstance(value, dict)


def is_php_object(value: Any) -> bool:
    """Check if value encodes as a typed object."""
    return isinstance(value, PhpObject)


def is_php_key(value: Any) -> bool:
    """Check if value can be an array key. Booleans are not keys."""
    return isinstance(value, (int, str)) and not isinstance(value, bool)


def is_int32(value: int | float) -> bool:
    """Check if a number is exactly an integer in the signed 32-bit range."""
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
    return INT32_MIN <= value <= INT32_MAX
