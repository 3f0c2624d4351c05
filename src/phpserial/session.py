"""PHP session store format (``session_encode()`` / ``session_decode()``).

A session is a flat run of ``<key>|<serialized value>`` entries with no
separator between entries; each serialized value is self-delimiting.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .constants import SESSION_DELIMITER
from .decoder import Cursor, decode_at, resolve_options
from .encoder import encode
from .errors import UnsupportedTypeError
from .types import DecodeOptions, PhpValue

logger = logging.getLogger(__name__)


def encode_session(pairs: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> str:
    """Encode session variables in PHP session format.

    Keys containing ``|`` cannot be represented and are skipped.

    Args:
        pairs: Mapping or iterable of (key, value) pairs, in order

    Returns:
        Serialized session

    Raises:
        UnsupportedTypeError: If a key is not a string or a value has no wire form
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    entries = []
    for key, value in items:
        if not isinstance(key, str):
            raise UnsupportedTypeError(key, f"Session keys must be str, got {type(key).__name__}")
        if SESSION_DELIMITER in key:
            logger.debug("Skipping session key %r containing %r", key, SESSION_DELIMITER)
            continue
        entries.append(f"{key}{SESSION_DELIMITER}{encode(value)}")
    return "".join(entries)


def decode_session(text: str, options: Optional[DecodeOptions] = None) -> Dict[str, PhpValue]:
    """Decode PHP session data.

    Args:
        text: Serialized session
        options: Optional decoding options, applied to every value

    Returns:
        Session variables in stored order

    Raises:
        MalformedInputError: If a value is malformed
    """
    resolved_options = resolve_options(options)
    cursor = Cursor(text)
    result: Dict[str, PhpValue] = {}
    while not cursor.at_end:
        pos = text.find(SESSION_DELIMITER, cursor.offset)
        if pos < 0:
            break
        key = text[cursor.offset : pos]
        cursor.offset = pos + len(SESSION_DELIMITER)
        result[key] = decode_at(cursor, resolved_options)
    return result
