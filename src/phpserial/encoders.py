"""Encoders for different value types."""

from typing import Any, Iterable, Mapping, Sequence, Tuple

from .constants import ARRAY_TAG, CLOSE_BRACE, OBJECT_TAG, OPEN_BRACE, QUOTE, TAG_SEPARATOR
from .errors import UnsupportedTypeError
from .normalize import is_php_key, is_php_list, is_php_map, is_php_object, is_php_primitive
from .primitives import encode_primitive
from .types import PhpObject, ResolvedEncodeOptions
from .utf8 import utf8_length
from .writer import FragmentWriter


def encode_value(value: Any, options: ResolvedEncodeOptions, writer: FragmentWriter) -> None:
    """Encode a value in PHP serialize() format.

    Args:
        value: Value to encode
        options: Resolved encoding options
        writer: Fragment writer for output

    Raises:
        UnsupportedTypeError: If value (or anything nested in it) has no wire form
    """
    if is_php_primitive(value):
        writer.push(encode_primitive(value))
    elif is_php_list(value):
        encode_list(value, options, writer)
    elif is_php_map(value):
        encode_map(value, options, writer)
    elif is_php_object(value):
        encode_object(value, options, writer)
    else:
        raise UnsupportedTypeError(value)


def encode_list(items: Sequence[Any], options: ResolvedEncodeOptions, writer: FragmentWriter) -> None:
    """Encode a sequence as an array keyed by position.

    Args:
        items: List or tuple
        options: Resolved encoding options
        writer: Fragment writer for output
    """
    writer.push(f"{ARRAY_TAG}{TAG_SEPARATOR}{len(items)}{TAG_SEPARATOR}")
    encode_pairs(enumerate(items), options, writer)


def encode_map(mapping: Mapping[Any, Any], options: ResolvedEncodeOptions, writer: FragmentWriter) -> None:
    """Encode a dict as an array keyed by its own keys, in insertion order.

    Args:
        mapping: Dict with str or int keys
        options: Resolved encoding options
        writer: Fragment writer for output
    """
    writer.push(f"{ARRAY_TAG}{TAG_SEPARATOR}{len(mapping)}{TAG_SEPARATOR}")
    encode_pairs(mapping.items(), options, writer)


def encode_object(obj: PhpObject, options: ResolvedEncodeOptions, writer: FragmentWriter) -> None:
    """Encode a typed object, renaming its type through ``options.typeNames``.

    Args:
        obj: Typed record
        options: Resolved encoding options
        writer: Fragment writer for output
    """
    type_name = options.typeNames.get(obj.type_name) or obj.type_name
    writer.push(
        f"{OBJECT_TAG}{TAG_SEPARATOR}{utf8_length(type_name)}{TAG_SEPARATOR}"
        f"{QUOTE}{type_name}{QUOTE}{TAG_SEPARATOR}{len(obj.properties)}{TAG_SEPARATOR}"
    )
    encode_pairs(obj.properties.items(), options, writer)


def encode_pairs(pairs: Iterable[Tuple[Any, Any]], options: ResolvedEncodeOptions, writer: FragmentWriter) -> None:
    """Encode the braced key/value body shared by arrays and objects."""
    writer.push(OPEN_BRACE)
    for key, value in pairs:
        if not is_php_key(key):
            raise UnsupportedTypeError(key, f"Array keys must be int or str, got {type(key).__name__}")
        writer.push(encode_primitive(key))
        encode_value(value, options, writer)
    writer.push(CLOSE_BRACE)
