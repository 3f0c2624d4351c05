"""Core encoding functionality."""

from typing import Any, Dict, Optional

from .encoders import encode_value
from .types import EncodeOptions, ResolvedEncodeOptions
from .writer import FragmentWriter


def encode(value: Any, type_names: Optional[Dict[str, str]] = None, options: Optional[EncodeOptions] = None) -> str:
    """Encode a value into PHP serialize() format.

    Args:
        value: None, bool, int, float, str, list/tuple, dict or PhpObject, nested freely
        type_names: Optional mapping from object type names to the names written on the wire
        options: Optional encoding options

    Returns:
        Serialized string

    Raises:
        UnsupportedTypeError: If the value contains anything without a wire form
    """
    merged_options: EncodeOptions = {**(options or {})}
    if type_names is not None:
        merged_options["typeNames"] = type_names
    resolved_options = resolve_options(merged_options)
    writer = FragmentWriter()
    encode_value(value, resolved_options, writer)
    return writer.to_string()


def resolve_options(options: Optional[EncodeOptions]) -> ResolvedEncodeOptions:
    """Resolve encoding options with defaults.

    Args:
        options: Optional user-provided options

    Returns:
        Resolved options with defaults applied
    """
    if options is None:
        return ResolvedEncodeOptions()

    return ResolvedEncodeOptions(type_names=options.get("typeNames"))
