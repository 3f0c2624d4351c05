"""Type definitions for pyphpserial."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict, Union

from .constants import DEFAULT_MAX_DEPTH, DEFAULT_STRICT

# Wire-representable values
PhpKey = Union[int, str]
PhpPrimitive = Union[str, int, float, bool, None]
PhpList = List[Any]
PhpMap = Dict[PhpKey, Any]
PhpValue = Union[PhpPrimitive, PhpList, PhpMap, "PhpObject"]


@dataclass
class PhpObject:
    """A typed record: a map of properties tagged with a class name.

    Decoding yields instances of this class for ``o:`` values; encoding one
    produces an ``o:`` value. Plain dicts always encode as arrays.
    """

    type_name: str
    properties: PhpMap = field(default_factory=dict)

    def __getitem__(self, key: PhpKey) -> Any:
        return self.properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __len__(self) -> int:
        return len(self.properties)


class EncodeOptions(TypedDict, total=False):
    """Options for encoding.

    Attributes:
        typeNames: Mapping from declared object type names to the names written on the wire
    """

    typeNames: Dict[str, str]


class DecodeOptions(TypedDict, total=False):
    """Options for decoding.

    Attributes:
        strict: Verify punctuation and reject trailing data (default: True)
        maxDepth: Maximum nesting of arrays and objects (default: None, unlimited)
    """

    strict: bool
    maxDepth: Optional[int]


class ResolvedEncodeOptions:
    """Resolved encoding options with defaults applied."""

    def __init__(self, type_names: Dict[str, str] | None = None) -> None:
        self.typeNames: Dict[str, str] = type_names or {}


class ResolvedDecodeOptions:
    """Resolved decoding options with defaults applied."""

    def __init__(self, strict: bool = DEFAULT_STRICT, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> None:
        self.strict = strict
        self.maxDepth = max_depth


# Nesting level of the value being decoded
Depth = int
