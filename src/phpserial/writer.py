"""Output buffer for the encoder."""

from typing import List


class FragmentWriter:
    """Collects encoded fragments and joins them once at the end."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def push(self, fragment: str) -> None:
        self._parts.append(fragment)

    def to_string(self) -> str:
        return "".join(self._parts)
