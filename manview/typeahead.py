"""Type-ahead navigation for program lists.

Keeps a short keystroke buffer and finds the first list item it prefixes.
There is no timer here: the UI decides when the buffer expires and calls
`reset()`.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar('T')

MAX_BUFFER_LENGTH = 10
STATUS_PREFIX = "Type-ahead: "
TIMEOUT_MESSAGE = "⏱ Type-ahead timeout - cleared"


class TypeAheadNavigator:
    """Incremental prefix search over an ordered list."""

    def __init__(self):
        self._buffer = ""

    @property
    def buffer(self) -> str:
        """Current buffer contents (lower-cased)."""
        return self._buffer

    def append(self, char: str):
        """Append a keystroke, keeping only the last MAX_BUFFER_LENGTH characters."""
        self._buffer += char.lower()
        if len(self._buffer) > MAX_BUFFER_LENGTH:
            self._buffer = self._buffer[-MAX_BUFFER_LENGTH:]

    def reset(self):
        """Clear the buffer."""
        self._buffer = ""

    def is_active(self) -> bool:
        """Check if anything has been typed since the last reset."""
        return bool(self._buffer)

    def find_match(
        self,
        items: Iterable[T],
        key: Optional[Callable[[T], Optional[str]]] = None
    ) -> Optional[int]:
        """Find the first item whose text starts with the buffer.

        Args:
            items: Items in display order
            key: Optional function extracting the searchable text of an item

        Returns:
            Zero-based index of the first match, or None. Items without text
            are skipped but still counted.
        """
        if not self._buffer:
            return None

        for index, item in enumerate(items):
            text = key(item) if key is not None else item
            if text and text.lower().startswith(self._buffer):
                return index
        return None

    def status_message(self) -> str:
        """Human-readable description of the buffer, empty when inactive."""
        if not self._buffer:
            return ""
        return f"{STATUS_PREFIX}{self._buffer}"

    def timeout_message(self) -> str:
        """Notice shown when the caller's inactivity timer clears the buffer."""
        return TIMEOUT_MESSAGE
