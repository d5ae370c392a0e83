"""
Single-entry cache used by :class:`ProposalStore`.

Holds at most one value, keyed by the identifier it was last stored
under.  Nothing expires and nothing is evicted except by the next
``set``.  Each store owns its own instance unless one is injected.
"""

from typing import Generic, Hashable, Optional, Tuple, TypeVar

V = TypeVar("V")


class SingleEntryCache(Generic[V]):
    """A one-slot cache."""

    def __init__(self) -> None:
        self._key: Optional[Hashable] = None
        self._value: Optional[V] = None
        self._filled = False

    def get(self, key: Hashable) -> Optional[V]:
        """Return the cached value if it was stored under ``key``."""
        if self._filled and self._key == key:
            return self._value
        return None

    def set(self, key: Hashable, value: V) -> None:
        """Replace whatever is in the slot."""
        self._key = key
        self._value = value
        self._filled = True

    def clear(self) -> None:
        self._key = None
        self._value = None
        self._filled = False

    def peek(self) -> Optional[Tuple[Hashable, V]]:
        """Return ``(key, value)`` of the current entry, or ``None``."""
        if not self._filled:
            return None
        return self._key, self._value

    def __contains__(self, key: Hashable) -> bool:
        return self._filled and self._key == key

    def __len__(self) -> int:
        return 1 if self._filled else 0

    def __repr__(self) -> str:
        if not self._filled:
            return "SingleEntryCache(empty)"
        return f"SingleEntryCache(key={self._key!r})"
