"""A least-recently-used cache of values with a fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterator


class LRUCache:
    """Keeps the most recently used values, dropping the oldest when full.

    Iteration runs from the most recently used value to the least.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, None] = OrderedDict()

    def add(self, value: Hashable) -> None:
        """Record a use of *value*, evicting the least recent one if full."""
        if value in self._entries:
            self._entries.move_to_end(value)
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[value] = None

    def get(self, value: Hashable) -> Hashable:
        """Mark a cached *value* as most recently used and return it."""
        if value not in self._entries:
            raise KeyError(value)
        self._entries.move_to_end(value)
        return value

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Hashable]:
        return reversed(self._entries)