"""Bounded FIFO queues: an array ring, a linked ring and a two-stack queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when pushing onto a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when taking a value from an empty queue."""


class CircularQueue:
    """Array-backed ring buffer that keeps one slot free.

    A queue built with ``capacity`` slots holds at most ``capacity - 1``
    values. A capacity of 0 selects the default of 10 slots.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity == 0:
            capacity = 10
        if capacity < 2:
            raise ValueError("a circular queue needs at least two slots")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._write = 0
        self._read = 0

    def push(self, value: Any) -> None:
        """Append *value* at the back of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[self._write] = value
        self._write = (self._write + 1) % self.capacity

    def pop(self) -> Any:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._read]
        self._slots[self._read] = None
        self._read = (self._read + 1) % self.capacity
        return value

    def is_empty(self) -> bool:
        return self._write == self._read

    def is_full(self) -> bool:
        return (self._write + 1) % self.capacity == self._read

    def __len__(self) -> int:
        return (self._write - self._read) % self.capacity

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._read + offset) % self.capacity]


class _Slot:
    __slots__ = ("value", "next")

    def __init__(self) -> None:
        self.value: Any = None
        self.next: _Slot = self


class LinkedRingQueue:
    """FIFO queue stored in a ring of ``capacity + 1`` linked slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        first = _Slot()
        last = first
        for _ in range(capacity):
            slot = _Slot()
            last.next = slot
            last = slot
        last.next = first
        self._write = first
        self._read = first

    def push(self, value: Any) -> None:
        """Append *value* at the back of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._write.value = value
        self._write = self._write.next

    def pop(self) -> Any:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._read.value
        self._read.value = None
        self._read = self._read.next
        return value

    def is_empty(self) -> bool:
        return self._write is self._read

    def is_full(self) -> bool:
        return self._write.next is self._read

    def __iter__(self) -> Iterator[Any]:
        slot = self._read
        while slot is not self._write:
            yield slot.value
            slot = slot.next


class TwoStackQueue:
    """FIFO queue built from an input stack and an output stack."""

    def __init__(self) -> None:
        self._incoming: list[Any] = []
        self._outgoing: list[Any] = []

    def append_tail(self, value: Any) -> None:
        """Add *value* at the back of the queue."""
        self._incoming.append(value)

    def delete_head(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._outgoing:
            self._outgoing.extend(reversed(self._incoming))
            self._incoming.clear()
        if not self._outgoing:
            raise QueueEmptyError("queue is empty")
        return self._outgoing.pop()