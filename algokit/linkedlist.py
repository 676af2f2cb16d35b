"""Singly and doubly linked lists, list algorithms and a fixed-size array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _walk(head: Node | None) -> Iterator[Node]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a linked list from *values* and return its head."""
    sentinel = Node(None)
    tail = sentinel
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return sentinel.next


def to_list(head: Node | None) -> list[Any]:
    """Collect the values of the list starting at *head*."""
    return [node.value for node in _walk(head)]


def merge_sorted_lists(first: Node | None, second: Node | None) -> Node | None:
    """Splice two sorted lists into one sorted list and return its head."""
    sentinel = Node(None)
    tail = sentinel
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return sentinel.next


def middle_node(head: Node | None) -> Node | None:
    """Return the middle node; the second of two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Unlink the *n*-th node counted from the end and return the new head."""
    if head is None:
        return None
    length = sum(1 for _ in _walk(head))
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    sentinel = Node(None, head)
    before = sentinel
    for _ in range(length - n):
        assert before.next is not None
        before = before.next
    assert before.next is not None
    before.next = before.next.next
    return sentinel.next


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous: Node | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def find_cycle_start(head: Node | None) -> Node | None:
    """Return the node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            entry = head
            while entry is not slow:
                assert entry is not None and slow is not None
                entry = entry.next
                slow = slow.next
            return entry
    return None


class SinglyLinkedList:
    """A singly linked list of values."""

    def __init__(self, *args: Any) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        for value in args:
            self.append(value)

    def append(self, value: Any) -> None:
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def remove(self, value: Any) -> None:
        """Unlink the first node holding *value*."""
        previous: Node | None = None
        for node in _walk(self._head):
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                return
            previous = node
        raise ValueError(f"{value!r} not found")

    def reverse(self) -> None:
        self._tail = self._head
        self._head = reverse(self._head)

    def middle(self) -> Any:
        """Value of the middle node; the second of two middles for even lengths."""
        node = middle_node(self._head)
        if node is None:
            raise IndexError("middle of an empty list")
        return node.value

    def __iter__(self) -> Iterator[Any]:
        for node in _walk(self._head):
            yield node.value


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    prev: _DoubleNode | None = None
    next: _DoubleNode | None = None


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, *args: Any) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        for value in args:
            self.append(value)

    def append(self, value: Any) -> None:
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev


class FixedArray:
    """Array of a fixed length, filled with zeros, with bounds-checked access."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._data: list[Any] = [0] * length

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for length {len(self._data)}")

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        self._data[index] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)