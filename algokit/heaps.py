"""Binary heaps: max-heap construction and two bounded min-heaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator


def heapify_by_insertion(items: Iterable[int]) -> list[int]:
    """Build a max-heap by inserting the values one by one and sifting each up."""
    heap: list[int] = []
    for value in items:
        heap.append(value)
        child = len(heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if heap[child] <= heap[parent]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent
    return heap


def _sift_down_max(heap: list[int], index: int) -> None:
    size = len(heap)
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[largest] < heap[child]:
                largest = child
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heapify_by_sifting(items: Iterable[int]) -> list[int]:
    """Build a max-heap by sifting down every non-leaf, last one first."""
    heap = list(items)
    for index in reversed(range(len(heap) // 2)):
        _sift_down_max(heap, index)
    return heap


class MinHeap:
    """Min-heap holding at most ``capacity`` values."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[int] = []
        for value in values:
            self.add(value)

    def add(self, value: int) -> None:
        if len(self._data) >= self.capacity:
            raise OverflowError("heap is full")
        heapq.heappush(self._data, value)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("heap is empty")
        return heapq.heappop(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._data))


class IndexedMinHeap:
    """Bounded min-heap that can delete an arbitrary value."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[int] = []

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if data[parent] <= data[index]:
                return
            data[parent], data[index] = data[index], data[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and data[child] < data[smallest]:
                    smallest = child
            if smallest == index:
                return
            data[index], data[smallest] = data[smallest], data[index]
            index = smallest

    def add(self, value: int) -> None:
        if len(self._data) >= self.capacity:
            raise OverflowError("heap is full")
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def delete(self, value: int) -> None:
        """Remove one occurrence of *value*."""
        if not self._data or self._data[0] > value:
            raise ValueError(f"{value} not found")
        positions = [i for i, stored in enumerate(self._data) if stored == value]
        if not positions:
            raise ValueError(f"{value} not found")
        index = positions[-1]
        last = self._data.pop()
        if index < len(self._data):
            self._data[index] = last
            self._sift_down(index)
            self._sift_up(index)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._data))