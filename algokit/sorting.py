"""Classic comparison sorts and the three-sum search built on sorting."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterable, Sequence


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using bubble sort."""
    data = list(items)
    for done in range(len(data)):
        swapped = False
        for j in range(len(data) - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using selection sort."""
    data = list(items)
    for i in range(len(data)):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using insertion sort."""
    result: list[int] = []
    for value in items:
        insort_right(result, value)
    return result


def _quick_sort(data: list[int], low: int, high: int) -> None:
    if low >= high:
        return
    pivot = data[low]
    left, right = low, high
    while left < right:
        while left < right and data[right] >= pivot:
            right -= 1
        while left < right and data[left] <= pivot:
            left += 1
        if left < right:
            data[left], data[right] = data[right], data[left]
    data[low], data[left] = data[left], data[low]
    _quick_sort(data, low, left - 1)
    _quick_sort(data, left + 1, high)


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using quicksort with the first element as pivot."""
    data = list(items)
    _quick_sort(data, 0, len(data) - 1)
    return data


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two already sorted sequences into one sorted list."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of *items* using top-down merge sort."""
    data = list(items)
    if len(data) < 2:
        return data
    mid = len(data) // 2
    return merge_sorted(merge_sort(data[:mid]), merge_sort(data[mid:]))


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Find triples summing to zero.

    The numbers are sorted first; for every anchor, equal second elements
    are skipped and a shrinking right pointer finds the third element.
    """
    data = sorted(nums)
    if len(data) < 3:
        return []
    result: list[list[int]] = []
    for i, anchor in enumerate(data):
        target = -anchor
        third = len(data) - 1
        for j in range(i + 1, len(data)):
            if j > i + 1 and data[j] == data[j - 1]:
                continue
            while third > j and data[third] + data[j] > target:
                third -= 1
            if third <= j:
                break
            if data[third] + data[j] == target:
                result.append([anchor, data[j], data[third]])
    return result