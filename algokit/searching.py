"""Binary-search variants over sorted sequences and a windowed-sum search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from itertools import accumulate


def binary_search(items: Sequence[int], target: int) -> int:
    """Return an index of *target* in sorted *items*, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def first_index(items: Sequence[int], target: int) -> int:
    """Return the index of the first element equal to *target*, or -1."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return -1


def last_index(items: Sequence[int], target: int) -> int:
    """Return the index of the last element equal to *target*, or -1."""
    index = bisect_right(items, target) - 1
    if index >= 0 and items[index] == target:
        return index
    return -1


def first_at_least(items: Sequence[int], target: int) -> int:
    """Return the index of the first element not less than *target*, or -1."""
    index = bisect_left(items, target)
    return index if index < len(items) else -1


def last_at_most(items: Sequence[int], target: int) -> int:
    """Return the index of the last element not greater than *target*, or -1."""
    return bisect_right(items, target) - 1


def _best_ordered(prefix: list[int], before: int, after: int) -> int:
    """Best sum with a window of length *before* ending no later than one of length *after* starts."""
    best_before: int | None = None
    best_total: int | None = None
    for end in range(before + after, len(prefix)):
        split = end - after
        candidate = prefix[split] - prefix[split - before]
        if best_before is None or candidate > best_before:
            best_before = candidate
        total = best_before + prefix[end] - prefix[split]
        if best_total is None or total > best_total:
            best_total = total
    assert best_total is not None
    return best_total


def max_sum_two_no_overlap(nums: Sequence[int], first_len: int, second_len: int) -> int:
    """Largest total of two non-overlapping windows of the given lengths."""
    if first_len <= 0 or second_len <= 0:
        raise ValueError("window lengths must be positive")
    if first_len + second_len > len(nums):
        raise ValueError("windows do not fit into the sequence")
    prefix = [0, *accumulate(nums)]
    return max(
        _best_ordered(prefix, first_len, second_len),
        _best_ordered(prefix, second_len, first_len),
    )