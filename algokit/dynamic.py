"""Knapsack, edit distance and grid path sums, by search and by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack_max_weight(items: Sequence[int], capacity: int) -> int:
    """Heaviest subset weight within *capacity*, by exhaustive backtracking."""
    _check_capacity(capacity)
    best = 0

    def search(weight: int, index: int) -> None:
        nonlocal best
        if weight == capacity or index == len(items):
            best = max(best, weight)
            return
        search(weight, index + 1)
        if weight + items[index] <= capacity:
            search(weight + items[index], index + 1)

    search(0, 0)
    return best


def knapsack_max_weight_memo(items: Sequence[int], capacity: int) -> int:
    """Heaviest subset weight within *capacity*, skipping states already seen."""
    _check_capacity(capacity)
    best = 0
    seen: set[tuple[int, int]] = set()

    def search(weight: int, index: int) -> None:
        nonlocal best
        if weight == capacity or index == len(items):
            best = max(best, weight)
            return
        if (index, weight) in seen:
            return
        seen.add((index, weight))
        search(weight, index + 1)
        if weight + items[index] <= capacity:
            search(weight + items[index], index + 1)

    search(0, 0)
    return best


def knapsack_max_weight_dp(items: Sequence[int], capacity: int) -> int:
    """Heaviest subset weight within *capacity*, from the set of reachable weights."""
    _check_capacity(capacity)
    reachable = {0}
    for item in items:
        reachable |= {weight + item for weight in reachable if weight + item <= capacity}
    return max(reachable)


def knapsack_max_value(items: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Largest total value of a subset whose weight fits in *capacity*."""
    _check_capacity(capacity)
    if len(items) != len(values):
        raise ValueError("items and values must have the same length")
    best = 0

    def search(weight: int, index: int, value: int) -> None:
        nonlocal best
        if weight == capacity or index == len(items):
            best = max(best, value)
            return
        search(weight, index + 1, value)
        if weight + items[index] <= capacity:
            search(weight + items[index], index + 1, value + values[index])

    search(0, 0, 0)
    return best


def edit_distance(first: str, second: str) -> int:
    """Levenshtein distance: fewest insertions, deletions and substitutions."""
    previous = list(range(len(second) + 1))
    for i, char in enumerate(first, start=1):
        current = [i]
        for j, other in enumerate(second, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char != other),
                )
            )
        previous = current
    return previous[-1]


def _check_grid(grid: Sequence[Sequence[int]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from the top-left to the bottom-right cell.

    Each step moves one cell down or one cell right.
    """
    _check_grid(grid)
    totals: list[int] = []
    for row in grid:
        current: list[int] = []
        for j, cell in enumerate(row):
            candidates = []
            if totals:
                candidates.append(totals[j])
            if current:
                candidates.append(current[-1])
            current.append(cell + (min(candidates) if candidates else 0))
        totals = current
    return totals[-1]


def min_path_sum_bruteforce(grid: Sequence[Sequence[int]]) -> int:
    """Same as :func:`min_path_sum`, by trying every down/right path."""
    _check_grid(grid)
    last_row, last_col = len(grid) - 1, len(grid[0]) - 1
    best: int | None = None

    def walk(row: int, col: int, total: int) -> None:
        nonlocal best
        total += grid[row][col]
        if row == last_row and col == last_col:
            if best is None or total < best:
                best = total
            return
        if row < last_row:
            walk(row + 1, col, total)
        if col < last_col:
            walk(row, col + 1, total)

    walk(0, 0, 0)
    assert best is not None
    return best