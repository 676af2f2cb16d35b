"""Backtracking searches: the n-queens puzzle and a weight-only knapsack."""

from __future__ import annotations

from collections.abc import Sequence


def solve_queens(size: int = 8) -> list[tuple[int, ...]]:
    """All placements of *size* non-attacking queens on a *size* x *size* board.

    Each solution gives, row by row, the column of that row's queen.
    Solutions come in lexicographic order of their columns.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []

    def safe(column: int) -> bool:
        row = len(columns)
        return all(
            placed != column and abs(placed - column) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def place() -> None:
        if len(columns) == size:
            solutions.append(tuple(columns))
            return
        for column in range(size):
            if safe(column):
                columns.append(column)
                place()
                columns.pop()

    place()
    return solutions


def render_board(queens: Sequence[int]) -> str:
    """Draw a solution as rows of ``Q`` and ``*`` separated by spaces."""
    size = len(queens)
    for column in queens:
        if not 0 <= column < size:
            raise ValueError(f"column {column} is off a board of size {size}")
    return "\n".join(
        " ".join("Q" if cell == column else "*" for cell in range(size))
        for column in queens
    )


def max_pack_weight(items: Sequence[int], capacity: int) -> int:
    """Heaviest total weight of a subset of *items* that fits in *capacity*."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = 0

    def search(index: int, weight: int) -> None:
        nonlocal best
        if weight == capacity or index == len(items):
            best = max(best, weight)
            return
        search(index + 1, weight)
        if weight + items[index] <= capacity:
            search(index + 1, weight + items[index])

    search(0, 0)
    return best