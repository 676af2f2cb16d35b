"""Recursive and iterative forms of two Fibonacci-style sequences."""

from __future__ import annotations


def climb_stairs(n: int) -> int:
    """Ways to climb *n* steps taking one or two at a time, recursively."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    if n == 2:
        return 2
    return climb_stairs(n - 1) + climb_stairs(n - 2)


def climb_stairs_iterative(n: int) -> int:
    """Ways to climb *n* steps taking one or two at a time, iteratively."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 1
    before, current = 1, 2
    for _ in range(n - 2):
        before, current = current, before + current
    return current


def fibonacci(n: int) -> int:
    """The *n*-th Fibonacci number, recursively; 0 for n below 1."""
    if n < 1:
        return 0
    if n <= 2:
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """The *n*-th Fibonacci number, iteratively; 0 for n below 1."""
    if n < 1:
        return 0
    before, current = 1, 1
    for _ in range(n - 2):
        before, current = current, before + current
    return current