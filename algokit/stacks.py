"""A stack that tracks its minimum, and an infix arithmetic evaluator."""

from __future__ import annotations

import re
from collections.abc import Iterable

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_NUMBER = re.compile(r"[+-]?[0-9]+")


class MinStack:
    """Stack of integers with constant-time access to its smallest value."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []

    def push(self, x: int) -> None:
        self._items.append(x)
        self._mins.append(min(x, self._mins[-1]) if self._mins else x)

    def pop(self) -> None:
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()
        self._mins.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def min(self) -> int:
        if not self._mins:
            raise IndexError("min of an empty stack")
        return self._mins[-1]


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply(numbers: list[int], operator: str) -> None:
    right = numbers.pop()
    left = numbers.pop()
    if operator == "+":
        numbers.append(left + right)
    elif operator == "-":
        numbers.append(left - right)
    elif operator == "*":
        numbers.append(left * right)
    else:
        numbers.append(_truncating_div(left, right))


def evaluate(tokens: Iterable[str]) -> int:
    """Evaluate an infix integer expression given as tokens.

    Supports ``+ - * /`` with the usual precedence and left associativity;
    division truncates toward zero.
    """
    numbers: list[int] = []
    operators: list[str] = []
    expect_number = True
    for token in tokens:
        if expect_number:
            if not _NUMBER.fullmatch(token):
                raise ValueError(f"expected a number, got {token!r}")
            numbers.append(int(token))
            expect_number = False
            continue
        precedence = _PRECEDENCE.get(token)
        if precedence is None:
            raise ValueError(f"expected an operator, got {token!r}")
        while operators and _PRECEDENCE[operators[-1]] >= precedence:
            _apply(numbers, operators.pop())
        operators.append(token)
        expect_number = True
    if expect_number:
        raise ValueError("expression is empty or ends with an operator")
    while operators:
        _apply(numbers, operators.pop())
    return numbers[0]