import pytest

from algokit.recursion import (
    climb_stairs,
    climb_stairs_iterative,
    fibonacci,
    fibonacci_iterative,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2
    assert climb_stairs_iterative(1) == 1
    assert climb_stairs_iterative(2) == 2


@pytest.mark.parametrize("n", range(1, 21))
def test_climb_stairs_forms_agree(n):
    assert climb_stairs(n) == climb_stairs_iterative(n)


@pytest.mark.parametrize("n", range(3, 21))
def test_climb_stairs_recurrence(n):
    assert climb_stairs_iterative(n) == climb_stairs_iterative(n - 1) + climb_stairs_iterative(n - 2)


@pytest.mark.parametrize("func", [climb_stairs, climb_stairs_iterative])
def test_climb_stairs_rejects_non_positive(func):
    with pytest.raises(ValueError):
        func(0)


def test_fibonacci_base_cases():
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1
    assert fibonacci_iterative(1) == 1
    assert fibonacci_iterative(2) == 1


@pytest.mark.parametrize("n", [0, -1, -7])
def test_fibonacci_below_one_is_zero(n):
    assert fibonacci(n) == 0
    assert fibonacci_iterative(n) == 0


@pytest.mark.parametrize("n", range(1, 21))
def test_fibonacci_forms_agree(n):
    assert fibonacci(n) == fibonacci_iterative(n)


@pytest.mark.parametrize("n", range(3, 21))
def test_fibonacci_recurrence(n):
    assert fibonacci_iterative(n) == fibonacci_iterative(n - 1) + fibonacci_iterative(n - 2)


@pytest.mark.parametrize("n", range(1, 20))
def test_stairs_are_shifted_fibonacci(n):
    assert climb_stairs_iterative(n) == fibonacci_iterative(n + 1)