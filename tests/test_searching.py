import pytest

from algokit.searching import (
    binary_search,
    first_at_least,
    first_index,
    last_at_most,
    last_index,
    max_sum_two_no_overlap,
)


def test_binary_search_missing_value():
    assert binary_search([1, 2, 4], 3) == -1


def test_binary_search_finds_every_element():
    items = [1, 2, 4, 7, 9, 15]
    for position, value in enumerate(items):
        assert binary_search(items, value) == position


def test_binary_search_empty():
    assert binary_search([], 1) == -1


def test_first_and_last_index():
    items = [1, 2, 2, 2, 3]
    assert first_index(items, 2) == 1
    assert last_index(items, 2) == 3
    assert first_index(items, 5) == -1
    assert last_index(items, 0) == -1


def test_first_at_least():
    items = [1, 3, 5, 5, 8]
    assert first_at_least(items, 4) == 2
    assert first_at_least(items, 5) == 2
    assert first_at_least(items, 9) == -1
    assert first_at_least(items, 0) == 0


def test_last_at_most():
    items = [1, 3, 5, 5, 8]
    assert last_at_most(items, 4) == 1
    assert last_at_most(items, 5) == 3
    assert last_at_most(items, 0) == -1
    assert last_at_most(items, 100) == 4


@pytest.mark.parametrize(
    "nums, first_len, second_len, expected",
    [
        ([0, 6, 5, 2, 2, 5, 1, 9, 4], 1, 2, 20),
        ([3, 8, 1, 3, 2, 1, 8, 9, 0], 3, 2, 29),
        ([2, 1, 5, 6, 0, 9, 5, 0, 3, 8], 4, 3, 31),
    ],
)
def test_max_sum_two_no_overlap(nums, first_len, second_len, expected):
    assert max_sum_two_no_overlap(nums, first_len, second_len) == expected
    assert max_sum_two_no_overlap(nums, second_len, first_len) == expected


def test_max_sum_two_no_overlap_whole_sequence():
    nums = [4, -1, 2, 7]
    assert max_sum_two_no_overlap(nums, 2, 2) == sum(nums)


def test_max_sum_two_no_overlap_rejects_too_long():
    with pytest.raises(ValueError):
        max_sum_two_no_overlap([1, 2, 3], 2, 2)


def test_max_sum_two_no_overlap_rejects_zero_length():
    with pytest.raises(ValueError):
        max_sum_two_no_overlap([1, 2, 3], 0, 2)