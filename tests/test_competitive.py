import pytest

from algodemos.competitive import (
    fibonacci,
    knapsack,
    length_of_longest_substring,
    rotate,
    run_competitive,
    two_sum,
)


def test_rotate_example():
    nums = [1, 2, 3, 4, 5, 6, 7]
    assert rotate(nums, 3) is None
    assert nums == [5, 6, 7, 1, 2, 3, 4]


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10])
def test_rotate_round_trip(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    assert sorted(nums) == original
    rotate(nums, len(nums) - k % len(nums))
    assert nums == original


def test_rotate_wraps_large_k():
    a = [1, 2, 3, 4]
    b = [1, 2, 3, 4]
    rotate(a, 6)
    rotate(b, 2)
    assert a == b


def test_rotate_empty():
    with pytest.raises(ValueError):
        rotate([], 1)


def test_rotate_negative():
    with pytest.raises(ValueError):
        rotate([1, 2], -1)


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == (0, 1)


@pytest.mark.parametrize(
    "nums,target", [([3, 2, 4], 6), ([3, 3], 6), ([1, 5, -2, 8], 6)]
)
def test_two_sum_indices_hit_target(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_missing():
    assert two_sum([1, 2, 3], 100) is None
    assert two_sum([], 0) is None


def test_longest_substring_example():
    assert length_of_longest_substring("abcabcbb") == 3


@pytest.mark.parametrize("s", ["abcdef", "x", ""])
def test_longest_substring_all_distinct(s):
    assert length_of_longest_substring(s) == len(s)


def test_longest_substring_repeated_char():
    assert length_of_longest_substring("bbbbb") == 1


def test_longest_substring_bounded_by_length():
    for s in ["pwwkew", "dvdf", "abba", "tmmzuxt"]:
        assert 1 <= length_of_longest_substring(s) <= len(s)


def test_fibonacci_base_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 25):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_small_values_returned_as_is():
    assert fibonacci(-3) == -3


def test_knapsack_empty_capacity():
    assert knapsack([2, 3, 4, 5], [3, 4, 5, 6], 0) == 0


def test_knapsack_everything_fits():
    weights, values = [2, 3, 4, 5], [3, 4, 5, 6]
    assert knapsack(weights, values, sum(weights)) == sum(values)


def test_knapsack_single_item():
    assert knapsack([4], [9], 4) == 9
    assert knapsack([4], [9], 3) == 0


def test_knapsack_monotonic_in_capacity():
    weights, values = [2, 3, 4, 5], [3, 4, 5, 6]
    results = [knapsack(weights, values, c) for c in range(15)]
    assert results == sorted(results)


def test_knapsack_items_used_once():
    assert knapsack([1], [5], 10) == 5


@pytest.mark.parametrize(
    "weights,values,capacity",
    [([1, 2], [1], 3), ([1], [1], -1), ([-1], [1], 3)],
)
def test_knapsack_invalid(weights, values, capacity):
    with pytest.raises(ValueError):
        knapsack(weights, values, capacity)


def test_run_competitive_output(capsys):
    run_competitive()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Indices: [")
    assert lines[1].startswith("Rotated array: [")
    assert lines[2].startswith("Length of longest substring:")
    assert lines[3].startswith("Fibonacci of 10 (Recursive):")
    assert lines[4].startswith("Maximum value in Knapsack:")
    assert len(lines) == 5