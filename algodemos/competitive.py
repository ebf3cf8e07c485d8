"""Classic interview problems: arrays, strings and dynamic programming."""

from __future__ import annotations


def _go_list(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def rotate(nums: list, k: int) -> None:
    """Rotate a list right by k steps in place."""
    n = len(nums)
    if n == 0:
        raise ValueError("cannot rotate an empty list")
    if k < 0:
        raise ValueError(f"rotation must be non-negative: {k}")
    k %= n
    nums[:] = nums[n - k:] + nums[:n - k]


def two_sum(nums: list[int], target: int) -> tuple[int, int] | None:
    """Return indices of the first pair summing to target, or None."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return seen[complement], i
        seen[num] = i
    return None


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of characters without repeats."""
    last_seen: dict[str, int] = {}
    best = 0
    left = 0
    for right, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def knapsack(weights: list[int], values: list[int], capacity: int) -> int:
    """Return the best total value of items fitting in capacity (0/1 knapsack)."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative: {capacity}")
    if len(values) < len(weights):
        raise ValueError("every weight needs a value")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")

    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for w in range(capacity, weight - 1, -1):
            best[w] = max(best[w], best[w - weight] + value)
    return best[capacity]


def run_competitive() -> None:
    """Print the worked examples."""
    pair = two_sum([2, 7, 11, 15], 9)
    print("Indices:", _go_list(pair or ()))

    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 3)
    print("Rotated array:", _go_list(nums))

    print("Length of longest substring:", length_of_longest_substring("abcabcbb"))

    n = 10
    print(f"Fibonacci of {n} (Recursive): {fibonacci(n)}")

    print("Maximum value in Knapsack:", knapsack([2, 3, 4, 5], [3, 4, 5, 6], 5))