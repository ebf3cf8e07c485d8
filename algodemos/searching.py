"""Linear and binary search over lists."""

from __future__ import annotations

from bisect import bisect_right


def binary_search(arr: list, target) -> int:
    """Return an index of target in a sorted list, or -1 if absent.

    With repeated values the last matching index is returned.
    """
    position = bisect_right(arr, target)
    if position and arr[position - 1] == target:
        return position - 1
    return -1


def linear_search(arr: list, target) -> int:
    """Return the first index of target in a list, or -1 if absent."""
    return next((i for i, value in enumerate(arr) if value == target), -1)


def _report(target, index: int, missing: str) -> None:
    if index != -1:
        print(f"Element {target} found at index {index}")
    else:
        print(f"Element {target} {missing}")


def run_searching() -> None:
    """Print the binary and linear search examples."""
    target = 27
    _report(target, binary_search([3, 9, 10, 27, 38, 43, 82], target), "not found in the array")
    target = 30
    _report(target, linear_search([10, 20, 30, 40, 50], target), "not found")