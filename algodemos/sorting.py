"""Bubble sort, merge sort and quicksort."""

from __future__ import annotations


def _go_list(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def bubble_sort(arr: list) -> None:
    """Sort a list in place, stopping early once a pass makes no swap."""
    n = len(arr)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(arr: list) -> list:
    """Return a new sorted list, leaving the input untouched."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _partition(arr: list, lo: int, hi: int) -> int:
    pivot = arr[hi]
    i = lo
    for j in range(lo, hi):
        if arr[j] < pivot:
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
    arr[i], arr[hi] = arr[hi], arr[i]
    return i


def quick_sort(arr: list) -> None:
    """Sort a list in place, partitioning around the last element."""
    pending = [(0, len(arr) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot_index = _partition(arr, lo, hi)
        pending.append((lo, pivot_index - 1))
        pending.append((pivot_index + 1, hi))


def run_sorting() -> None:
    """Print the bubble, merge and quick sort examples."""
    arr = [64, 34, 25, 12, 22, 11, 90]
    print("Unsorted array:", _go_list(arr))
    bubble_sort(arr)
    print("Sorted array:", _go_list(arr))

    arr = [38, 27, 43, 3, 9, 82, 10]
    print("Unsorted array:", _go_list(arr))
    print("Sorted array:", _go_list(merge_sort(arr)))

    arr = [64, 34, 25, 12, 22, 11, 90]
    print("Unsorted array:", _go_list(arr))
    quick_sort(arr)
    print("Sorted array:", _go_list(arr))