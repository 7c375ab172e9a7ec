"""Classic comparison sorts: selection, bubble, insertion, merge and quick sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_NUMBERS = (23, 43, 23, 56, 3, 8)


def selection_sort(items: Iterable[T]) -> list[T]:
    """A sorted copy: each position in turn receives the smallest remaining item."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def bubble_sort(items: Iterable[T]) -> list[T]:
    """A sorted copy by adjacent swaps, stopping early once a pass swaps nothing."""
    result = list(items)
    for last in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """A sorted copy: each item is moved left until it is in place."""
    result = list(items)
    for i in range(len(result)):
        j = i
        while j > 0 and result[j - 1] > result[j]:
            result[j - 1], result[j] = result[j], result[j - 1]
            j -= 1
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """A stably sorted copy by splitting in halves and merging."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def partition(items: MutableSequence[Any], low: int, high: int, descending: bool = False) -> int:
    """Place items[low] at its final position within items[low..high] and return it.

    Afterwards everything left of the returned index comes before the pivot in
    the chosen order and everything right of it does not.
    """
    pivot = items[low]

    def before_or_equal(value: Any) -> bool:
        return value >= pivot if descending else value <= pivot

    i, j = low, high
    while i < j:
        while before_or_equal(items[i]) and i <= high - 1:
            i += 1
        while not before_or_equal(items[j]) and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(items: Iterable[T], descending: bool = False) -> list[T]:
    """A sorted copy by recursive partitioning around the first element."""
    result = list(items)

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        index = partition(result, low, high, descending)
        sort(low, index - 1)
        sort(index + 1, high)

    sort(0, len(result) - 1)
    return result


def _joined(values: Sequence[Any]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print numbers after merge sort and after descending quick sort."""
    parser = argparse.ArgumentParser(description="Sort a list of integers.")
    parser.add_argument("numbers", type=int, nargs="*", help="numbers to sort")
    args = parser.parse_args(argv)
    numbers = args.numbers or list(DEFAULT_NUMBERS)
    print("Sorting")
    print(f"Sorted Array: {_joined(merge_sort(numbers))}")
    print(f"Quick Sort Sorted Array: {_joined(quick_sort(numbers, descending=True))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())