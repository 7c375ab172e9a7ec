"""Counting how often numbers occur and answering frequency queries."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence


def frequency_table(numbers: Iterable[int]) -> Counter[int]:
    """How many times each number occurs, in order of first appearance."""
    return Counter(numbers)


def max_frequency(frequencies: Mapping[int, int]) -> int:
    """The largest count in the table, or 0 when it is empty."""
    return max(frequencies.values(), default=0)


def most_frequent(frequencies: Mapping[int, int]) -> tuple[int, int]:
    """The first number with the largest count and that count; (-1, 0) when empty."""
    best, best_count = -1, 0
    for number, frequency in frequencies.items():
        if frequency > best_count:
            best, best_count = number, frequency
    return best, best_count


def _read_ints(tokens: Iterable[str]) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise SystemExit(f"expected integers on standard input: {exc}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers and queries from standard input and report their frequencies.

    The input is a count n, n numbers, a count q and q numbers to look up.
    """
    del argv
    values = iter(_read_ints(sys.stdin.read().split()))
    try:
        n = next(values)
        numbers = [next(values) for _ in range(n)]
        q = next(values)
        queries = [next(values) for _ in range(q)]
    except StopIteration:
        raise SystemExit("input ended early") from None

    print("Hashing and Maps")
    table = frequency_table(numbers)
    for number, frequency in table.items():
        print(f"{number} {frequency}")
    for number in queries:
        print(table.get(number, 0))
    print(f"Maximum frequency is: {max_frequency(table)}")
    number, frequency = most_frequent(table)
    print(f"Most frequent number is: {number} with frequency: {frequency}")
    return 0


if __name__ == "__main__":
    sys.exit(main())