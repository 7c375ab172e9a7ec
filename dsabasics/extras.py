"""Custom pair ordering, set-bit counting and ordered permutations."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from functools import cmp_to_key
from typing import Any


def compare_pairs(first: tuple[Any, Any], second: tuple[Any, Any]) -> bool:
    """True if first goes before second: smaller second item, then larger first item."""
    if first[1] != second[1]:
        return first[1] < second[1]
    return first[0] > second[0]


def _pair_order(first: tuple[Any, Any], second: tuple[Any, Any]) -> int:
    if compare_pairs(first, second):
        return -1
    if compare_pairs(second, first):
        return 1
    return 0


def sort_pairs(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Pairs sorted by second item ascending, ties by first item descending."""
    return sorted(pairs, key=cmp_to_key(_pair_order))


def popcount(num: int) -> int:
    """Number of set bits in a non-negative integer."""
    if num < 0:
        raise ValueError("popcount needs a non-negative integer")
    return bin(num).count("1")


def _next_permutation(chars: list[str]) -> bool:
    """Rearrange chars into the next lexicographic order; False once it wraps."""
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        chars.reverse()
        return False
    successor = len(chars) - 1
    while chars[successor] <= chars[pivot]:
        successor -= 1
    chars[pivot], chars[successor] = chars[successor], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])
    return True


def permutations_in_order(text: str) -> Iterator[str]:
    """Every distinct arrangement of text's characters in lexicographic order."""
    chars = sorted(text)
    while True:
        yield "".join(chars)
        if not _next_permutation(chars):
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Show bit counts and the permutations of a string (default "213")."""
    text = argv[0] if argv else "213"
    print("Hi")
    print(f"cnt{popcount(7)}")
    print(f"cnt2{popcount(123456545645)}")
    print()
    for permutation in permutations_in_order(text):
        print(permutation)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))