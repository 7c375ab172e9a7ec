"""Small recursive routines: counting, sums, reversals, palindromes, Fibonacci."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def name_lines(name: str, n: int) -> list[str]:
    """Lines "i name" for i from 1 to n."""
    lines: list[str] = []

    def step(i: int) -> None:
        if i > n:
            return
        lines.append(f"{i} {name}")
        step(i + 1)

    step(1)
    return lines


def count_up(n: int) -> list[int]:
    """1..n, produced by recursing forwards."""
    out: list[int] = []

    def step(i: int) -> None:
        if i > n:
            return
        out.append(i)
        step(i + 1)

    step(1)
    return out


def count_down(n: int) -> list[int]:
    """n..1, produced by recursing backwards."""
    out: list[int] = []

    def step(i: int) -> None:
        if i < 1:
            return
        out.append(i)
        step(i - 1)

    step(n)
    return out


def count_up_backtracking(n: int) -> list[int]:
    """1..n, recording each value after the recursive call returns."""
    out: list[int] = []

    def step(i: int) -> None:
        if i < 1:
            return
        step(i - 1)
        out.append(i)

    step(n)
    return out


def count_down_backtracking(n: int) -> list[int]:
    """n..1, recording each value after the recursive call returns."""
    out: list[int] = []

    def step(i: int) -> None:
        if i > n:
            return
        step(i + 1)
        out.append(i)

    step(1)
    return out


def sum_parameterised(n: int) -> int:
    """Sum of 1..n carried along as an accumulator."""

    def step(i: int, total: int) -> int:
        if i < 1:
            return total
        return step(i - 1, total + i)

    return step(n, 0)


def sum_functional(n: int) -> int:
    """Sum of 1..n built from the returned values of recursive calls."""
    if n < 1:
        raise ValueError("sum_functional needs n >= 1")
    if n == 1:
        return 1
    return n + sum_functional(n - 1)


def factorial(n: int) -> int:
    """n! for n >= 1."""
    if n < 1:
        raise ValueError("factorial needs n >= 1")
    if n == 1:
        return 1
    return n * factorial(n - 1)


def reverse_two_pointer(items: Iterable[T]) -> list[T]:
    """A reversed copy, swapping from both ends towards the middle."""
    result = list(items)

    def swap(left: int, right: int) -> None:
        if left >= right:
            return
        result[left], result[right] = result[right], result[left]
        swap(left + 1, right - 1)

    swap(0, len(result) - 1)
    return result


def reverse_single_pointer(items: Iterable[T]) -> list[T]:
    """A reversed copy, swapping each element with its mirror."""
    result = list(items)
    size = len(result)

    def swap(i: int) -> None:
        if i >= size // 2:
            return
        result[i], result[size - i - 1] = result[size - i - 1], result[i]
        swap(i + 1)

    swap(0)
    return result


def is_palindrome(text: str) -> bool:
    """True if text reads the same backwards, comparing from both ends."""

    def check(i: int, j: int) -> bool:
        if i >= j:
            return True
        if text[i] != text[j]:
            return False
        return check(i + 1, j - 1)

    return check(0, len(text) - 1)


def is_palindrome_single(text: str) -> bool:
    """True if text reads the same backwards, comparing each index with its mirror."""

    def check(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[len(text) - i - 1]:
            return False
        return check(i + 1)

    return check(0)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number by plain double recursion."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the n-th Fibonacci number; n comes from the arguments or standard input."""
    parser = argparse.ArgumentParser(description="Print a Fibonacci number.")
    parser.add_argument("n", type=int, nargs="?")
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        try:
            n = int(sys.stdin.readline())
        except ValueError:
            parser.error("expected an integer on standard input")
    print(fibonacci(n))
    return 0


if __name__ == "__main__":
    sys.exit(main())