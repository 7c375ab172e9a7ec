"""Text patterns built from stars, digits and letters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from itertools import count


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def square(n: int) -> list[str]:
    """An n by n block of stars."""
    return ["*" * n for _ in range(n)]


def right_triangle(n: int) -> list[str]:
    """Rows of 1..n stars."""
    return ["*" * i for i in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Row i holds the digits 1..i."""
    return ["".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Row i holds the number i repeated i times."""
    return [str(i) * i for i in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Rows of n..1 stars."""
    return ["*" * i for i in range(n, 0, -1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Rows counting 1..k for k from n down to 1."""
    return ["".join(str(j) for j in range(1, i + 1)) for i in range(n, 0, -1)]


def pyramid(n: int) -> list[str]:
    """A centred pyramid of odd star counts."""
    return [" " * (n - i - 1) + "*" * (2 * i + 1) for i in range(n)]


def inverted_pyramid(n: int) -> list[str]:
    """A centred pyramid standing on its tip."""
    return [" " * i + "*" * (2 * n - (2 * i + 1)) for i in range(n)]


def diamond(n: int) -> list[str]:
    """A pyramid followed by its inversion."""
    return pyramid(n) + inverted_pyramid(n)


def half_diamond(n: int) -> list[str]:
    """Star rows growing to n and shrinking back."""
    return ["*" * min(i, 2 * n - i) for i in range(1, 2 * n)]


def binary_triangle(n: int) -> list[str]:
    """Alternating 1/0 rows; odd rows start with 1, even rows with 0."""
    return ["".join(str((i + j) % 2) for j in range(i)) for i in range(1, n + 1)]


def number_crown(n: int) -> list[str]:
    """Counting up on the left, down on the right, with a shrinking gap."""
    rows = []
    for i in range(1, n + 1):
        left = "".join(str(j) for j in range(1, i + 1))
        right = "".join(str(j) for j in range(i, 0, -1))
        rows.append(left + " " * (2 * n - 2 * i) + right)
    return rows


def floyd_triangle(n: int) -> list[str]:
    """Consecutive numbers, i per row, each followed by a space."""
    numbers = count(1)
    return ["".join(f"{next(numbers)} " for _ in range(i)) for i in range(1, n + 1)]


def letter_triangle(n: int) -> list[str]:
    """Row i holds letters A.. up to the i-th letter, space separated."""
    return ["".join(f"{_letter(j)} " for j in range(i + 1)) for i in range(n)]


def inverted_letter_triangle(n: int) -> list[str]:
    """The letter triangle with its longest row first."""
    return ["".join(f"{_letter(j)} " for j in range(n - i)) for i in range(n)]


def repeated_letter_triangle(n: int) -> list[str]:
    """Row i holds the i-th letter repeated i times."""
    return [f"{_letter(i)} " * (i + 1) for i in range(n)]


def letter_pyramid(n: int) -> list[str]:
    """A centred pyramid of letters rising to the middle and falling back."""
    rows = []
    for i in range(n):
        rising = [_letter(j) for j in range(i + 1)]
        rows.append(" " * (n - i - 1) + "".join(rising) + "".join(reversed(rising[:-1])))
    return rows


def reverse_letter_triangle(n: int) -> list[str]:
    """Rows that start further back in the alphabet and end at the n-th letter."""
    return [
        "".join(_letter(n - i - 1 + j) for j in range(i + 1)) for i in range(n)
    ]


def hollow_diamond(n: int) -> list[str]:
    """Two star walls with a diamond-shaped gap between them."""
    top = [
        "*" * (n - i) + " " * (2 * i) + "*" * (n - i) for i in range(n)
    ]
    bottom = [
        "*" * (i + 1) + " " * (2 * n - 2 * (i + 1)) + "*" * (i + 1) for i in range(n)
    ]
    return top + bottom


def butterfly(n: int) -> list[str]:
    """Two star wings meeting in the middle row."""
    rows = []
    for i in range(1, 2 * n):
        stars = min(i, 2 * n - i)
        rows.append("*" * stars + " " * (2 * (n - stars)) + "*" * stars)
    return rows


def hollow_square(n: int) -> list[str]:
    """The border of an n by n square."""
    edge = {0, n - 1}
    return [
        "".join("*" if i in edge or j in edge else " " for j in range(n))
        for i in range(n)
    ]


def concentric_square(n: int) -> list[str]:
    """Nested squares of digits from n at the border down to 1 in the centre."""
    size = 2 * n - 1
    return [
        "".join(
            str(n - min(i, j, size - 1 - i, size - 1 - j)) for j in range(size)
        )
        for i in range(size)
    ]


PATTERNS: dict[int, Callable[[int], list[str]]] = {
    1: square,
    2: right_triangle,
    3: number_triangle,
    4: repeated_number_triangle,
    5: inverted_triangle,
    6: inverted_number_triangle,
    7: pyramid,
    8: inverted_pyramid,
    9: diamond,
    10: half_diamond,
    11: binary_triangle,
    12: number_crown,
    13: floyd_triangle,
    14: letter_triangle,
    15: inverted_letter_triangle,
    16: repeated_letter_triangle,
    17: letter_pyramid,
    18: reverse_letter_triangle,
    19: hollow_diamond,
    20: butterfly,
    21: hollow_square,
    22: concentric_square,
}


def render(number: int, n: int) -> str:
    """Return pattern `number` of size n as text, one line per row."""
    try:
        build = PATTERNS[number]
    except KeyError:
        raise ValueError(f"unknown pattern {number}; choose 1 to {len(PATTERNS)}") from None
    return "".join(f"{row}\n" for row in build(n))


def main(argv: Sequence[str] | None = None) -> int:
    """Print a pattern; the size comes from the arguments or standard input."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument("n", type=int, nargs="?", help="pattern size")
    parser.add_argument("--pattern", type=int, default=22, help="pattern number (1-22)")
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        try:
            n = int(sys.stdin.readline())
        except ValueError:
            parser.error("expected an integer size on standard input")
    try:
        text = render(args.pattern, n)
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())