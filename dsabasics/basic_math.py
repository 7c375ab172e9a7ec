"""Digit manipulation, divisors, primes, GCD and LCM."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence


def _digits(num: int) -> list[int]:
    """Digits of a positive number, least significant first."""
    digits = []
    while num > 0:
        num, last = divmod(num, 10)
        digits.append(last)
    return digits


def count_digits(num: int) -> int:
    """Number of decimal digits in a positive integer."""
    if num <= 0:
        raise ValueError("count_digits needs a positive integer")
    return len(str(num))


def reverse_number(num: int) -> int:
    """The digits of num in reverse order; 0 for non-positive input."""
    reversed_num = 0
    for digit in _digits(num):
        reversed_num = reversed_num * 10 + digit
    return reversed_num


def is_palindrome_number(num: int) -> bool:
    """True if num reads the same reversed."""
    return reverse_number(num) == num


def is_armstrong(num: int) -> bool:
    """True if num equals the sum of its digits each raised to the digit count."""
    digits = _digits(num)
    return sum(d ** len(digits) for d in digits) == num


def divisors_naive(num: int) -> list[int]:
    """All divisors of num found by trying every candidate up to num."""
    return [i for i in range(1, num + 1) if num % i == 0]


def divisors(num: int) -> list[int]:
    """All divisors of num in ascending order, found up to its square root."""
    found = []
    if num > 0:
        for i in range(1, math.isqrt(num) + 1):
            if num % i == 0:
                found.append(i)
                if i != num // i:
                    found.append(num // i)
    return sorted(found)


def is_prime(num: int) -> bool:
    """True if num has exactly two divisors."""
    return len(divisors(num)) == 2


def gcd_brute(num1: int, num2: int) -> int:
    """Greatest common divisor by counting down from the smaller number."""
    smaller = min(num1, num2)
    if smaller < 1:
        raise ValueError("gcd_brute needs positive integers")
    return next(i for i in range(smaller, 0, -1) if num1 % i == 0 and num2 % i == 0)


def gcd(num1: int, num2: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    if num1 < 0 or num2 < 0:
        raise ValueError("gcd needs non-negative integers")
    while num1 > 0 and num2 > 0:
        if num1 > num2:
            num1 %= num2
        else:
            num2 %= num1
    return num2 if num1 == 0 else num1


def lcm_brute(num1: int, num2: int) -> int:
    """Least common multiple by counting up from the larger number."""
    if num1 < 1 or num2 < 1:
        raise ValueError("lcm_brute needs positive integers")
    candidate = max(num1, num2)
    while candidate % num1 or candidate % num2:
        candidate += 1
    return candidate


def lcm(num1: int, num2: int) -> int:
    """Least common multiple from the product and the GCD."""
    if num1 < 1 or num2 < 1:
        raise ValueError("lcm needs positive integers")
    return num1 * num2 // gcd(num1, num2)


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether a number is prime; it comes from the arguments or standard input."""
    parser = argparse.ArgumentParser(description="Check whether a number is prime.")
    parser.add_argument("num", type=int, nargs="?")
    args = parser.parse_args(argv)
    num = args.num
    if num is None:
        try:
            num = int(sys.stdin.readline())
        except ValueError:
            parser.error("expected an integer on standard input")
    print(f"Is Prime Number :{int(is_prime(num))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())