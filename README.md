# dsabasics

Compact implementations of the classic first exercises in data structures
and algorithms, written as plain Python functions you can call, test and
read. There are no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsabasics.patterns`: 22 text patterns built from stars, digits and
  letters. Each function takes a size `n` and returns the rows as a list of
  strings: `square`, `right_triangle`, `number_triangle`,
  `repeated_number_triangle`, `inverted_triangle`,
  `inverted_number_triangle`, `pyramid`, `inverted_pyramid`, `diamond`,
  `half_diamond`, `binary_triangle`, `number_crown`, `floyd_triangle`,
  `letter_triangle`, `inverted_letter_triangle`, `repeated_letter_triangle`,
  `letter_pyramid`, `reverse_letter_triangle`, `hollow_diamond`,
  `butterfly`, `hollow_square` and `concentric_square`.
  `render(number, n)` picks a pattern by its number (1 to 22) and returns it
  as text with one line per row. An unknown number raises `ValueError`.
- `dsabasics.basic_math`: digit work and number theory. The functions are
  `count_digits`, `reverse_number`, `is_palindrome_number`, `is_armstrong`,
  `divisors` (search up to the square root, sorted), `divisors_naive`,
  `is_prime`, `gcd_brute`, `gcd` (Euclidean), `lcm_brute` and `lcm`. Inputs
  outside a function's range, such as a non-positive number for
  `count_digits`, `gcd_brute`, `lcm_brute` or `lcm`, raise `ValueError`.
- `dsabasics.recursion`: recursive routines. `name_lines`, `count_up`,
  `count_down`, `count_up_backtracking` and `count_down_backtracking` build
  sequences. `sum_parameterised`, `sum_functional` and `factorial` compute
  sums and products. `fibonacci` uses plain double recursion.
  `reverse_two_pointer` and `reverse_single_pointer` return reversed copies.
  `is_palindrome` and `is_palindrome_single` check strings.
- `dsabasics.hashing`: `frequency_table` counts occurrences with a
  `Counter`, which keeps first-appearance order. `max_frequency` returns the
  largest count. `most_frequent` returns the first number with the largest
  count together with that count, or `(-1, 0)` when the table is empty.
- `dsabasics.sorting`: `selection_sort`, `bubble_sort`, `insertion_sort`,
  `merge_sort` and `quick_sort(items, descending=False)`. Each returns a new
  sorted list and leaves its input unchanged. `partition(items, low, high,
  descending=False)` is the in-place step behind quick sort.
- `dsabasics.extras`: `compare_pairs` and `sort_pairs` order pairs by their
  second element ascending and break ties by the first element descending.
  `popcount` counts set bits. `permutations_in_order` yields every distinct
  arrangement of a string's characters in lexicographic order.

## Using it from Python

```python
from dsabasics.basic_math import gcd, is_prime, count_digits
from dsabasics.recursion import fibonacci
from dsabasics.extras import popcount, sort_pairs
from dsabasics.patterns import render

gcd(20, 15)                           # 5
is_prime(7)                           # True
count_digits(7789)                    # 4
fibonacci(10)                         # 55
popcount(7)                           # 3
sort_pairs([(1, 2), (2, 1), (4, 1)])  # [(4, 1), (2, 1), (1, 2)]
print(render(7, 3), end="")           # a three-row pyramid
```

## Command-line tools

- `dsa-patterns [n] [--pattern N]`: prints pattern `N` of size `n`. The
  default pattern is 22, `concentric_square`. If `n` is not given, it is read
  from standard input.
- `dsa-math [num]`: prints `Is Prime Number :1` or `Is Prime Number :0`. If
  `num` is not given, it is read from standard input.
- `dsa-recursion [n]`: prints the n-th Fibonacci number. If `n` is not given,
  it is read from standard input.
- `dsa-sorting [numbers ...]`: prints the numbers after merge sort and after
  a descending quick sort. Without arguments it sorts `23 43 23 56 3 8`.
- `dsa-hashing`: reads from standard input a count `n`, then `n` numbers,
  then a count `q`, then `q` numbers to look up. It prints the frequency of
  each number, the answer to each query, the maximum frequency and the most
  frequent number.
- `dsa-extras [text]`: prints the set-bit counts of 7 and 123456545645, then
  every permutation of `text` in order. The default text is `213`.