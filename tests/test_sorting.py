import random

import pytest

from dsabasics.sorting import (
    DEFAULT_NUMBERS,
    bubble_sort,
    insertion_sort,
    main,
    merge_sort,
    partition,
    quick_sort,
    selection_sort,
)

SAMPLES = [
    [],
    [1],
    [2, 1],
    [23, 43, 23, 56, 3, 8],
    [13, 46, 24, 52, 20, 9],
    [5, 5, 5, 5],
    list(range(10)),
    list(range(10, 0, -1)),
    [-3, 0, 7, -3, 2],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_match_builtin(sample):
    expected = sorted(sample)
    assert selection_sort(sample) == expected
    assert bubble_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected


def test_sorts_leave_input_untouched():
    data = [23, 43, 23, 56, 3, 8]
    copy = list(data)
    assert selection_sort(data) == [3, 8, 23, 23, 43, 56]
    assert bubble_sort(data) == [3, 8, 23, 23, 43, 56]
    assert insertion_sort(data) == [3, 8, 23, 23, 43, 56]
    assert merge_sort(data) == [3, 8, 23, 23, 43, 56]
    assert quick_sort(data) == [3, 8, 23, 23, 43, 56]
    assert data == copy


def test_sorts_random_lists():
    rng = random.Random(1234)
    for _ in range(30):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 25))]
        expected = sorted(data)
        assert selection_sort(data) == expected
        assert bubble_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected


def test_sorts_accept_strings():
    expected = sorted("sorting")
    assert selection_sort("sorting") == expected
    assert bubble_sort("sorting") == expected
    assert insertion_sort("sorting") == expected
    assert merge_sort("sorting") == expected
    assert quick_sort("sorting") == expected


def test_merge_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __le__(self, other):
            return self.key <= other.key

    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
    tags = [item.tag for item in merge_sort(items)]
    assert tags == ["b", "d", "a", "c"]


@pytest.mark.parametrize("sample", SAMPLES)
def test_quick_sort_descending(sample):
    assert quick_sort(sample, descending=True) == sorted(sample, reverse=True)


@pytest.mark.parametrize("descending", [False, True])
def test_partition_places_pivot(descending):
    data = [23, 43, 23, 56, 3, 8]
    pivot = data[0]
    index = partition(data, 0, len(data) - 1, descending)
    assert data[index] == pivot
    assert sorted(data) == sorted([23, 43, 23, 56, 3, 8])
    for left in data[:index]:
        assert (left >= pivot) if descending else (left <= pivot)
    for right in data[index + 1 :]:
        assert (right < pivot) if descending else (right > pivot)


def test_partition_respects_bounds():
    data = [9, 4, 7, 1, 8, 0]
    index = partition(data, 1, 4)
    assert data[0] == 9 and data[5] == 0
    assert 1 <= index <= 4
    assert data[index] == 4


def test_main_prints_both_orders(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    ascending = "".join(f"{v} " for v in sorted(DEFAULT_NUMBERS))
    descending = "".join(f"{v} " for v in sorted(DEFAULT_NUMBERS, reverse=True))
    assert out == [
        "Sorting",
        f"Sorted Array: {ascending}",
        f"Quick Sort Sorted Array: {descending}",
    ]


def test_main_with_arguments(capsys):
    main(["3", "1", "2"])
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Sorted Array: 1 2 3 "
    assert out[2] == "Quick Sort Sorted Array: 3 2 1 "