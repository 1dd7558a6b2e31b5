import random

import pytest

from labstructs.sorting import (
    SortStats,
    binary_search,
    bubble_sort,
    heap_sort,
    insertion_sort,
    main,
    quick_sort,
    selection_sort,
    seq_search,
)


def _random_values(seed, count=60):
    rng = random.Random(seed)
    return [rng.randint(1, 100) for _ in range(count)]


def _inversions(values):
    return sum(
        1
        for i, a in enumerate(values)
        for b in values[i + 1:]
        if a > b
    )


@pytest.mark.parametrize("sorter", [bubble_sort, selection_sort, insertion_sort, quick_sort, heap_sort])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_sorts_match_sorted(sorter, seed):
    values = _random_values(seed)
    expected = sorted(values)
    sorter(values)
    assert values == expected


@pytest.mark.parametrize("sorter", [bubble_sort, selection_sort, insertion_sort, quick_sort, heap_sort])
@pytest.mark.parametrize("values", [[], [1], [2, 1], [3, 3, 3], [5, 4, 3, 2, 1]])
def test_sorts_small_inputs(sorter, values):
    data = list(values)
    sorter(data)
    assert data == sorted(values)


def test_bubble_sort_counts():
    values = _random_values(7)
    inversions = _inversions(values)
    n = len(values)
    stats = bubble_sort(values)
    assert stats.comparisons == n * (n - 1) // 2
    assert stats.assignments == inversions


def test_selection_sort_counts():
    values = _random_values(8)
    n = len(values)
    stats = selection_sort(values)
    assert stats == SortStats(comparisons=n * (n - 1) // 2, assignments=2 * n)


def test_insertion_sort_on_sorted_input():
    values = list(range(1, 21))
    stats = insertion_sort(values)
    assert stats == SortStats(comparisons=len(values) - 1, assignments=0)


def test_insertion_sort_shift_count_equals_inversions():
    values = _random_values(9)
    inversions = _inversions(values)
    stats = insertion_sort(values)
    assert stats.comparisons >= len(values) - 1
    assert stats.assignments >= inversions


def test_bubble_sort_on_sorted_input_makes_no_swaps():
    values = list(range(30))
    stats = bubble_sort(values)
    assert stats.assignments == 0


def test_seq_search():
    values = [22, 34, 56, 2, 89, 56]
    assert seq_search(values, 56) == 2
    assert seq_search(values, 22) == 0
    assert seq_search(values, 1000) == -1
    assert seq_search([], 1) == -1


def test_binary_search_finds_every_element():
    values = sorted(set(_random_values(4)))
    for index, value in enumerate(values):
        assert binary_search(values, value) == index


def test_binary_search_missing():
    values = [1, 3, 5, 7, 9]
    assert binary_search(values, 4) == -1
    assert binary_search(values, 0) == -1
    assert binary_search(values, 10) == -1
    assert binary_search([], 1) == -1


def test_main_prints_table(capsys):
    assert main(["--size", "50", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " " * 15 + "    comparisons    assignments"
    assert lines[1].startswith("bubble sort:")
    assert lines[2].startswith("selection sort:")
    assert lines[3].startswith("insertion sort:")
    bubble_comparisons = int(lines[1][15:30])
    assert bubble_comparisons == 50 * 49 // 2


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-1"])