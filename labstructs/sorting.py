"""Searching and sorting algorithms, some of which count their work."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Any, MutableSequence, Optional, Sequence

DEFAULT_SIZE = 5000
MAX_VALUE = 100000


@dataclass
class SortStats:
    """Number of key comparisons and element assignments a sort performed."""

    comparisons: int = 0
    assignments: int = 0


def seq_search(items: Sequence[Any], item: Any) -> int:
    """Return the index of the first ``item`` in ``items``, or -1."""
    for index, value in enumerate(items):
        if value == item:
            return index
    return -1


def binary_search(items: Sequence[Any], item: Any) -> int:
    """Return an index of ``item`` in the sorted ``items``, or -1."""
    first, last = 0, len(items) - 1
    while first <= last:
        mid = (first + last) // 2
        if items[mid] == item:
            return mid
        if items[mid] > item:
            last = mid - 1
        else:
            first = mid + 1
    return -1


def _swap(items: MutableSequence[Any], first: int, second: int) -> None:
    items[first], items[second] = items[second], items[first]


def bubble_sort(items: MutableSequence[Any]) -> SortStats:
    """Sort ``items`` in place; each swap counts as one assignment."""
    stats = SortStats()
    length = len(items)
    for iteration in range(1, length):
        for index in range(length - iteration):
            stats.comparisons += 1
            if items[index] > items[index + 1]:
                _swap(items, index, index + 1)
                stats.assignments += 1
    return stats


def selection_sort(items: MutableSequence[Any]) -> SortStats:
    """Sort ``items`` in place; each swap counts as two assignments."""
    stats = SortStats()
    length = len(items)
    for loc in range(length):
        min_index = loc
        for candidate in range(loc + 1, length):
            if items[candidate] < items[min_index]:
                min_index = candidate
            stats.comparisons += 1
        _swap(items, loc, min_index)
        stats.assignments += 2
    return stats


def insertion_sort(items: MutableSequence[Any]) -> SortStats:
    """Sort ``items`` in place, counting shifts and placements."""
    stats = SortStats()
    for first_out_of_order in range(1, len(items)):
        if items[first_out_of_order] < items[first_out_of_order - 1]:
            temp = items[first_out_of_order]
            location = first_out_of_order
            while True:
                stats.comparisons += 1
                items[location] = items[location - 1]
                stats.assignments += 1
                location -= 1
                if not (location > 0 and items[location - 1] > temp):
                    break
            items[location] = temp
            stats.assignments += 1
        stats.comparisons += 1
    return stats


def _partition(items: MutableSequence[Any], first: int, last: int) -> int:
    _swap(items, first, (first + last) // 2)
    pivot = items[first]
    small_index = first
    for index in range(first + 1, last + 1):
        if items[index] < pivot:
            small_index += 1
            _swap(items, small_index, index)
    _swap(items, first, small_index)
    return small_index


def _rec_quick_sort(items: MutableSequence[Any], first: int, last: int) -> None:
    if first < last:
        pivot_location = _partition(items, first, last)
        _rec_quick_sort(items, first, pivot_location - 1)
        _rec_quick_sort(items, pivot_location + 1, last)


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort, pivoting on the middle element."""
    _rec_quick_sort(items, 0, len(items) - 1)


def _heapify(items: MutableSequence[Any], low: int, high: int) -> None:
    temp = items[low]
    large_index = 2 * low + 1
    while large_index <= high:
        if large_index < high and items[large_index] < items[large_index + 1]:
            large_index += 1
        if temp > items[large_index]:
            break
        items[low] = items[large_index]
        low = large_index
        large_index = 2 * low + 1
    items[low] = temp


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with heapsort."""
    length = len(items)
    for index in range(length // 2 - 1, -1, -1):
        _heapify(items, index, length - 1)
    for last_out_of_order in range(length - 1, -1, -1):
        _swap(items, 0, last_out_of_order)
        _heapify(items, 0, last_out_of_order - 1)


def _row(label: str, first: Any, second: Any) -> str:
    return f"{label:<15}{first!s:>15}{second!s:>15}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare comparison and assignment counts of simple sorts."
    )
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="number of values")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")

    rng = random.Random(args.seed)
    values = [rng.randint(1, MAX_VALUE) for _ in range(args.size)]

    bubble = bubble_sort(list(values))
    selection = selection_sort(list(values))
    insertion = insertion_sort(list(values))

    print(_row("", "comparisons", "assignments"))
    print(_row("bubble sort:", bubble.comparisons, bubble.assignments))
    print(_row("selection sort:", selection.comparisons, selection.assignments))
    print(_row("insertion sort:", insertion.comparisons, insertion.assignments))
    return 0