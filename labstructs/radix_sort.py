"""Least-significant-digit radix sort of fixed-width alphanumeric strings."""

from __future__ import annotations

import argparse
from typing import Iterable, List, Optional, Sequence

from labstructs.linked_queue import LinkedQueue

NUMBER_OF_BUCKETS = 36

_DEMOS = {
    "1": ["1123", "1398", "1210", "1019", "1528", "1003", "1513", "1129", "1220", "1294"],
    "2": ["test", "fire", "thik", "slik", "aunt", "cass", "meme", "easy", "game", "noob"],
    "3": ["t3st", "f1re", "th1k", "sl1k", "4unt", "c4ss", "m3m3", "3asy", "g4m3", "n00b"],
}
_DUMMY = ["0000"] * 10


def bucket_index(char: str) -> int:
    """Return the bucket of a character: digits 0-9, then lowercase letters 10-35."""
    if "0" <= char <= "9":
        return ord(char) & 0x0F
    if "a" <= char <= "z":
        return ord(char) - 87
    raise ValueError(f"character {char!r} is not a digit or a lowercase letter")


def radix_sort(items: Iterable[str], width: int) -> List[str]:
    """Return ``items`` sorted by their first ``width`` characters, stably."""
    values = list(items)
    for value in values:
        if len(value) < width:
            raise ValueError(f"{value!r} is shorter than {width} characters")
    buckets = [LinkedQueue() for _ in range(NUMBER_OF_BUCKETS)]
    for position in range(width - 1, -1, -1):
        for value in values:
            buckets[bucket_index(value[position])].add(value)
        values = []
        for bucket in buckets:
            while not bucket.is_empty():
                values.append(bucket.remove())
    return values


def _show(values: Sequence[str]) -> None:
    for value in values:
        print(value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate radix sort on sample data.")
    parser.parse_args(argv)

    print("Radix Sort Program\n-----------------------")
    again = "y"
    while again in ("y", "Y"):
        print(
            "Select one of the following demonstrations: \n"
            "[1] Numbers only\n[2] Letters only\n[3] Alpha-numeric"
        )
        try:
            choice = input("Input: ").strip()
        except EOFError:
            print()
            break
        data = list(_DEMOS.get(choice, _DUMMY))

        print("Before Sort\n-----------------------")
        _show(data)
        data = radix_sort(data, 4)
        print("\nAfter Sort\n-----------------------")
        _show(data)
        try:
            again = input("\nDo it again? (Y/N): ").strip()[:1]
        except EOFError:
            again = ""
        print()
    return 0