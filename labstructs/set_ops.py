"""Intersection of sorted sequences, keeping multiplicities like a merge."""

from __future__ import annotations

import argparse
from typing import Any, Iterable, List, MutableSequence, Optional, Sequence

_MISSING = object()


def intersect(first: Iterable[Any], second: Iterable[Any]) -> List[Any]:
    """Return the sorted intersection of two sorted sequences.

    Each value appears as many times as it does in the sequence where it is
    less frequent; the copies come from ``first``.
    """
    result: List[Any] = []
    left = iter(first)
    right = iter(second)
    a = next(left, _MISSING)
    b = next(right, _MISSING)
    while a is not _MISSING and b is not _MISSING:
        if a < b:
            a = next(left, _MISSING)
        elif b < a:
            b = next(right, _MISSING)
        else:
            result.append(a)
            a = next(left, _MISSING)
            b = next(right, _MISSING)
    return result


def intersect_into(source: Iterable[Any], destination: MutableSequence[Any]) -> None:
    """Replace ``destination`` in place with its intersection with ``source``."""
    destination[:] = intersect(source, destination)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Intersect several sorted sequences one after another."
    )
    parser.parse_args(argv)

    v1 = [1, 2, 3, 4, 6]
    v2 = [1, 2, 4, 5, 6]
    v3 = [4, 5, 6, 7, 8]
    v4 = [0, 0, 0, 4, 6]

    results = intersect(v1, v2)
    intersect_into(v3, results)
    intersect_into(v4, results)

    print("Intersection values: " + "".join(f"{value} " for value in results))
    return 0