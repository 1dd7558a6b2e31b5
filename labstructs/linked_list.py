"""A singly linked list with positional access and removal."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    info: Any
    link: Optional["_Node"] = None


class LinkedList:
    """Singly linked list that keeps references to its first and last nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: Optional[_Node] = None
        self._last: Optional[_Node] = None
        self._count = 0
        for item in items:
            self._append(item)

    def _append(self, item: Any) -> None:
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.link = node
        self._last = node
        self._count += 1

    def _nodes(self) -> Iterator[_Node]:
        current = self._first
        while current is not None:
            yield current
            current = current.link

    def _check_position(self, k: int) -> None:
        if not 1 <= k <= self._count:
            raise IndexError(
                f"position {k} is out of range for a list of length {self._count}"
            )

    def _node_at(self, k: int) -> _Node:
        return next(islice(self._nodes(), k - 1, None))

    def front(self) -> Any:
        """Return the first element."""
        if self._first is None:
            raise IndexError("front of an empty list")
        return self._first.info

    def back(self) -> Any:
        """Return the last element."""
        if self._last is None:
            raise IndexError("back of an empty list")
        return self._last.info

    def is_empty(self) -> bool:
        return self._first is None

    def clear(self) -> None:
        """Remove every element."""
        self._first = None
        self._last = None
        self._count = 0

    def copy(self) -> "LinkedList":
        """Return an independent list holding the same elements."""
        return type(self)(self)

    def get_kth_element(self, k: int) -> Any:
        """Return the element at 1-based position ``k``."""
        self._check_position(k)
        return self._node_at(k).info

    def delete_kth_element(self, k: int) -> Any:
        """Remove the element at 1-based position ``k`` and return it."""
        self._check_position(k)
        if k == 1:
            removed = self._first
            self._first = removed.link
            if self._first is None:
                self._last = None
        else:
            trail = self._node_at(k - 1)
            removed = trail.link
            trail.link = removed.link
            if removed is self._last:
                self._last = trail
        self._count -= 1
        return removed.info

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (node.info for node in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"