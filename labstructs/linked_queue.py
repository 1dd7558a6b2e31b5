"""A first-in, first-out queue built from linked nodes."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from labstructs.linked_list import _Node


class LinkedQueue:
    """Unbounded queue: elements are added at the rear and removed from the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._count = 0
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear of the queue."""
        node = _Node(item)
        if self._rear is None:
            self._front = node
        else:
            self._rear.link = node
        self._rear = node
        self._count += 1

    def remove(self) -> Any:
        """Remove the front element and return it."""
        if self._front is None:
            raise IndexError("cannot remove from an empty queue")
        node = self._front
        self._front = node.link
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.info

    def front(self) -> Any:
        """Return the front element without removing it."""
        if self._front is None:
            raise IndexError("front of an empty queue")
        return self._front.info

    def back(self) -> Any:
        """Return the rear element without removing it."""
        if self._rear is None:
            raise IndexError("back of an empty queue")
        return self._rear.info

    def is_empty(self) -> bool:
        return self._front is None

    def is_full(self) -> bool:
        """A linked queue never fills up."""
        return False

    def clear(self) -> None:
        """Remove every element."""
        self._front = None
        self._rear = None
        self._count = 0

    def copy(self) -> "LinkedQueue":
        """Return an independent queue with the same elements in the same order."""
        return type(self)(self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from front to rear."""
        current = self._front
        while current is not None:
            yield current.info
            current = current.link

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"