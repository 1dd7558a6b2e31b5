"""Last-in, first-out stacks: one of linked nodes, one of bounded capacity."""

from __future__ import annotations

import argparse
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from labstructs.linked_list import _Node

DEFAULT_MAX_SIZE = 100


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._top: Optional[_Node] = None
        self._count = 0
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._top = _Node(item, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove the top element and return it."""
        if self._top is None:
            raise IndexError("cannot remove from an empty stack")
        node = self._top
        self._top = node.link
        self._count -= 1
        return node.info

    def top(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise IndexError("top of an empty stack")
        return self._top.info

    def is_empty(self) -> bool:
        return self._top is None

    def is_full(self) -> bool:
        """A linked stack never fills up."""
        return False

    def clear(self) -> None:
        """Remove every element."""
        self._top = None
        self._count = 0

    def copy(self) -> "LinkedStack":
        """Return an independent stack with the same elements in the same order."""
        return type(self)(reversed(list(self)))

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from top to bottom."""
        current = self._top
        while current is not None:
            yield current.info
            current = current.link

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top_to_bottom={list(self)!r})"


class ArrayStack:
    """Stack that holds at most ``max_size`` elements."""

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        if max_size <= 0:
            raise ValueError("size of the array to hold the stack must be positive")
        self._max_size = max_size
        self._items: List[Any] = []

    @property
    def max_size(self) -> int:
        return self._max_size

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise OverflowError("cannot add to a full stack")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove the top element and return it."""
        if not self._items:
            raise IndexError("cannot remove from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._max_size

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def copy(self) -> "ArrayStack":
        """Return an independent stack with the same capacity and elements."""
        duplicate = type(self)(self._max_size)
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_size={self._max_size}, top_to_bottom={list(self)!r})"


def _drain(stack: LinkedStack) -> str:
    values = []
    while not stack.is_empty():
        values.append(stack.pop())
    return "".join(f"{value} " for value in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate copying a linked stack.")
    parser.parse_args(argv)

    stack = LinkedStack()
    stack.push(85)
    stack.push(28)
    stack.push(56)

    print("Testing assignment operator: ")
    copied = stack.copy()
    print(f"The elements of copyStack: (should be 56 28 85): {_drain(copied)}")

    print("Testing copy constructor: ")
    constructed = LinkedStack(reversed(list(stack)))
    print(
        "The elements of copyConstructedStack (should be 56 28 85): "
        f"{_drain(constructed)}"
    )
    return 0