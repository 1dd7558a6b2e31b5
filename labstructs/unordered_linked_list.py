"""An unordered singly linked list with search and removal by value."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterator, Optional, Sequence

from labstructs.linked_list import LinkedList, _Node

SENTINEL = -999


class UnorderedLinkedList(LinkedList):
    """Linked list whose elements keep the order in which they were inserted."""

    def _unlink(self, trail: Optional[_Node], node: _Node) -> None:
        if trail is None:
            self._first = node.link
        else:
            trail.link = node.link
        if node is self._last:
            self._last = trail
        self._count -= 1

    def insert_first(self, item: Any) -> None:
        """Insert ``item`` at the front of the list."""
        node = _Node(item, self._first)
        self._first = node
        if self._last is None:
            self._last = node
        self._count += 1

    def insert_last(self, item: Any) -> None:
        """Append ``item`` at the end of the list."""
        self._append(item)

    def search(self, item: Any) -> bool:
        """Return True if ``item`` is in the list."""
        return any(value == item for value in self)

    def delete_node(self, item: Any) -> None:
        """Remove the first node holding ``item``."""
        if self._first is None:
            raise ValueError("cannot delete from an empty list")
        trail: Optional[_Node] = None
        for node in self._nodes():
            if node.info == item:
                self._unlink(trail, node)
                return
            trail = node
        raise ValueError(f"{item!r} is not in the list")

    def delete_smallest(self) -> Any:
        """Remove the first occurrence of the smallest element and return it."""
        if self._first is None:
            raise IndexError("cannot delete from an empty list")
        smallest = self._first.info
        for value in self:
            if value < smallest:
                smallest = value
        self.delete_node(smallest)
        return smallest

    def delete_all(self, item: Any) -> int:
        """Remove every occurrence of ``item``; return how many were removed."""
        removed = 0
        trail: Optional[_Node] = None
        current = self._first
        while current is not None:
            following = current.link
            if current.info == item:
                self._unlink(trail, current)
                removed += 1
            else:
                trail = current
            current = following
        return removed


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Exercise an unordered linked list with numbers read from stdin."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    numbers = UnorderedLinkedList()
    try:
        print("Enter numbers ending with -999")
        num = _next_int(tokens)
        while num != SENTINEL:
            numbers.insert_last(num)
            num = _next_int(tokens)
        print()
        print(f"List: {numbers}")
        print(f"Length of the list: {len(numbers)}")

        try:
            smallest = numbers.delete_smallest()
        except IndexError as exc:
            print(exc)
        else:
            print(f"Smallest value was: {smallest}")
            print(f"Deleting first node containing: {smallest}")
        print("List after deleting the smallest element")
        print(numbers)

        print("Enter number to delete all occurrences of : ", end="")
        num = _next_int(tokens)
        print()
        removed = numbers.delete_all(num)
        print(f"Deleted {removed} occurences of: {num}")
        print(f"List after deleting all occurrences of {num}")
        print(numbers)

        print("Enter the position of the item to be retrieved: ")
        k = _next_int(tokens)
        print()
        try:
            value = numbers.get_kth_element(k)
        except IndexError:
            print("K is too large. Terminating...")
            return 0
        print(f"Item at position {k} = {value}")

        print("Enter the position of the item to be removed: ")
        k = _next_int(tokens)
        print()
        print(f"Length of list: {len(numbers)}")
        try:
            numbers.delete_kth_element(k)
        except IndexError:
            print("K is too large. Terminating...")
            return 0
        print(f"List after removing the element at position {k}.")
        print(numbers)
    except (EOFError, ValueError) as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1
    return 0