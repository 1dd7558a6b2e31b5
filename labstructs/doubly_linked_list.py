"""An ordered doubly linked list."""

from __future__ import annotations

import argparse
from typing import Any, Iterable, Iterator, Optional, Sequence


class _Node:
    __slots__ = ("info", "next", "back")

    def __init__(self, info: Any) -> None:
        self.info = info
        self.next: Optional[_Node] = None
        self.back: Optional[_Node] = None


class OrderedDoublyLinkedList:
    """Doubly linked list whose elements are kept in ascending order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: Optional[_Node] = None
        self._last: Optional[_Node] = None
        self._count = 0
        for item in items:
            self.insert(item)

    def _nodes(self) -> Iterator[_Node]:
        current = self._first
        while current is not None:
            yield current
            current = current.next

    def _first_not_less(self, item: Any) -> Optional[_Node]:
        for node in self._nodes():
            if node.info >= item:
                return node
        return None

    def insert(self, item: Any) -> None:
        """Insert ``item`` before the first element not less than it."""
        node = _Node(item)
        current = self._first_not_less(item)
        if current is None:
            node.back = self._last
            if self._last is None:
                self._first = node
            else:
                self._last.next = node
            self._last = node
        else:
            node.next = current
            node.back = current.back
            if current.back is None:
                self._first = node
            else:
                current.back.next = node
            current.back = node
        self._count += 1

    def delete_node(self, item: Any) -> None:
        """Remove one node holding ``item``."""
        if self._first is None:
            raise ValueError("cannot delete from an empty list")
        current = self._first_not_less(item)
        if current is None or current.info != item:
            raise ValueError(f"{item!r} is not in the list")
        if current.back is None:
            self._first = current.next
        else:
            current.back.next = current.next
        if current.next is None:
            self._last = current.back
        else:
            current.next.back = current.back
        self._count -= 1

    def search(self, item: Any) -> bool:
        """Return True if ``item`` is in the list."""
        current = self._first_not_less(item)
        return current is not None and current.info == item

    def __contains__(self, item: Any) -> bool:
        return self.search(item)

    def front(self) -> Any:
        """Return the smallest element."""
        if self._first is None:
            raise IndexError("front of an empty list")
        return self._first.info

    def back(self) -> Any:
        """Return the largest element."""
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

    def copy(self) -> "OrderedDoublyLinkedList":
        """Return an independent list holding the same elements."""
        return type(self)(self)

    def copy_from(self, other: Iterable[Any]) -> None:
        """Replace the contents of this list with the elements of ``other``."""
        items = list(other)
        self.clear()
        for item in items:
            self.insert(item)

    def reversed_str(self) -> str:
        """Render the elements from last to first."""
        return "[" + ", ".join(str(item) for item in reversed(self)) + "]"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (node.info for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        current = self._last
        while current is not None:
            yield current.info
            current = current.back

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _describe_emptiness(items: OrderedDoublyLinkedList) -> str:
    return "List is empty" if items.is_empty() else "List is populated"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Demonstrate the operations of an ordered doubly linked list."
    )
    parser.parse_args(argv)

    rule = "------------------------"
    print("Doubly Linked Lists")
    print(rule)
    list1 = OrderedDoublyLinkedList(range(1, 11))
    print("List 1: ")
    print(list1)

    print("\n" + rule)

    list2 = OrderedDoublyLinkedList()
    print("\nChecking if List 2 is empty... ")
    print(_describe_emptiness(list2))
    print("Populating List 2 by copying from List 1...")
    list2.copy_from(list1)
    print("\nList 2 (after copy_from()): ")
    print(list2)
    print("\nChecking if List 2 is empty... ")
    print(_describe_emptiness(list2))
    print("\nList 2 printed in reverse: ")
    print(list2.reversed_str())

    print("\n" + rule)

    print("\nList 3 (copied from List 2): ")
    list3 = list2.copy()
    print(list3)
    print("\nInserting #4 into List 3...")
    list3.insert(4)
    print(list3)

    print("\n" + rule)

    print("\nList 4 (copied from List 3): ")
    list4 = list3.copy()
    print(list4)

    print("\n" + rule)

    for value, label in ((1, "\nDeleting"), (10, "Deleting"), (5, "Deleting")):
        print(f"{label} #{value} in List 4...")
        try:
            list4.delete_node(value)
        except ValueError as exc:
            print(exc)
    print(list4)

    print("\n" + rule)

    print("\nSearching for the number 3...")
    print("Number 3 was found!" if list4.search(3) else "Number 3 was not found")
    print("\nSearching for the number 42...")
    print("Number 42 was found!" if list4.search(42) else "Number 42 was not found")

    print("\n" + rule)

    print(f"Front of List 4 is {list4.front()}")
    print(f"Back of List 4 is {list4.back()}")
    print("\nProgram complete")
    return 0