"""A binary search tree without duplicate keys."""

from __future__ import annotations

import argparse
from typing import Any, Iterable, Optional, Sequence

from labstructs.binary_tree import BinaryTree, _TreeNode


def _delete_from(node: _TreeNode) -> Optional[_TreeNode]:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    trail: Optional[_TreeNode] = None
    current = node.left
    while current.right is not None:
        trail = current
        current = current.right
    node.info = current.info
    if trail is None:
        node.left = current.left
    else:
        trail.right = current.left
    return node


class BinarySearchTree(BinaryTree):
    """Binary tree kept ordered: smaller items left, larger items right."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        for item in items:
            self.insert(item)

    def insert(self, item: Any) -> None:
        """Insert ``item``; duplicates are rejected."""
        node = _TreeNode(item)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if current.info == item:
                raise ValueError(
                    f"{item!r} is already in the tree -- duplicates are not allowed"
                )
            if current.info > item:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def delete_node(self, item: Any) -> None:
        """Remove ``item`` from the tree."""
        if self._root is None:
            raise ValueError("cannot delete from an empty tree")
        parent: Optional[_TreeNode] = None
        current: Optional[_TreeNode] = self._root
        while current is not None and current.info != item:
            parent = current
            current = current.left if current.info > item else current.right
        if current is None:
            raise ValueError(f"{item!r} is not in the tree")
        replacement = _delete_from(current)
        if parent is None:
            self._root = replacement
        elif parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement

    def search(self, item: Any) -> bool:
        """Return True if ``item`` is in the tree."""
        current = self._root
        while current is not None:
            if current.info == item:
                return True
            current = current.left if current.info > item else current.right
        return False

    def __contains__(self, item: Any) -> bool:
        return self.search(item)


def _line(items: Iterable[Any]) -> str:
    return "".join(f"{item} " for item in items)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate a binary search tree.")
    parser.parse_args(argv)

    tree = BinarySearchTree([78, 32, 89, 46, 28, 60, 98, 53])

    print()
    print(f"Tree nodes in inorder: {_line(tree.inorder())}")
    print(f"Tree nodes in preorder: {_line(tree.preorder())}")
    print(f"Tree nodes in postorder: {_line(tree.postorder())}")
    print(f"Tree Height: {tree.height()}")
    print(f"Number or Nodes: {tree.node_count()}")
    print(f"Number or Leaves: {tree.leaves_count()}")
    return 0