"""A binary tree with traversals and structural measurements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass
class _TreeNode:
    info: Any
    left: Optional["_TreeNode"] = None
    right: Optional["_TreeNode"] = None


def _copy_nodes(node: Optional[_TreeNode]) -> Optional[_TreeNode]:
    if node is None:
        return None
    return _TreeNode(node.info, _copy_nodes(node.left), _copy_nodes(node.right))


def _inorder(node: Optional[_TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.info
        yield from _inorder(node.right)


def _preorder(node: Optional[_TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.info
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[_TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.info


def _height(node: Optional[_TreeNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _node_count(node: Optional[_TreeNode]) -> int:
    if node is None:
        return 0
    return 1 + _node_count(node.left) + _node_count(node.right)


def _leaves_count(node: Optional[_TreeNode]) -> int:
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _leaves_count(node.left) + _leaves_count(node.right)


class BinaryTree:
    """Binary tree of linked nodes; subclasses decide where items go."""

    def __init__(self) -> None:
        self._root: Optional[_TreeNode] = None

    def is_empty(self) -> bool:
        return self._root is None

    def inorder(self) -> List[Any]:
        """Return the items in inorder sequence."""
        return list(_inorder(self._root))

    def preorder(self) -> List[Any]:
        """Return the items in preorder sequence."""
        return list(_preorder(self._root))

    def postorder(self) -> List[Any]:
        """Return the items in postorder sequence."""
        return list(_postorder(self._root))

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return _height(self._root)

    def node_count(self) -> int:
        return _node_count(self._root)

    def leaves_count(self) -> int:
        return _leaves_count(self._root)

    def clear(self) -> None:
        """Remove every node."""
        self._root = None

    def copy(self) -> "BinaryTree":
        """Return an independent tree with the same shape and items."""
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate._root = _copy_nodes(self._root)
        return duplicate

    def __len__(self) -> int:
        return self.node_count()

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(inorder={self.inorder()!r})"