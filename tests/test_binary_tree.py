import pytest

from labstructs.binary_tree import BinaryTree, _TreeNode

ITEMS = [78, 32, 89, 46, 28, 60, 98, 53]


@pytest.fixture
def tree():
    # Shape produced by inserting ITEMS into a binary search tree in order.
    root = _TreeNode(
        78,
        _TreeNode(32, _TreeNode(28), _TreeNode(46, None, _TreeNode(60, _TreeNode(53)))),
        _TreeNode(89, None, _TreeNode(98)),
    )
    result = BinaryTree()
    result._root = root
    return result


def test_empty_tree():
    empty = BinaryTree()
    assert empty.is_empty()
    assert empty.height() == 0
    assert len(empty) == 0
    assert empty.leaves_count() == 0
    assert empty.inorder() == []
    assert list(empty) == []


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(ITEMS)
    assert list(tree) == sorted(ITEMS)


def test_preorder(tree):
    assert tree.preorder() == [78, 32, 28, 46, 60, 53, 89, 98]


def test_postorder_ends_with_root(tree):
    post = tree.postorder()
    assert post[-1] == 78
    assert sorted(post) == sorted(ITEMS)
    assert post[0] == 28


def test_counts(tree):
    assert tree.node_count() == len(ITEMS)
    assert len(tree) == len(ITEMS)
    assert tree.height() == 5
    assert tree.leaves_count() == 3


def test_single_node_is_a_leaf():
    single = BinaryTree()
    single._root = _TreeNode(1)
    assert single.height() == 1
    assert single.leaves_count() == 1
    assert single.preorder() == single.postorder() == [1]


def test_copy_is_independent(tree):
    duplicate = tree.copy()
    assert duplicate.preorder() == tree.preorder()
    duplicate._root.left.info = 0
    assert tree.preorder()[1] == 32
    duplicate.clear()
    assert duplicate.is_empty()
    assert len(tree) == len(ITEMS)


def test_clear(tree):
    tree.clear()
    assert tree.is_empty()
    assert tree.node_count() == 0