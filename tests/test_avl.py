import pytest
from hypothesis import given, strategies as st

from dstructs.avl import (
    AVLNode,
    balance_factor,
    from_keys,
    height,
    insert,
    rotate_left,
    rotate_right,
)
from dstructs.binary_tree import inorder, preorder


def _nodes(root):
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node
        pending.extend(c for c in (node.left, node.right) if c is not None)


def _assert_avl(root):
    for node in _nodes(root):
        assert abs(balance_factor(node)) <= 1
        assert node.height == 1 + max(height(node.left), height(node.right))


def test_source_example_preorder():
    root = from_keys([1, 2, 4, 5, 6, 3])
    assert list(preorder(root)) == [4, 2, 1, 3, 5, 6]
    _assert_avl(root)


def test_height_and_balance_of_empty():
    assert height(None) == 0
    assert balance_factor(None) == 0


def test_new_node_is_leaf_of_height_one():
    node = insert(None, 5)
    assert node.data == 5
    assert node.height == 1
    assert node.left is None and node.right is None


def test_rotate_right_left_chain():
    bottom = AVLNode(1)
    middle = AVLNode(2, left=bottom, height=2)
    top = AVLNode(3, left=middle, height=3)
    new_root = rotate_right(top)
    assert new_root is middle
    assert new_root.left is bottom and new_root.right is top
    _assert_avl(new_root)


def test_rotate_left_right_chain():
    bottom = AVLNode(3)
    middle = AVLNode(2, right=bottom, height=2)
    top = AVLNode(1, right=middle, height=3)
    new_root = rotate_left(top)
    assert new_root is middle
    assert new_root.left is top and new_root.right is bottom
    _assert_avl(new_root)


def test_rotate_left_keeps_inner_subtree():
    inner = AVLNode(2)
    pivot = AVLNode(3, left=inner, height=2)
    top = AVLNode(1, right=pivot, height=3)
    new_root = rotate_left(top)
    assert top.right is inner
    assert list(inorder(new_root)) == [1, 2, 3]


def test_rotation_without_child_raises():
    with pytest.raises(ValueError):
        rotate_right(AVLNode(1))
    with pytest.raises(ValueError):
        rotate_left(AVLNode(1))


def test_duplicate_insert_ignored():
    root = from_keys([2, 1, 3])
    assert insert(root, 2) is root
    assert list(inorder(root)) == [1, 2, 3]


def test_sorted_input_stays_shallow():
    keys = range(1, 128)
    root = from_keys(keys)
    assert root.height == 7
    _assert_avl(root)


@given(st.lists(st.integers(-1000, 1000), max_size=100))
def test_random_inserts_balanced_and_sorted(keys):
    root = from_keys(keys)
    assert list(inorder(root)) == sorted(set(keys))
    _assert_avl(root)