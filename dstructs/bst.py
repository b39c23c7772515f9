"""Binary search tree operations on :class:`~dstructs.binary_tree.Node`."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from dstructs.binary_tree import Node, inorder

_MISSING = object()


def insert(root: Optional[Node], key: Any) -> Node:
    """Insert ``key`` and return the root; duplicate keys are ignored."""
    if root is None:
        return Node(key)
    node = root
    while True:
        if key < node.data:
            if node.left is None:
                node.left = Node(key)
                return root
            node = node.left
        elif key > node.data:
            if node.right is None:
                node.right = Node(key)
                return root
            node = node.right
        else:
            return root


def search(root: Optional[Node], key: Any) -> Optional[Node]:
    """Return the node holding ``key``, or None if it is absent."""
    node = root
    while node is not None:
        if key == node.data:
            return node
        node = node.left if key < node.data else node.right
    return None


def is_bst(root: Optional[Node]) -> bool:
    """Tell whether an in-order walk of the tree is strictly increasing."""
    previous = _MISSING
    for value in inorder(root):
        if previous is not _MISSING and value <= previous:
            return False
        previous = value
    return True


def inorder_predecessor(node: Node) -> Node:
    """Return the largest node in the left subtree of ``node``."""
    if node.left is None:
        raise ValueError("node has no left subtree")
    current = node.left
    while current.right is not None:
        current = current.right
    return current


def delete(root: Optional[Node], key: Any) -> Optional[Node]:
    """Remove ``key`` if present and return the new root."""
    parent: Optional[Node] = None
    node = root
    while node is not None and key != node.data:
        parent = node
        node = node.left if key < node.data else node.right
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        # Two children: copy the in-order predecessor up, then unlink it.
        pred_parent = node
        pred = node.left
        while pred.right is not None:
            pred_parent = pred
            pred = pred.right
        node.data = pred.data
        if pred_parent is node:
            pred_parent.left = pred.left
        else:
            pred_parent.right = pred.left
        return root

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def from_keys(keys: Iterable[Any]) -> Optional[Node]:
    """Build a tree by inserting ``keys`` in order; None if there are none."""
    root: Optional[Node] = None
    for key in keys:
        root = insert(root, key)
    return root