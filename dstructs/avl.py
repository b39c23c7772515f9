"""Self-balancing AVL tree insertion."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from dstructs.binary_tree import Node


@dataclass(eq=False)
class AVLNode(Node):
    """A binary tree node that also records the height of its subtree."""

    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Height of the subtree at ``node``; zero for an empty tree."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Left subtree height minus right subtree height."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate the subtree right around ``node`` and return its new root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate the subtree left around ``node`` and return its new root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(root: Optional[AVLNode], key: Any) -> AVLNode:
    """Insert ``key``, rebalance, and return the new root; duplicates are ignored."""
    if root is None:
        return AVLNode(key)
    if key < root.data:
        root.left = insert(root.left, key)
    elif key > root.data:
        root.right = insert(root.right, key)
    else:
        return root

    _update_height(root)
    balance = balance_factor(root)

    if balance > 1:
        if key > root.left.data:
            root.left = rotate_left(root.left)
        return rotate_right(root)
    if balance < -1:
        if key < root.right.data:
            root.right = rotate_right(root.right)
        return rotate_left(root)
    return root


def from_keys(keys: Iterable[Any]) -> Optional[AVLNode]:
    """Build a balanced tree by inserting ``keys`` in order."""
    root: Optional[AVLNode] = None
    for key in keys:
        root = insert(root, key)
    return root