"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def inorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data in left, node, right order."""
    pending: list[Node] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.data
        node = node.right


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data in node, left, right order."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node.data
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def postorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data in left, right, node order."""
    pending = [root] if root is not None else []
    reversed_order: list[Any] = []
    while pending:
        node = pending.pop()
        reversed_order.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    yield from reversed(reversed_order)