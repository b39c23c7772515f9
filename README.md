# dstructs

Plain-Python building blocks for classic data structures:

- `dstructs.stack`: a fixed-capacity LIFO `Stack`. It raises
  `StackOverflowError` when a value is pushed onto a full stack. It raises
  `StackUnderflowError` when a value is popped or peeked from an empty one.
- `dstructs.binary_tree`: a linked `Node` dataclass with `data`, `left` and
  `right`, and the `inorder`, `preorder` and `postorder` traversals. The
  traversals are generators.
- `dstructs.bst`: binary search tree operations on `Node` trees. These are
  `insert`, `search`, `delete`, `inorder_predecessor`, `is_bst` and
  `from_keys`.
- `dstructs.avl`: a self-balancing AVL tree built from `AVLNode`, a `Node`
  that also records its subtree height. It provides `insert`, `from_keys`,
  `height`, `balance_factor`, `rotate_left` and `rotate_right`.

There are no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Stack

```python
from dstructs.stack import Stack

stack = Stack(5)
for value in (1, 2, 3, 4):
    stack.push(value)

stack.pop()              # 4
stack.peek()             # 3
len(stack)               # 3
list(stack)              # [3, 2, 1], top first, nothing removed
list(stack.drain())      # [3, 2, 1], top first, leaving the stack empty
stack.is_empty()         # True
```

`Stack(size)` raises `ValueError` if `size` is less than 1.

### Binary tree traversals

```python
from dstructs.binary_tree import Node, inorder, preorder, postorder

root = Node(1, left=Node(2, left=Node(4)), right=Node(3))

list(inorder(root))    # [4, 2, 1, 3]
list(preorder(root))   # [1, 2, 4, 3]
list(postorder(root))  # [4, 2, 3, 1]
```

The traversals work on an empty tree (`None`). They also work on `AVLNode`
trees.

### Binary search trees

`insert`, `delete` and `from_keys` return the root of the resulting tree.
`search` returns the node that holds the key, or `None` if the key is absent.
Duplicate keys are ignored.

```python
from dstructs import bst
from dstructs.binary_tree import inorder

root = bst.from_keys([8, 3, 10, 1, 6, 14, 4, 7, 13])
list(inorder(root))           # [1, 3, 4, 6, 7, 8, 10, 13, 14]

bst.search(root, 6).data      # 6
bst.search(root, 5)           # None

root = bst.delete(root, 6)
root = bst.delete(root, 14)
list(inorder(root))           # [1, 3, 4, 7, 8, 10, 13]

bst.is_bst(root)              # True
```

When `delete` removes a node that has two children, it replaces the node's
value with that of its in-order predecessor. Deleting a key that is not in the
tree leaves the tree unchanged. `inorder_predecessor(node)` returns the largest
node in `node`'s left subtree. It raises `ValueError` if there is no left
subtree.

### AVL trees

```python
from dstructs import avl
from dstructs.binary_tree import preorder

root = avl.from_keys([1, 2, 4, 5, 6, 3])
list(preorder(root))          # [4, 2, 1, 3, 5, 6]
avl.height(root)              # 3
avl.balance_factor(root)      # 0
```

`rotate_right` raises `ValueError` on a node that has no left child.
`rotate_left` raises `ValueError` on a node that has no right child.

## What this package does not do

This is a library only. It has no command-line program. The AVL module
supports insertion but not deletion.