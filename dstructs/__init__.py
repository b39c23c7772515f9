"""Classic data structures: a bounded stack, binary trees, BSTs and AVL trees."""

__version__ = "0.1.0"
__all__ = ["avl", "binary_tree", "bst", "stack"]