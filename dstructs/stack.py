"""A fixed-capacity stack of values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from an empty stack."""


class Stack:
    """A last-in, first-out container that holds at most ``size`` values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"stack size must be positive, got {size}")
        self.size = size
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) >= self.size

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        """Place ``value`` on top; raise StackOverflowError if there is no room."""
        if self.is_full():
            raise StackOverflowError(f"stack of size {self.size} is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]

    def drain(self) -> Iterator[Any]:
        """Yield values from top to bottom, removing each as it is yielded."""
        while self._items:
            yield self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom without removing anything."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(size={self.size}, items={self._items!r})"