"""A bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class Stack(Generic[T]):
    """A stack that holds at most ``capacity - 1`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def top(self) -> T:
        """Return the element on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def replace(self, element: T) -> T:
        """Replace the top element with *element* and return it."""
        if not self._items:
            raise IndexError("replace on an empty stack")
        self._items[-1] = element
        return element

    def push(self, element: T) -> T:
        """Push *element* and return it as the new top."""
        if len(self._items) + 1 >= self.capacity:
            raise StackFullError(f"stack of capacity {self.capacity} is full")
        self._items.append(element)
        return element

    def pop(self) -> None:
        """Remove the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()