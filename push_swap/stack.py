"""A stack of integers with the push_swap operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import pairwise


class Stack:
    """A stack of integers, iterated from the top down."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> int:
        """Return the value on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def swap(self) -> None:
        """Exchange the two values at the top."""
        if len(self._items) < 2:
            raise IndexError("swap needs at least two values")
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def push_from(self, other: Stack) -> None:
        """Take the top value of ``other`` and put it on top of this stack."""
        if not other._items:
            raise IndexError("push from an empty stack")
        self._items.appendleft(other._items.popleft())

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        self._items.rotate(1)

    def maximum(self) -> int:
        """Return the largest value."""
        if not self._items:
            raise ValueError("maximum of an empty stack")
        return max(self._items)

    def minimum(self) -> int:
        """Return the smallest value."""
        if not self._items:
            raise ValueError("minimum of an empty stack")
        return min(self._items)

    def index_of(self, value: int) -> int:
        """Return how far below the top ``value`` sits."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        raise ValueError(f"{value} is not in the stack")

    def unsorted_position(self) -> int:
        """Return 0 if ascending from the top, else the 1-based position of
        the first value that is smaller than the one above it."""
        for position, (upper, lower) in enumerate(pairwise(self._items), 1):
            if upper > lower:
                return position
        return 0