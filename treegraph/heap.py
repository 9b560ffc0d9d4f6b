"""A bounded binary min-heap."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """A binary min-heap holding at most ``capacity`` items.

    Items are ordered with ``<`` only, so any type defining ``__lt__`` works.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Insert ``item``; raise OverflowError when the heap is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full")
        self._items.append(item)
        if len(self._items) > 1:
            self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            if len(self._items) > 1:
                self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self.capacity}, size={len(self._items)})"

    def _sift_up(self, i: int) -> None:
        items = self._items
        item = items[i]
        while i > 0:
            parent = (i - 1) // 2
            if not item < items[parent]:
                break
            items[i] = items[parent]
            i = parent
        items[i] = item

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        item = items[i]
        while 2 * i + 1 < size:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = right if right < size and items[right] < items[left] else left
            if not items[smallest] < item:
                break
            items[i] = items[smallest]
            i = smallest
        items[i] = item