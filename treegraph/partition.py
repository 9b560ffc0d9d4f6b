"""Disjoint-set partition with union by rank and path compression."""

from __future__ import annotations


class Partition:
    """A partition of ``{0, ..., n-1}`` into disjoint sets.

    Each root stores the negated rank of its tree minus one; other elements
    store their parent.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = [-1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def union(self, a: int, b: int) -> None:
        """Join the sets whose representatives are ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        parent = self._parent
        if parent[b] < parent[a]:
            parent[a] = b
        else:
            if parent[a] == parent[b]:
                parent[a] -= 1
            parent[b] = a

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] > -1:
            root = parent[root]
        while parent[x] > -1:
            parent[x], x = root, parent[x]
        return root