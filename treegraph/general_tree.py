"""General trees stored as first-child / next-sibling links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class TreeNode(Generic[T]):
    """A node linked to its parent, its first child and its next sibling."""

    value: T
    parent: Optional[TreeNode[T]] = None
    first_child: Optional[TreeNode[T]] = None
    next_sibling: Optional[TreeNode[T]] = None

    def children(self) -> Iterator[TreeNode[T]]:
        """The children of this node, from first to last."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"


def _require(node: Optional[TreeNode[T]]) -> TreeNode[T]:
    if node is None:
        raise ValueError("null node")
    return node


class GeneralTree(Generic[T]):
    """A tree whose nodes may have any number of children."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode[T]] = None

    def insert_root(self, value: T) -> TreeNode[T]:
        """Give an empty tree its root and return it."""
        if self.root is not None:
            raise ValueError("tree already has a root")
        self.root = TreeNode(value)
        return self.root

    def insert_first_child(self, node: TreeNode[T], value: T) -> TreeNode[T]:
        """Add a new first child to ``node``; the old children follow it."""
        node = _require(node)
        child = TreeNode(value, node, next_sibling=node.first_child)
        node.first_child = child
        return child

    def insert_next_sibling(self, node: TreeNode[T], value: T) -> TreeNode[T]:
        """Add a sibling right after ``node``, which must not be the root."""
        node = _require(node)
        if node is self.root:
            raise ValueError("the root has no siblings")
        sibling = TreeNode(value, node.parent, next_sibling=node.next_sibling)
        node.next_sibling = sibling
        return sibling

    def remove_first_child(self, node: TreeNode[T]) -> None:
        """Remove the first child of ``node``; it must be a leaf."""
        node = _require(node)
        child = node.first_child
        if child is None:
            raise ValueError("node has no children")
        if child.first_child is not None:
            raise ValueError("first child is not a leaf")
        node.first_child = child.next_sibling
        child.parent = child.next_sibling = None

    def remove_next_sibling(self, node: TreeNode[T]) -> None:
        """Remove the sibling after ``node``; it must be a leaf."""
        node = _require(node)
        sibling = node.next_sibling
        if sibling is None:
            raise ValueError("node has no next sibling")
        if sibling.first_child is not None:
            raise ValueError("next sibling is not a leaf")
        node.next_sibling = sibling.next_sibling
        sibling.parent = sibling.next_sibling = None

    def remove_root(self) -> None:
        """Remove the root; it must have no children."""
        if self.root is None:
            raise ValueError("tree is empty")
        if self.root.first_child is not None:
            raise ValueError("root is not a leaf")
        self.root = None

    def is_empty(self) -> bool:
        return self.root is None

    def __copy__(self) -> GeneralTree[T]:
        result: GeneralTree[T] = GeneralTree()
        if self.root is not None:
            result.root = _copy_subtree(self.root, None)
        return result

    def __repr__(self) -> str:
        return f"GeneralTree(root={self.root!r})"


def _copy_subtree(node: TreeNode[T], parent: Optional[TreeNode[T]]) -> TreeNode[T]:
    copy = TreeNode(node.value, parent)
    last: Optional[TreeNode[T]] = None
    for child in node.children():
        child_copy = _copy_subtree(child, copy)
        if last is None:
            copy.first_child = child_copy
        else:
            last.next_sibling = child_copy
        last = child_copy
    return copy