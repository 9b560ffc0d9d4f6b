"""Binary trees with linked nodes, plus reading and writing them as text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class BinaryNode(Generic[T]):
    """A node of a binary tree, linked to its parent and both children."""

    value: T
    parent: Optional[BinaryNode[T]] = None
    left: Optional[BinaryNode[T]] = None
    right: Optional[BinaryNode[T]] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryNode({self.value!r})"


def _require(node: Optional[BinaryNode[T]]) -> BinaryNode[T]:
    if node is None:
        raise ValueError("null node")
    return node


class BinaryTree(Generic[T]):
    """A binary tree; nodes are added and removed one leaf at a time."""

    def __init__(self) -> None:
        self.root: Optional[BinaryNode[T]] = None

    def insert_root(self, value: T) -> BinaryNode[T]:
        """Give an empty tree its root and return it."""
        if self.root is not None:
            raise ValueError("tree already has a root")
        self.root = BinaryNode(value)
        return self.root

    def insert_left(self, node: BinaryNode[T], value: T) -> BinaryNode[T]:
        """Add a left child to ``node``, which must not have one."""
        node = _require(node)
        if node.left is not None:
            raise ValueError("node already has a left child")
        node.left = BinaryNode(value, node)
        return node.left

    def insert_right(self, node: BinaryNode[T], value: T) -> BinaryNode[T]:
        """Add a right child to ``node``, which must not have one."""
        node = _require(node)
        if node.right is not None:
            raise ValueError("node already has a right child")
        node.right = BinaryNode(value, node)
        return node.right

    def remove_left(self, node: BinaryNode[T]) -> None:
        """Remove the left child of ``node``; it must be a leaf."""
        node = _require(node)
        child = node.left
        if child is None:
            raise ValueError("node has no left child")
        if not child.is_leaf():
            raise ValueError("left child is not a leaf")
        child.parent = None
        node.left = None

    def remove_right(self, node: BinaryNode[T]) -> None:
        """Remove the right child of ``node``; it must be a leaf."""
        node = _require(node)
        child = node.right
        if child is None:
            raise ValueError("node has no right child")
        if not child.is_leaf():
            raise ValueError("right child is not a leaf")
        child.parent = None
        node.right = None

    def remove_root(self) -> None:
        """Remove the root; it must be a leaf."""
        if self.root is None:
            raise ValueError("tree is empty")
        if not self.root.is_leaf():
            raise ValueError("root is not a leaf")
        self.root = None

    def is_empty(self) -> bool:
        return self.root is None

    def height(self, node: Optional[BinaryNode[T]]) -> int:
        """Height of the subtree at ``node``; -1 for no node."""
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def depth(self, node: BinaryNode[T]) -> int:
        """Number of edges between ``node`` and the root."""
        node = _require(node)
        count = 0
        while node.parent is not None:
            node = node.parent
            count += 1
        return count

    def __copy__(self) -> BinaryTree[T]:
        result: BinaryTree[T] = BinaryTree()
        result.root = _copy_nodes(self.root, None)
        return result

    def __repr__(self) -> str:
        return f"BinaryTree(root={self.root!r})"


def _copy_nodes(
    node: Optional[BinaryNode[T]], parent: Optional[BinaryNode[T]]
) -> Optional[BinaryNode[T]]:
    if node is None:
        return None
    copy = BinaryNode(node.value, parent)
    copy.left = _copy_nodes(node.left, copy)
    copy.right = _copy_nodes(node.right, copy)
    return copy


def read_tree(stream: TextIO) -> BinaryTree[str]:
    """Read a tree written by :func:`write_tree`.

    The first token is the end marker; the rest list the nodes in preorder,
    with the marker standing for each missing child.
    """
    tokens = iter(stream.read().split())
    tree: BinaryTree[str] = BinaryTree()
    end = next(tokens, None)
    if end is None:
        return tree
    value = next(tokens, None)
    if value is None or value == end:
        return tree
    _read_descendants(tokens, tree, tree.insert_root(value), end)
    return tree


def _read_descendants(
    tokens: Iterator[str], tree: BinaryTree[str], node: BinaryNode[str], end: str
) -> None:
    value = next(tokens, None)
    if value is not None and value != end:
        _read_descendants(tokens, tree, tree.insert_left(node, value), end)
    value = next(tokens, None)
    if value is not None and value != end:
        _read_descendants(tokens, tree, tree.insert_right(node, value), end)


def write_tree(tree: BinaryTree[T], stream: TextIO, end: T) -> None:
    """Write ``tree`` in the preorder form that :func:`read_tree` reads."""
    root = tree.root
    if root is None:
        return
    stream.write(f"{end}\n{root.value} ")
    _write_descendants(root, stream, end)
    stream.write("\n")


def _write_descendants(node: BinaryNode[T], stream: TextIO, end: T) -> None:
    for child in (node.left, node.right):
        if child is None:
            stream.write(f"{end} ")
        else:
            stream.write(f"{child.value} ")
            _write_descendants(child, stream, end)


def fill_tree(
    tree: BinaryTree[T], end: T, ask: Callable[[str], T] = input  # type: ignore[assignment]
) -> None:
    """Build an empty tree by asking for each node in preorder.

    ``ask`` receives a prompt and returns a value; answering ``end`` leaves
    that place empty.
    """
    if not tree.is_empty():
        raise ValueError("tree is not empty")
    value = ask(f"Raíz (Fin = {end}): ")
    if value != end:
        _fill_descendants(tree, tree.insert_root(value), end, ask)


def _fill_descendants(
    tree: BinaryTree[T], node: BinaryNode[T], end: T, ask: Callable[[str], T]
) -> None:
    value = ask(f"Hijo izqdo. de {node.value} (Fin = {end}): ")
    if value != end:
        _fill_descendants(tree, tree.insert_left(node, value), end, ask)
    value = ask(f"Hijo drcho. de {node.value} (Fin = {end}): ")
    if value != end:
        _fill_descendants(tree, tree.insert_right(node, value), end, ask)


def describe_tree(tree: BinaryTree[T]) -> str:
    """A line for the root and one for each child, in preorder."""
    root = tree.root
    if root is None:
        return "Árbol vacío\n"
    lines = [f"Raíz del árbol: {root.value}"]
    _describe_descendants(root, lines)
    return "\n".join(lines) + "\n"


def _describe_descendants(node: BinaryNode[T], lines: list[str]) -> None:
    if node.left is not None:
        lines.append(f"Hijo izqdo de {node.value}: {node.left.value}")
        _describe_descendants(node.left, lines)
    if node.right is not None:
        lines.append(f"Hijo derecho de {node.value}: {node.right.value}")
        _describe_descendants(node.right, lines)