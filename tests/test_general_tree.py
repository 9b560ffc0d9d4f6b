import copy

import pytest

from treegraph.general_tree import GeneralTree


def _values(node):
    return [child.value for child in node.children()]


def _shape(node):
    return (node.value, [_shape(child) for child in node.children()])


def _sample():
    tree = GeneralTree()
    root = tree.insert_root("r")
    first = tree.insert_first_child(root, "x")
    tree.insert_next_sibling(first, "y")
    tree.insert_first_child(first, "x1")
    return tree, root, first


def test_new_tree_is_empty():
    tree = GeneralTree()
    assert tree.is_empty()
    assert tree.root is None


def test_insert_first_child_prepends():
    tree = GeneralTree()
    root = tree.insert_root("r")
    tree.insert_first_child(root, "a")
    tree.insert_first_child(root, "b")
    assert _values(root) == ["b", "a"]
    assert all(child.parent is root for child in root.children())


def test_insert_next_sibling_follows_node():
    tree, root, first = _sample()
    tree.insert_next_sibling(first, "z")
    assert _values(root) == ["x", "z", "y"]
    assert first.next_sibling.parent is root


def test_insert_sibling_of_root_raises():
    tree = GeneralTree()
    root = tree.insert_root("r")
    with pytest.raises(ValueError):
        tree.insert_next_sibling(root, "s")


def test_insert_root_twice_raises():
    tree, *_ = _sample()
    with pytest.raises(ValueError):
        tree.insert_root("again")


def test_remove_non_leaf_raises():
    tree, root, first = _sample()
    with pytest.raises(ValueError):
        tree.remove_first_child(root)
    with pytest.raises(ValueError):
        tree.remove_root()


def test_remove_children_until_empty():
    tree, root, first = _sample()
    tree.remove_next_sibling(first)
    assert _values(root) == ["x"]
    tree.remove_first_child(first)
    assert _values(first) == []
    tree.remove_first_child(root)
    assert root.first_child is None
    tree.remove_root()
    assert tree.is_empty()


def test_remove_missing_raises():
    tree, root, first = _sample()
    with pytest.raises(ValueError):
        tree.remove_next_sibling(first.next_sibling)
    with pytest.raises(ValueError):
        tree.remove_first_child(first.next_sibling)
    with pytest.raises(ValueError):
        GeneralTree().remove_root()


def test_copy_is_independent():
    tree, root, first = _sample()
    clone = copy.copy(tree)
    assert _shape(clone.root) == _shape(root)
    assert clone.root is not root
    for child in clone.root.children():
        assert child.parent is clone.root
    clone.insert_first_child(clone.root, "new")
    assert _values(root) == ["x", "y"]


def test_copy_of_empty_tree():
    clone = copy.copy(GeneralTree())
    assert clone.is_empty()