import pytest

from treegraph.partition import Partition


def test_each_element_starts_alone():
    p = Partition(5)
    assert [p.find(i) for i in range(5)] == list(range(5))


def test_union_equal_rank_keeps_first_as_root():
    p = Partition(3)
    p.union(0, 1)
    assert p.find(1) == 0
    assert p.find(0) == 0
    assert p.find(2) == 2


def test_union_attaches_shallower_tree_under_deeper():
    p = Partition(3)
    p.union(0, 1)
    p.union(2, 0)
    assert p.find(2) == 0
    assert p.find(1) == 0


def test_transitive_membership():
    p = Partition(6)
    p.union(p.find(0), p.find(1))
    p.union(p.find(2), p.find(3))
    p.union(p.find(1), p.find(3))
    roots = {p.find(i) for i in range(4)}
    assert len(roots) == 1
    assert p.find(4) != p.find(0)
    assert p.find(5) == 5


def test_path_compression_keeps_answers_stable():
    p = Partition(8)
    for i in range(1, 8):
        p.union(p.find(0), p.find(i))
    root = p.find(7)
    assert all(p.find(i) == root for i in range(8))
    assert all(p.find(i) == root for i in range(8))


def test_number_of_sets_after_unions():
    p = Partition(10)
    pairs = [(0, 1), (2, 3), (4, 5), (1, 3), (6, 7)]
    for a, b in pairs:
        ra, rb = p.find(a), p.find(b)
        if ra != rb:
            p.union(ra, rb)
    assert len({p.find(i) for i in range(10)}) == 5


def test_length():
    assert len(Partition(4)) == 4


def test_find_out_of_range_raises():
    p = Partition(3)
    with pytest.raises(IndexError):
        p.find(3)
    with pytest.raises(IndexError):
        p.find(-1)


def test_union_out_of_range_raises():
    p = Partition(2)
    with pytest.raises(IndexError):
        p.union(0, 2)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Partition(-1)