import pytest

from graphsearch.utils.disjoint_set import DisjointSet


def test_singletons_start_disconnected():
    ds = DisjointSet([1, 2, 3])

    assert len(ds) == 3
    assert 2 in ds
    assert 4 not in ds
    assert ds.find(2) == 2
    assert not ds.connected(1, 2)


def test_union_merges_sets():
    ds = DisjointSet(range(6))
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)

    assert ds.connected(0, 2)
    assert ds.connected(3, 0)
    assert not ds.connected(0, 4)
    assert sorted(sorted(s) for s in ds.sets()) == [[0, 1, 2, 3], [4], [5]]


def test_union_same_set_returns_root():
    ds = DisjointSet([1, 2])
    root = ds.union(1, 2)

    assert ds.union(2, 1) == root
    assert ds.find(1) == ds.find(2) == root


def test_union_by_rank_keeps_taller_root():
    ds = DisjointSet(range(4))
    big = ds.union(0, 1)
    merged = ds.union(2, big)

    assert merged == big


def test_path_compression_flattens_chain():
    ds = DisjointSet(range(5))
    # Build a chain by hand; make_set/union would keep it shallow.
    ds._parent.update({1: 0, 2: 1, 3: 2, 4: 3})

    assert ds.find(4) == 0
    assert all(ds._parent[i] == 0 for i in range(5))


def test_make_set_is_idempotent():
    ds = DisjointSet([1, 2])
    ds.union(1, 2)
    ds.make_set(2)

    assert ds.connected(1, 2)
    assert len(ds) == 2


def test_find_unknown_raises():
    ds = DisjointSet([1])
    with pytest.raises(KeyError):
        ds.find(99)
