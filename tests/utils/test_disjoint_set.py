# tests/utils/test_disjoint_set.py

from grid_maze.utils.disjoint_set import DisjointSet


def test_singletons() -> None:
    dsu = DisjointSet(4)
    assert all(dsu.find(i) == i for i in range(4))
    assert not dsu.connected(0, 1)


def test_union_and_find() -> None:
    dsu = DisjointSet(6)
    assert dsu.union(0, 1)
    assert dsu.union(2, 3)
    assert dsu.union(1, 3)
    assert not dsu.union(0, 2)
    assert dsu.connected(0, 3)
    assert not dsu.connected(0, 4)
    assert len({dsu.find(i) for i in range(6)}) == 3


def test_long_chain_compresses() -> None:
    dsu = DisjointSet(1000)
    for i in range(999):
        dsu.union(i, i + 1)
    root = dsu.find(0)
    assert all(dsu.find(i) == root for i in range(1000))
