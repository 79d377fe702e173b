"""
隣接グラフと 4 色塗り分けのテスト
"""

import random

import numpy as np
import pytest

from fourmap.graph.adjacency import AdjacencyGraph
from fourmap.graph.fourcolour import four_colour
from fourmap.grid.generator import generate_region_map


def _brute_adjacent(region_map):
    h, w = region_map.shape
    pairs = set()
    for y in range(h):
        for x in range(w):
            for dy, dx in ((0, 1), (1, 0)):
                yy, xx = y + dy, x + dx
                if yy < h and xx < w and region_map[y, x] != region_map[yy, xx]:
                    a, b = int(region_map[y, x]), int(region_map[yy, xx])
                    pairs.add((min(a, b), max(a, b)))
    return pairs


def test_small_map_edges():
    region_map = np.array([
        [0, 0, 1],
        [2, 3, 1],
        [2, 3, 3],
    ])
    graph = AdjacencyGraph.from_region_map(region_map)

    assert graph.n == 4
    assert list(graph.edges()) == [(0, 1), (0, 2), (0, 3), (1, 3), (2, 3)]
    assert graph.edge_count == 5
    assert graph.neighbours(3) == (0, 1, 2)
    assert not graph.edge_exists(1, 2)


def test_diagonal_contact_is_not_adjacency():
    graph = AdjacencyGraph.from_region_map(np.array([[0, 1], [2, 3]]))
    assert graph.edge_exists(0, 1) and graph.edge_exists(2, 3)
    assert not graph.edge_exists(0, 3)
    assert not graph.edge_exists(1, 2)


@pytest.mark.parametrize("seed", [3, 8, 13])
def test_keys_are_sorted_symmetric_and_loop_free(seed):
    region_map = generate_region_map(10, 8, 18, random.Random(seed))
    graph = AdjacencyGraph.from_region_map(region_map, 18)
    n = graph.n

    keys = graph.keys.tolist()
    assert keys == sorted(keys)
    assert len(keys) == len(set(keys))

    for key in keys:
        i, j = divmod(key, n)
        assert i != j
        assert graph.edge_exists(j, i)

    assert set(graph.edges()) == _brute_adjacent(region_map)

    for i in range(n):
        start, stop = graph.neighbour_range(i)
        assert [k - i * n for k in keys[start:stop]] == list(graph.neighbours(i))


def test_from_edges_validation():
    with pytest.raises(ValueError):
        AdjacencyGraph.from_edges(3, [(1, 1)])
    with pytest.raises(ValueError):
        AdjacencyGraph.from_edges(3, [(0, 3)])


def test_edge_index_missing():
    graph = AdjacencyGraph.from_edges(3, [(0, 1)])
    assert graph.edge_index(0, 1) >= 0
    assert graph.edge_index(0, 2) == -1


@pytest.mark.parametrize("seed", range(6))
def test_four_colour_is_proper(seed):
    rng = random.Random(seed)
    region_map = generate_region_map(12, 12, 32, rng)
    graph = AdjacencyGraph.from_region_map(region_map, 32)

    colouring = four_colour(graph, rng)

    assert len(colouring) == 32
    assert all(0 <= c < 4 for c in colouring)
    for i, j in graph.edges():
        assert colouring[i] != colouring[j]


def test_four_colour_fails_on_k5():
    k5 = AdjacencyGraph.from_edges(5, [(i, j) for i in range(5) for j in range(i + 1, 5)])
    with pytest.raises(RuntimeError):
        four_colour(k5, random.Random(0))


def test_four_colour_large_singleton_map():
    # 40x30 の全マスが別々の領域。1000 頂点を超えても再帰の上限に当たらない
    region_map = np.arange(1200).reshape(30, 40)
    graph = AdjacencyGraph.from_region_map(region_map, 1200)

    colouring = four_colour(graph, random.Random(1))

    assert len(colouring) == 1200
    for i, j in graph.edges():
        assert colouring[i] != colouring[j]
