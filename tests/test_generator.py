"""
盤面生成（領域成長）のテスト
"""

import random
from collections import deque

import numpy as np
import pytest

from fourmap.config import WEIGHT_INCREASED, WEIGHT_UNCHANGED
from fourmap.grid.generator import (
    canonical_renumber,
    extension_options,
    generate_region_map,
)


def _connected(cells, start):
    """cells（(y, x) の集合）が start から上下左右でつながっているか"""
    seen = {start}
    queue = deque([start])
    while queue:
        y, x = queue.popleft()
        for dy, dx in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = (y + dy, x + dx)
            if nxt in cells and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen == cells


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_regions_are_connected_and_hole_free(seed):
    w, h, n = 9, 7, 14
    region_map = generate_region_map(w, h, n, random.Random(seed))

    assert region_map.shape == (h, w)
    assert set(np.unique(region_map).tolist()) == set(range(n))

    padded = np.pad(region_map, 1, constant_values=-1)
    for region in range(n):
        inside = {tuple(p) for p in np.argwhere(region_map == region)}
        assert _connected(inside, next(iter(inside)))

        # 盤外を含めた補集合がつながっていれば穴は無い
        outside = {tuple(p) for p in np.argwhere(padded != region)}
        assert _connected(outside, (0, 0))


def test_region_ids_follow_first_appearance():
    region_map = generate_region_map(8, 8, 16, random.Random(11))
    flat = region_map.ravel().tolist()

    order = []
    for v in flat:
        if v not in order:
            order.append(v)
    assert order == list(range(16))


def test_same_seed_gives_same_map():
    a = generate_region_map(10, 10, 20, random.Random(42))
    b = generate_region_map(10, 10, 20, random.Random(42))
    assert np.array_equal(a, b)


def test_every_cell_can_be_its_own_region():
    region_map = generate_region_map(3, 2, 6, random.Random(0))
    assert region_map.tolist() == [[0, 1, 2], [3, 4, 5]]


def test_too_many_regions_rejected():
    with pytest.raises(ValueError, match="Too many regions"):
        generate_region_map(3, 3, 10, random.Random(0))
    with pytest.raises(ValueError, match="at least one region"):
        generate_region_map(3, 3, 0, random.Random(0))


def test_extension_refuses_to_enclose_a_hole():
    w, h = 3, 3
    cells = [-1] * (w * h)
    # 中央 (1, 1) の左と上だけが領域 0、左上は空き
    cells[1 * w + 0] = 0
    cells[0 * w + 1] = 0
    assert extension_options(cells, w, h, 1, 1) == []

    # 左上も領域 0 なら 1 つの並びになるので広げられる（接触 2 = 周長変化なし）
    cells[0] = 0
    assert extension_options(cells, w, h, 1, 1) == [(0, WEIGHT_UNCHANGED)]


def test_extension_weights_per_region():
    w, h = 3, 3
    cells = [-1] * (w * h)
    cells[1 * w + 0] = 2  # 左
    cells[1 * w + 2] = 1  # 右
    assert extension_options(cells, w, h, 1, 1) == [
        (1, WEIGHT_INCREASED),
        (2, WEIGHT_INCREASED),
    ]
    # 割り当て済みのマスには広げられない
    assert extension_options(cells, w, h, 0, 1) == []


def test_canonical_renumber():
    region_map = np.array([[5, 5, 2], [7, 2, 2]])
    assert canonical_renumber(region_map).tolist() == [[0, 0, 1], [2, 1, 1]]
