# -*- coding: utf-8 -*-
"""
盤面（領域分割）をランダムに生成するモジュールです。

流れ
----
1. n 個の領域の「種」を異なるマスにランダムに置く
2. 未割り当てのマスごとに「どの領域をそこへ広げられるか」を調べ、
   広げたときの周長の変化に応じた重みを付ける
3. 累積度数表を使って (マス, 領域) を重み付きで 1 つ抽選し、確定する
4. 変更したマスの周囲 3x3 の重みだけを計算し直す
5. 重みの合計が 0（= 全マスが埋まった）になるまで 3〜4 を繰り返す
6. 最後に、出現順に領域番号を振り直す

領域に穴が開かない（単連結のまま）ように、
周囲 8 マスを一周したときに同じ領域の「連続した並び」が
2 つ以上あるような拡張は候補から外します。
"""

from __future__ import annotations

import random
from typing import List

import numpy as np

from ..config import WEIGHT_DECREASED, WEIGHT_INCREASED, WEIGHT_UNCHANGED
from ..logging_utils import get_logger
from .freqtable import CumulativeFrequencyTable

logger = get_logger()

# 周囲 8 マスを時計回りに並べたときの (dx, dy)。偶数番目が上下左右。
RING_OFFSETS = (
    (-1, 0), (-1, -1), (0, -1), (1, -1),
    (1, 0), (1, 1), (0, 1), (-1, 1),
)


def _ring(cells: List[int], w: int, h: int, x: int, y: int) -> List[int]:
    """マス (x, y) の周囲 8 マスの領域番号を一周分返します（盤外は -1）。"""
    ring: List[int] = []
    for dx, dy in RING_OFFSETS:
        xx, yy = x + dx, y + dy
        if 0 <= xx < w and 0 <= yy < h:
            ring.append(cells[yy * w + xx])
        else:
            ring.append(-1)
    return ring


def extension_options(
    cells: List[int], w: int, h: int, x: int, y: int
) -> List[tuple[int, int]]:
    """
    マス (x, y) に広げられる領域と、その重みの一覧を返します。

    Returns
    -------
    list of (region, weight)
        region の昇順。すでに割り当て済みのマスなら空リスト。
    """
    if cells[y * w + x] >= 0:
        return []

    ring = _ring(cells, w, h, x, y)
    orthogonal = ring[0::2]

    options: List[tuple[int, int]] = []
    for region in sorted({r for r in orthogonal if r >= 0}):
        neighbours = orthogonal.count(region)

        # 一周したときに region の並びがいくつあるか数える
        runs = 0
        for i in range(8):
            if ring[i] == region and ring[(i + 1) & 7] != region:
                runs += 1
        if runs > 1:
            # 広げると穴が開いてしまう
            continue

        # 上下左右の接触数 1: 周長増加 / 2: 変化なし / 3: 周長減少
        if neighbours == 1:
            weight = WEIGHT_INCREASED
        elif neighbours == 2:
            weight = WEIGHT_UNCHANGED
        else:
            weight = WEIGHT_DECREASED
        options.append((region, weight))

    return options


def extension_weight(cells: List[int], w: int, h: int, x: int, y: int) -> int:
    """マス (x, y) の重みの合計（= 抽選表に登録する値）。"""
    return sum(weight for _, weight in extension_options(cells, w, h, x, y))


def choose_extension(
    cells: List[int], w: int, h: int, x: int, y: int, index: int
) -> int:
    """
    0 <= index < 重み合計 に対して、重みに比例した領域を 1 つ返します。
    """
    for region, weight in extension_options(cells, w, h, x, y):
        if index < weight:
            return region
        index -= weight
    raise AssertionError(f"index out of range for cell ({x}, {y})")


def canonical_renumber(region_map: np.ndarray) -> np.ndarray:
    """
    領域番号を、左上から走査して最初に現れた順に 0, 1, 2, ... と振り直します。

    同じ形の盤面が必ず同じ配列になるようにするための正規化です。
    """
    flat = region_map.ravel()
    _, first_index = np.unique(flat, return_index=True)
    # 最初に現れた位置の順に並べた元の番号 -> 新しい番号
    order = flat[np.sort(first_index)]
    relabel = {int(old): new for new, old in enumerate(order)}
    out = np.array([relabel[int(v)] for v in flat], dtype=int)
    return out.reshape(region_map.shape)


def generate_region_map(w: int, h: int, n: int, rng: random.Random) -> np.ndarray:
    """
    w x h の盤面を n 個の単連結な領域に分割します。

    Parameters
    ----------
    w, h : int
        盤面の幅と高さ。
    n : int
        領域数（1 <= n <= w*h）。
    rng : random.Random
        乱数生成器。同じシードなら同じ盤面になります。

    Returns
    -------
    numpy.ndarray
        shape = (h, w) の領域番号の配列。
    """
    wh = w * h
    if n < 1:
        raise ValueError("Must have at least one region")
    if n > wh:
        raise ValueError("Too many regions to fit in grid")

    cells: List[int] = [-1] * wh

    # 種を置く
    for region, sq in enumerate(rng.sample(range(wh), n)):
        cells[sq] = region

    table = CumulativeFrequencyTable(wh)
    for y in range(h):
        for x in range(w):
            table.add(y * w + x, extension_weight(cells, w, h, x, y))

    steps = 0
    while table.total > 0:
        draw = rng.randrange(table.total)
        sq = table.pick(draw)
        draw -= table.cumulative(sq)
        x, y = sq % w, sq // w
        cells[sq] = choose_extension(cells, w, h, x, y, draw)
        steps += 1

        # 変更したマスの周囲 3x3 を計算し直す
        for yy in range(max(y - 1, 0), min(y + 2, h)):
            for xx in range(max(x - 1, 0), min(x + 2, w)):
                idx = yy * w + xx
                table.add(idx, extension_weight(cells, w, h, xx, yy) - table.single(idx))

    assert all(c >= 0 for c in cells)
    logger.debug("Region map grown: %dx%d, n=%d, steps=%d", w, h, n, steps)

    return canonical_renumber(np.array(cells, dtype=int).reshape(h, w))
