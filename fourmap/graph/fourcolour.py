# -*- coding: utf-8 -*-
"""
隣接グラフを 4 色で塗り分けるモジュールです。

アルゴリズム（バックトラック）
------------------------------
- 各頂点について「隣接頂点のうち色 c を使っている数」と
  「まだ使える色の数」を管理する
- まだ塗っていない頂点のうち、使える色が最も少ない頂点を
  （同数ならランダムに）1 つ選ぶ
- その頂点の使える色をランダムな順に試し、隣接頂点の集計を更新して次の頂点へ
- 失敗したら集計を元に戻して次の色へ

探索は (頂点, 残りの色) のスタックで行い、Python の再帰は使いません。

平面グラフであれば四色定理により必ず塗り分けが見つかります。
"""

from __future__ import annotations

import random
from typing import List, Tuple

from ..config import NUM_COLOURS
from ..logging_utils import get_logger
from .adjacency import AdjacencyGraph

logger = get_logger()


class _ColouringSearch:
    """1 回の four_colour() 呼び出しの間だけ使う作業領域。"""

    def __init__(self, graph: AdjacencyGraph, rng: random.Random):
        self.graph = graph
        self.rng = rng
        n = graph.n
        self.colouring: List[int] = [-1] * n
        # used[v][c]: v の隣接頂点で色 c を使っている数
        self.used: List[List[int]] = [[0] * NUM_COLOURS for _ in range(n)]
        # free[v]: v がまだ使える色の数
        self.free: List[int] = [NUM_COLOURS] * n

    def _assign(self, v: int, c: int) -> None:
        self.colouring[v] = c
        for k in self.graph.neighbours(v):
            if self.used[k][c] == 0:
                self.free[k] -= 1
            self.used[k][c] += 1

    def _unassign(self, v: int, c: int) -> None:
        for k in self.graph.neighbours(v):
            self.used[k][c] -= 1
            if self.used[k][c] == 0:
                self.free[k] += 1
        self.colouring[v] = -1

    def _choose(self) -> int:
        """未着色の頂点のうち、使える色が最少のものを 1 つ選びます。全部塗れていれば -1。"""
        nfree = NUM_COLOURS + 1
        candidates: List[int] = []
        for v in range(self.graph.n):
            if self.colouring[v] >= 0:
                continue
            if self.free[v] < nfree:
                nfree = self.free[v]
                candidates = [v]
            elif self.free[v] == nfree:
                candidates.append(v)

        if not candidates:
            return -1
        return candidates[self.rng.randrange(len(candidates))]

    def _legal_colours(self, v: int) -> List[int]:
        colours = [c for c in range(NUM_COLOURS) if self.used[v][c] == 0]
        self.rng.shuffle(colours)
        return colours

    def run(self) -> bool:
        v = self._choose()
        if v < 0:
            return True

        # (頂点, まだ試していない色)
        stack: List[Tuple[int, List[int]]] = [(v, self._legal_colours(v))]
        while stack:
            v, colours = stack[-1]
            if self.colouring[v] >= 0:
                self._unassign(v, self.colouring[v])
            if not colours:
                # 行き止まり。1 つ前の頂点でやり直す
                stack.pop()
                continue

            self._assign(v, colours.pop(0))
            nxt = self._choose()
            if nxt < 0:
                return True  # 全部塗れた
            stack.append((nxt, self._legal_colours(nxt)))

        return False


def four_colour(graph: AdjacencyGraph, rng: random.Random) -> List[int]:
    """
    グラフの 4 色塗り分けを 1 つ返します。

    Parameters
    ----------
    graph : AdjacencyGraph
        隣接グラフ（平面グラフであること）。
    rng : random.Random
        乱数生成器。

    Returns
    -------
    list[int]
        各頂点の色 (0〜3)。隣接する頂点は必ず異なる色になります。
    """
    search = _ColouringSearch(graph, rng)
    if not search.run():
        # 平面グラフならここには来ない
        raise RuntimeError(f"No four-colouring exists for {graph!r}")

    logger.debug("Four-coloured %r", graph)
    return search.colouring
