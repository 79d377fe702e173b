# -*- coding: utf-8 -*-
"""
ソルバーの状態（各領域の候補色ビットマスク）を保持するモジュールです。

候補色は 4 ビットのビットマスクで表します。
  bit c が立っている = 色 c がまだ候補に残っている

すべての書き換えは「変更ログ（trail）」に記録されるので、
再帰探索で場合分けするときは
    mark = ctx.mark()
    ... 色を置いて推論 ...
    ctx.undo(mark)
とするだけで、分岐前の状態に巻き戻せます。
状態全体をコピーするより、深い探索でも軽く済みます。
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..config import ALL_COLOURS_MASK, NUM_COLOURS
from ..graph.adjacency import AdjacencyGraph
from ..types import BLANK, SolverStats


def bitcount(mask: int) -> int:
    """4 ビット以下のマスクの立っているビット数。"""
    return bin(mask).count("1")


def colours_in(mask: int) -> List[int]:
    """マスクに含まれる色を昇順で返します。"""
    return [c for c in range(NUM_COLOURS) if mask & (1 << c)]


class SolverContext:
    """
    1 回の solve() の間だけ使うソルバーの状態です。

    Attributes
    ----------
    graph : AdjacencyGraph
        隣接グラフ（読み取り専用）。
    possible : list[int]
        各領域の候補色ビットマスク。
    colouring : list[int]
        確定した色（未確定は -1）。
    stats : SolverStats
        推論や場合分けの回数。
    depth : int
        現在の再帰の深さ。
    """

    def __init__(self, graph: AdjacencyGraph):
        self.graph = graph
        self.n = graph.n
        self.possible: List[int] = [ALL_COLOURS_MASK] * self.n
        self.colouring: List[int] = [BLANK] * self.n
        self.stats = SolverStats()
        self.depth = 0
        # (領域, 変更前のマスク, 変更前の色)
        self._trail: List[Tuple[int, int, int]] = []

    # ------------------------------------------------------------------
    # 変更ログ
    # ------------------------------------------------------------------
    def mark(self) -> int:
        return len(self._trail)

    def undo(self, mark: int) -> None:
        """mark() を取った時点まで状態を巻き戻します。"""
        trail = self._trail
        while len(trail) > mark:
            region, mask, colour = trail.pop()
            self.possible[region] = mask
            self.colouring[region] = colour

    def _save(self, region: int) -> None:
        self._trail.append((region, self.possible[region], self.colouring[region]))

    # ------------------------------------------------------------------
    # 状態の更新
    # ------------------------------------------------------------------
    def restrict(self, region: int, remove_mask: int) -> bool:
        """
        region の候補から remove_mask の色を取り除きます。

        Returns
        -------
        bool
            実際に候補が減ったら True。
        """
        if not self.possible[region] & remove_mask:
            return False
        self._save(region)
        self.possible[region] &= ~remove_mask
        return True

    def place(self, region: int, colour: int) -> bool:
        """
        region の色を colour に確定し、隣接領域の候補から colour を除きます。

        colour がすでに候補から外れていた場合は何もせず False を返します
        （= 矛盾）。
        """
        bit = 1 << colour
        if not self.possible[region] & bit:
            return False

        self._save(region)
        self.possible[region] = bit
        self.colouring[region] = colour

        for k in self.graph.neighbours(region):
            self.restrict(k, bit)

        return True

    def place_clues(self, clues: Sequence[int]) -> bool:
        """ヒントを順に置きます。矛盾していたら False。"""
        if len(clues) != self.n:
            raise ValueError(f"Expected {self.n} clue entries, got {len(clues)}")
        for region, colour in enumerate(clues):
            if colour == BLANK:
                continue
            if not 0 <= colour < NUM_COLOURS:
                raise ValueError(f"Invalid colour {colour} for region {region}")
            if not self.place(region, colour):
                return False
        return True

    # ------------------------------------------------------------------
    # 参照
    # ------------------------------------------------------------------
    def is_complete(self) -> bool:
        return all(c != BLANK for c in self.colouring)

    def undecided(self) -> List[int]:
        return [i for i in range(self.n) if self.colouring[i] == BLANK]
