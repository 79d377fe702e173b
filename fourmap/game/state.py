# -*- coding: utf-8 -*-
"""
プレイ中の盤面の状態と、手（move 文字列）の適用を扱うモジュールです。

手の文字列
----------
";" 区切りで複数の操作を並べられます。

- "<c>:<r>"   : 領域 r を色 c (0〜3) で塗る
- "C:<r>"     : 領域 r の色を消す
- "p<c>:<r>"  : 領域 r の鉛筆書き（メモ）の色 c を反転する
- "pC:<r>"    : 領域 r の鉛筆書きをすべて消す
- "S"         : ソルバーで解いた（チート）印を付ける
- "M"         : 空いている全領域に 4 色すべてを鉛筆書きする（単独で使う）

空文字列の手は何も変えずに局面をコピーします。末尾の ";" は無視します。

描画やマウス操作の解釈はこのモジュールの範囲外です。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import List, Tuple

import numpy as np

from ..codec.description import decode_description
from ..config import ALL_COLOURS_MASK
from ..csp.context import colours_in
from ..csp.search import solve
from ..graph.adjacency import AdjacencyGraph
from ..types import BLANK, Colouring, Difficulty, GameParams, SolveStatus

_MOVE_RE = re.compile(r"(p?)([0-3C]):(\d+)$")


@dataclass
class MapGameState:
    """
    1 局面の状態です。

    execute_move() は自身を変更せず、新しい MapGameState を返します。
    region_map / graph / clues は局面間で共有されます。

    Attributes
    ----------
    params : GameParams
        盤面のパラメータ。
    region_map : numpy.ndarray
        shape = (h, w) の領域番号の配列。
    graph : AdjacencyGraph
        領域の隣接グラフ。
    clues : tuple[int, ...]
        ヒントの色（空欄は -1）。ヒントの領域は変更できません。
    colouring : list[int]
        現在の塗り分け（未着色は -1）。
    pencil : list[int]
        各領域の鉛筆書きの色のビットマスク。
    completed : bool
        一度でも正しく塗り終えたら True（以後 False には戻りません）。
    cheated : bool
        "S" の手が適用されたら True。
    """

    params: GameParams
    region_map: np.ndarray
    graph: AdjacencyGraph
    clues: Tuple[int, ...]
    colouring: Colouring
    pencil: List[int]
    completed: bool = False
    cheated: bool = False

    @classmethod
    def new(cls, params: GameParams, description: str) -> "MapGameState":
        """問題記述から初期局面を作ります。記述が不正なら ValueError。"""
        region_map, clues = decode_description(params.w, params.h, params.n, description)
        graph = AdjacencyGraph.from_region_map(region_map, params.n)
        return cls(
            params=params,
            region_map=region_map,
            graph=graph,
            clues=tuple(clues),
            colouring=list(clues),
            pencil=[0] * params.n,
        )

    def is_immutable(self, region: int) -> bool:
        return self.clues[region] != BLANK

    def _copy(self) -> "MapGameState":
        return replace(self, colouring=list(self.colouring), pencil=list(self.pencil))

    def execute_move(self, move: str) -> "MapGameState":
        """
        手を適用した新しい局面を返します。

        Parameters
        ----------
        move : str
            手の文字列（モジュールの説明を参照）。

        Returns
        -------
        MapGameState
            適用後の局面。

        Raises
        ------
        ValueError
            手の形式が不正な場合、範囲外の領域を指している場合、
            ヒントの領域を変更しようとした場合、
            色が付いている領域に鉛筆書きしようとした場合。
        """
        ret = self._copy()
        n = self.params.n

        if move.startswith("M"):
            for i in range(n):
                if ret.colouring[i] == BLANK:
                    ret.pencil[i] = ALL_COLOURS_MASK
            return ret

        tokens = move.split(";")
        # 空の手や末尾の ";" は何もしない
        if tokens[-1] == "":
            tokens.pop()

        for token in tokens:
            if token == "S":
                ret.cheated = True
                continue

            m = _MOVE_RE.match(token)
            if m is None:
                raise ValueError(f"Malformed move: {token!r}")
            pencil, c, k = m.group(1), m.group(2), int(m.group(3))
            if k >= n:
                raise ValueError(f"Region {k} out of range")

            if pencil:
                if ret.colouring[k] != BLANK:
                    raise ValueError(f"Cannot pencil a coloured region: {k}")
                if c == "C":
                    ret.pencil[k] = 0
                else:
                    ret.pencil[k] ^= 1 << int(c)
            else:
                if self.is_immutable(k):
                    raise ValueError(f"Cannot change a clue region: {k}")
                ret.colouring[k] = BLANK if c == "C" else int(c)
                ret.pencil[k] = 0

        if not ret.completed and ret.is_solved():
            ret.completed = True
        return ret

    def conflicts(self) -> List[Tuple[int, int]]:
        """同じ色で塗られた隣接領域の組 (i < j) を返します。"""
        return [
            (i, j)
            for i, j in self.graph.edges()
            if self.colouring[i] != BLANK and self.colouring[i] == self.colouring[j]
        ]

    def is_solved(self) -> bool:
        """全領域が塗られていて、隣接領域の色がすべて異なるか。"""
        if any(c == BLANK for c in self.colouring):
            return False
        return not self.conflicts()

    def solve_move(self) -> str:
        """
        ソルバーで解き、現在の局面から解答へ移る手の文字列を返します。

        戻り値は "S" の後に、現在と色が異なる領域ぶんの ";c:r" が続きます。
        唯一解が得られなければ ValueError を送出します。
        """
        result = solve(self.graph, self.clues, Difficulty.RECURSE)
        if result.status is SolveStatus.INCONSISTENT:
            raise ValueError("Puzzle is inconsistent")
        if not result.is_unique:
            raise ValueError("Unable to find a unique solution for this puzzle")

        parts = ["S"]
        for i, colour in enumerate(result.colouring):
            if colour != self.colouring[i]:
                parts.append(f"{colour}:{i}")
        return ";".join(parts)

    def pencil_colours(self, region: int) -> List[int]:
        return colours_in(self.pencil[region])
