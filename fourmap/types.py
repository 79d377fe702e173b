# -*- coding: utf-8 -*-
"""
四色塗り分けパズルで使う主なデータ構造（型）をまとめたモジュールです。

dataclass / Enum を使うことで、
「この構造体はどんなフィールドを持っているのか」
「ソルバーの結果はどの種類なのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from .config import DIFFICULTY_CHARS, DIFFICULTY_NAMES

if TYPE_CHECKING:
    from .graph.adjacency import AdjacencyGraph

# 1 領域の色。0〜3 が色、-1 が未確定（空欄）
Colouring = List[int]

# 未確定を表す値
BLANK = -1


class Difficulty(IntEnum):
    """
    難易度の段階です。

    値が大きいほど、ソルバーが使ってよい推論が増えます。
    EASY より小さい整数（-1 など）は「推論を一切しない」を意味します。
    """

    EASY = 0
    NORMAL = 1
    HARD = 2
    RECURSE = 3

    @property
    def title(self) -> str:
        return DIFFICULTY_NAMES[self.value]

    @property
    def char(self) -> str:
        return DIFFICULTY_CHARS[self.value]

    @classmethod
    def from_char(cls, ch: str) -> "Difficulty":
        idx = DIFFICULTY_CHARS.find(ch)
        if idx < 0:
            raise ValueError(f"Unknown difficulty character: {ch!r}")
        return cls(idx)


class SolveStatus(Enum):
    """ソルバーの判定結果の種類。"""

    INCONSISTENT = "inconsistent"  # 解なし
    UNIQUE = "unique"              # 唯一解
    AMBIGUOUS = "ambiguous"        # 解が 2 つ以上
    UNFINISHED = "unfinished"      # 推論が尽きた（再帰が許可されていない）


class Contradiction(Exception):
    """推論中に候補が空になった（矛盾を検出した）ことを表す例外。"""


@dataclass
class SolverStats:
    """
    1 回の solve() の統計情報です。

    Attributes
    ----------
    singletons : int
        候補が 1 色だけになった領域を確定させた回数。
    pair_eliminations : int
        ペア除外で候補を削った回数。
    chain_eliminations : int
        フォーシングチェーンで候補を削った回数。
    case_splits : int
        再帰探索で場合分けを行った回数。
    max_depth : int
        再帰探索の最大深さ。
    """

    singletons: int = 0
    pair_eliminations: int = 0
    chain_eliminations: int = 0
    case_splits: int = 0
    max_depth: int = 0


@dataclass(frozen=True)
class SolveResult:
    """
    ソルバーの結果です。

    status が UNIQUE のときだけ colouring に完成した塗り分けが入ります。
    """

    status: SolveStatus
    colouring: Optional[Tuple[int, ...]] = None
    stats: SolverStats = field(default_factory=SolverStats, compare=False)

    @property
    def is_unique(self) -> bool:
        return self.status is SolveStatus.UNIQUE

    @classmethod
    def inconsistent(cls, stats: Optional[SolverStats] = None) -> "SolveResult":
        return cls(SolveStatus.INCONSISTENT, None, stats or SolverStats())

    @classmethod
    def unique(cls, colouring, stats: Optional[SolverStats] = None) -> "SolveResult":
        return cls(SolveStatus.UNIQUE, tuple(colouring), stats or SolverStats())

    @classmethod
    def ambiguous(cls, stats: Optional[SolverStats] = None) -> "SolveResult":
        return cls(SolveStatus.AMBIGUOUS, None, stats or SolverStats())

    @classmethod
    def unfinished(cls, stats: Optional[SolverStats] = None) -> "SolveResult":
        return cls(SolveStatus.UNFINISHED, None, stats or SolverStats())


@dataclass(frozen=True)
class GameParams:
    """
    盤面のパラメータです。

    Attributes
    ----------
    w, h : int
        盤面の幅と高さ（マス数）。
    n : int
        領域数。
    difficulty : Difficulty
        目標難易度。
    """

    w: int
    h: int
    n: int
    difficulty: Difficulty = Difficulty.NORMAL

    @property
    def cells(self) -> int:
        return self.w * self.h


@dataclass
class Puzzle:
    """
    生成された問題一式です。

    Attributes
    ----------
    params : GameParams
        生成時のパラメータ。
    region_map : numpy.ndarray
        shape = (h, w) の領域番号の配列。
    graph : AdjacencyGraph
        領域の隣接グラフ。
    solution : list[int]
        完成した塗り分け。
    clues : list[int]
        ヒントとして残した色（空欄は -1）。
    min_difficulty : int
        生成時に最終的に採用した最低難易度（リトライで下がることがある）。
    attempts : int
        採用までに盤面を作り直した回数。
    """

    params: GameParams
    region_map: np.ndarray
    graph: "AdjacencyGraph"
    solution: Colouring
    clues: Colouring
    min_difficulty: int
    attempts: int = 1

    @property
    def clue_count(self) -> int:
        return sum(1 for c in self.clues if c != BLANK)
