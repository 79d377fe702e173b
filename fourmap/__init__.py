# -*- coding: utf-8 -*-
"""
fourmap パッケージの入口となるモジュールです。

    from fourmap import generate, solve, solve_board

のように呼び出されることを想定しています。

solve_board() は、盤面（pandas.DataFrame）とヒントを受け取り、
1. 盤面の正規化（領域番号の配列へ）
2. 隣接グラフの構築
3. 推論 + 再帰探索による解答
4. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import pandas as pd

from .csp.search import grade, solve
from .generation.assembler import assemble_puzzle, generate, validate_params
from .graph.adjacency import AdjacencyGraph
from .grid.parser import normalize_region_grid
from .logging_utils import get_logger
from .postprocess.render_result import build_result
from .types import (
    BLANK,
    Difficulty,
    GameParams,
    Puzzle,
    SolveResult,
    SolveStatus,
)

__all__ = [
    "AdjacencyGraph",
    "BLANK",
    "Difficulty",
    "GameParams",
    "Puzzle",
    "SolveResult",
    "SolveStatus",
    "assemble_puzzle",
    "generate",
    "grade",
    "solve",
    "solve_board",
    "validate_params",
]

logger = get_logger()


def solve_board(
    df: pd.DataFrame,
    clues: Optional[Sequence[int]] = None,
    max_difficulty: int = Difficulty.RECURSE,
) -> Dict[str, Any]:
    """
    盤面を解くメイン関数。

    Parameters
    ----------
    df : pandas.DataFrame
        各セルに領域ラベルが入った盤面。
    clues : sequence of int, optional
        領域番号順のヒントの色（空欄は -1）。省略時はすべて空欄。
    max_difficulty : int
        使ってよい推論の上限。

    Returns
    -------
    dict
        build_result() の結果に "difficulty"（唯一解を導ける最低難易度）を加えたもの。
    """
    logger.info("=== solve_board() START ===")
    logger.info("Grid shape: %s", df.shape)

    region_map = normalize_region_grid(df)
    n = int(region_map.max()) + 1
    graph = AdjacencyGraph.from_region_map(region_map, n)
    logger.info("Regions: %d, adjacencies: %d", n, graph.edge_count)

    if clues is None:
        clues = [BLANK] * n
    if len(clues) != n:
        raise ValueError(f"Expected {n} clues, got {len(clues)}")

    result = solve(graph, clues, max_difficulty)
    logger.info("Solve status: %s (stats=%s)", result.status.value, result.stats)

    out = build_result(df, region_map, clues, result)
    difficulty = grade(graph, clues) if result.is_unique else None
    out["difficulty"] = difficulty.title if difficulty is not None else None

    logger.info("=== solve_board() END ===")
    return out
