# -*- coding: utf-8 -*-
"""
解答結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..types import BLANK, SolveResult


def apply_colouring_to_grid(
    region_map: np.ndarray,
    colouring: Sequence[int],
) -> np.ndarray:
    """
    領域番号の配列に塗り分けを適用して、
    「各マスの色」の配列を作ります。

    Parameters
    ----------
    region_map : numpy.ndarray
        shape = (h, w) の領域番号の配列。
    colouring : sequence of int
        各領域の色（未確定は -1）。

    Returns
    -------
    numpy.ndarray
        shape = (h, w) の色の配列。未確定の領域のマスは -1。
    """
    lookup = np.asarray(colouring, dtype=int)
    return lookup[region_map]


def build_region_list(
    colouring: Sequence[int],
    clues: Sequence[int],
) -> List[Dict[str, Any]]:
    """
    領域ごとの色とヒントかどうかの対応表を作る
    """
    items: List[Dict[str, Any]] = []
    for region, colour in enumerate(colouring):
        items.append({
            "region": region,
            "colour": int(colour),
            "clue": clues[region] != BLANK,
        })
    return items


def build_result(
    original_df: Optional[pd.DataFrame],
    region_map: np.ndarray,
    clues: Sequence[int],
    result: SolveResult,
) -> Dict[str, Any]:
    """
    ソルバーの結果を JSON に変換できる dict にまとめます。

    唯一解でない場合、盤面はヒントだけを塗った状態になります。
    """
    colouring = list(result.colouring) if result.is_unique else list(clues)
    solved_grid = apply_colouring_to_grid(region_map, colouring)
    rows, cols = solved_grid.shape

    if original_df is not None:
        solved_df = pd.DataFrame(
            solved_grid,
            index=original_df.index,
            columns=original_df.columns,
        )
    else:
        solved_df = pd.DataFrame(solved_grid)

    return {
        "solve_status": result.status.value,
        "solved_board": solved_df.values.tolist(),
        "region_board": region_map.tolist(),
        "regions": build_region_list(colouring, clues),
        "stats": asdict(result.stats),
        "shape": (rows, cols),
    }
