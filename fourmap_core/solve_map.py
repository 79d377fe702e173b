# -*- coding: utf-8 -*-
"""
API から呼び出される入口の関数をまとめたモジュールです。

どの関数も例外を外に出さず、
- 成功時: {"status": "ok", ...}
- 失敗時: {"status": "error", "message": ...}
の dict を返します。
"""

import hashlib
import logging
import random
from typing import Optional, Sequence

import pandas as pd

from fourmap import assemble_puzzle, solve_board, validate_params
from fourmap.codec.description import encode_description
from fourmap.codec.params import decode_params, encode_params

# --- ロギング設定 ---
logger = logging.getLogger(__name__)


def _puzzle_id(text: str) -> str:
    return hashlib.md5(text.encode()).hexdigest()[:8]


# --- APIエントリポイント ---
def generate_map_puzzle(param_string: str, seed: Optional[int] = None) -> dict:
    """
    パラメータ文字列から問題を 1 つ生成する
    """
    try:
        params = decode_params(param_string)
        validate_params(params)

        rng = random.Random(seed)
        puzzle = assemble_puzzle(params, rng)
        description = encode_description(puzzle.region_map, puzzle.clues)

        return {
            "status": "ok",
            "puzzle_id": _puzzle_id(encode_params(params, full=False) + ":" + description),
            "params": encode_params(params),
            "description": description,
            "region_board": puzzle.region_map.tolist(),
            "clues": list(puzzle.clues),
            "meta": {
                "width": params.w,
                "height": params.h,
                "regions": params.n,
                "difficulty": params.difficulty.title,
                "clue_count": puzzle.clue_count,
                "attempts": puzzle.attempts,
                "seed": seed,
            },
        }

    except Exception as e:
        logger.exception("Generator error")
        return {
            "status": "error",
            "message": str(e),
        }


def solve_map_board(
    board_df: pd.DataFrame,
    clues: Optional[Sequence[int]] = None,
    user_id: Optional[str] = None,
) -> dict:
    """
    盤面（領域ラベルの DataFrame）とヒントから解答を求める
    """
    try:
        # パズルID生成（盤面のハッシュ）
        board_str = board_df.to_csv(index=False, header=False)
        if clues is not None:
            board_str += ",".join(str(c) for c in clues)
        puzzle_id = _puzzle_id(board_str)

        result = solve_board(board_df, clues)

        return {
            "status": "ok",
            "puzzle_id": puzzle_id,
            **result,
            "meta": {
                "regions": len(result["regions"]),
                "user_id": user_id,
            },
        }

    except Exception as e:
        logger.exception("Solver error")
        return {
            "status": "error",
            "message": str(e),
        }
