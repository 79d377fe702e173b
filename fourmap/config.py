# -*- coding: utf-8 -*-
"""
fourmap 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- 盤面生成時の領域成長の重み
- 問題生成のリトライ回数
- デフォルトの盤面サイズ・難易度
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import List, Tuple

# ==== 色 ===================================================================

# 使用する色の数（四色定理に基づく）
NUM_COLOURS: int = 4

# 全色が候補に残っている状態のビットマスク (0b1111)
ALL_COLOURS_MASK: int = (1 << NUM_COLOURS) - 1

# ==== 難易度 ===============================================================

# 難易度の表示名（Difficulty の値の順）
DIFFICULTY_NAMES: Tuple[str, ...] = ("Easy", "Normal", "Hard", "Unreasonable")

# パラメータ文字列で使う 1 文字の難易度記号
DIFFICULTY_CHARS: str = "enhu"

# ==== 盤面生成（領域成長）==================================================

# 領域を広げたときに周長が増える場合の重み
WEIGHT_INCREASED: int = 2

# 周長が変わらない場合の重み
WEIGHT_UNCHANGED: int = 3

# 周長が減る場合の重み（なるべく丸い領域になるよう大きめ）
WEIGHT_DECREASED: int = 4

# ==== パラメータ ===========================================================

DEFAULT_WIDTH: int = 12
DEFAULT_HEIGHT: int = 12
DEFAULT_REGIONS: int = 32

# デフォルト難易度の記号
DEFAULT_DIFFICULTY: str = "n"

# 領域数の下限
MIN_REGIONS: int = 5

# プリセット (w, h, n, 難易度記号)
PRESETS: List[Tuple[int, int, int, str]] = [
    (8, 8, 16, "e"),
    (8, 8, 16, "n"),
    (12, 12, 32, "e"),
    (12, 12, 32, "n"),
    (12, 12, 32, "h"),
    (16, 16, 64, "n"),
    (16, 16, 64, "h"),
]

# ==== 問題生成 =============================================================

# 目標難易度を満たす問題が見つからないとき、
# 最低難易度を 1 段階下げるまでに試す回数
GENERATION_TRIES: int = 50
