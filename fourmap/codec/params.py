# -*- coding: utf-8 -*-
"""
パラメータ文字列 "WxHnNdD" と GameParams を相互変換するモジュールです。

例:
- "12x12n32dn" → 幅 12, 高さ 12, 領域 32, Normal
- "8"          → 幅 8, 高さ 8（幅と同じ）, 領域 8（= w*h/8）, Normal

読み取りは寛容で、省略された部分はデフォルトで補います。
値が盤面として成立するかは validate_params() で確認してください。
"""

from __future__ import annotations

import re
from typing import List

from ..config import (
    DEFAULT_DIFFICULTY,
    DEFAULT_HEIGHT,
    DEFAULT_REGIONS,
    DEFAULT_WIDTH,
    DIFFICULTY_CHARS,
    PRESETS,
)
from ..generation.assembler import validate_params
from ..types import Difficulty, GameParams

__all__ = [
    "decode_params",
    "default_params",
    "encode_params",
    "preset_params",
    "validate_params",
]

_PARAMS_RE = re.compile(
    r"""
    (?P<w>\d*)
    (?:x(?P<h>\d*))?
    (?:n(?P<n>\d*)[.\d]*)?
    (?:d(?P<d>.?))?
    """,
    re.VERBOSE,
)


def _to_int(text: str) -> int:
    # 数字が無ければ 0 とみなす
    return int(text) if text else 0


def default_params() -> GameParams:
    return GameParams(
        DEFAULT_WIDTH,
        DEFAULT_HEIGHT,
        DEFAULT_REGIONS,
        Difficulty.from_char(DEFAULT_DIFFICULTY),
    )


def preset_params() -> List[GameParams]:
    """config.PRESETS を GameParams のリストにして返します。"""
    return [GameParams(w, h, n, Difficulty.from_char(d)) for w, h, n, d in PRESETS]


def decode_params(string: str) -> GameParams:
    """
    パラメータ文字列を GameParams に変換します。

    Parameters
    ----------
    string : str
        "WxHnNdD" 形式の文字列。x / n / d の各部分は省略可。

    Returns
    -------
    GameParams
        - h を省略した場合は w と同じ
        - n を省略した場合は w*h/8（切り捨て）
        - 難易度を省略した場合、または未知の記号の場合は Normal
    """
    m = _PARAMS_RE.match(string)
    w = _to_int(m.group("w"))
    h = _to_int(m.group("h")) if m.group("h") is not None else w
    n = _to_int(m.group("n")) if m.group("n") is not None else w * h // 8

    difficulty = Difficulty.from_char(DEFAULT_DIFFICULTY)
    ch = m.group("d")
    if ch and ch in DIFFICULTY_CHARS:
        difficulty = Difficulty.from_char(ch)

    return GameParams(w, h, n, difficulty)


def encode_params(params: GameParams, full: bool = True) -> str:
    """
    GameParams をパラメータ文字列に変換します。

    full=False の場合は難易度を含めません
    （盤面の形だけを表す文字列になります）。
    """
    ret = f"{params.w}x{params.h}n{params.n}"
    if full:
        ret += f"d{params.difficulty.char}"
    return ret
