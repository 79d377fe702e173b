# -*- coding: utf-8 -*-
"""
外部から渡された盤面を、内部表現（領域番号の配列）に正規化するモジュールです。

主な役割:
- pandas.DataFrame を numpy 配列に変換
- 「同じラベルで上下左右につながっているマスの塊」を 1 つの領域とみなす
- 領域番号を左上から出現順に振り直す

ラベルは数字でも文字でも構いません。
離れた場所で同じラベルが使われていても、つながっていなければ別の領域です。
"""

from __future__ import annotations

from collections import deque
from typing import Any, List

import numpy as np
import pandas as pd


def normalize_label(x: Any) -> str:
    """
    個々のセルの値を、比較用の文字列に変換します。

    - None / NaN / 空文字: 空欄として "" を返す
    - 数値: "3" のような整数表記にそろえる（3 と "3" と 3.0 を同じ扱いにする）
    - それ以外: 前後の空白を除いた文字列
    """
    if x is None:
        return ""
    if isinstance(x, float):
        if np.isnan(x):
            return ""
        if x.is_integer():
            return str(int(x))
    s = str(x).strip()
    if s.isdigit():
        return str(int(s))
    return s


def normalize_region_grid(df: pd.DataFrame) -> np.ndarray:
    """
    DataFrame の盤面を、領域番号の 2次元 numpy 配列に変換します。

    Parameters
    ----------
    df : pandas.DataFrame
        各セルに領域ラベルが入った盤面。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols) の int 配列。値は 0 から始まる領域番号。
    """
    rows, cols = df.shape
    if rows == 0 or cols == 0:
        raise ValueError("Board must not be empty")

    labels: List[List[str]] = [
        [normalize_label(df.iat[i, j]) for j in range(cols)] for i in range(rows)
    ]
    for i in range(rows):
        for j in range(cols):
            if labels[i][j] == "":
                raise ValueError(f"Cell ({i}, {j}) has no region label")

    region_map = np.full((rows, cols), -1, dtype=int)
    next_id = 0

    # 左上から順に、まだ番号の付いていないマスを起点に塗りつぶす
    for i in range(rows):
        for j in range(cols):
            if region_map[i, j] >= 0:
                continue
            label = labels[i][j]
            region_map[i, j] = next_id
            queue = deque([(i, j)])
            while queue:
                r, c = queue.popleft()
                for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and region_map[nr, nc] < 0
                        and labels[nr][nc] == label
                    ):
                        region_map[nr, nc] = next_id
                        queue.append((nr, nc))
            next_id += 1

    return region_map
