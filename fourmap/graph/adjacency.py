# -*- coding: utf-8 -*-
"""
領域の隣接グラフを扱うモジュールです。

盤面（領域番号の配列）から
「上下左右で辺を共有している領域のペア」を求め、
ソート済みの辺リストとして保持します。

辺は i*n + j という 1 つの整数キーで表し、
(i, j) と (j, i) の両方向を格納します。
こうしておくと、頂点 i の隣接頂点は
キー [i*n, (i+1)*n) の連続した範囲として二分探索で取り出せます。

斜めに接しているだけの領域同士は隣接とみなしません。
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterator, List, Tuple

import numpy as np


class AdjacencyGraph:
    """
    領域をノードとする無向グラフ（構築後は変更不可）。

    Parameters
    ----------
    n : int
        頂点（領域）数。
    edge_keys : array-like of int
        i*n + j 形式の辺キー。両方向を含むこと。
    """

    def __init__(self, n: int, edge_keys):
        self.n = n
        keys = np.unique(np.asarray(edge_keys, dtype=np.int64))
        keys.setflags(write=False)
        self.keys = keys
        # 二分探索用
        self._key_list: List[int] = keys.tolist()

        # ソルバーの内側のループで何度も使うので、隣接リストを先に作っておく
        self._neighbours: List[Tuple[int, ...]] = []
        for i in range(n):
            start, stop = self.neighbour_range(i)
            self._neighbours.append(tuple(k - i * n for k in self._key_list[start:stop]))

    @classmethod
    def from_region_map(cls, region_map: np.ndarray, n: int | None = None) -> "AdjacencyGraph":
        """
        領域番号の配列から隣接グラフを構築します。

        Parameters
        ----------
        region_map : numpy.ndarray
            shape = (h, w) の領域番号の配列。
        n : int, optional
            領域数。省略時は region_map の最大値 + 1。
        """
        grid = np.asarray(region_map, dtype=np.int64)
        if n is None:
            n = int(grid.max()) + 1 if grid.size else 0

        matrix = np.zeros((n, n), dtype=bool)

        # 横方向に隣り合うマス
        left, right = grid[:, :-1], grid[:, 1:]
        diff = left != right
        matrix[left[diff], right[diff]] = True
        matrix[right[diff], left[diff]] = True

        # 縦方向に隣り合うマス
        top, bottom = grid[:-1, :], grid[1:, :]
        diff = top != bottom
        matrix[top[diff], bottom[diff]] = True
        matrix[bottom[diff], top[diff]] = True

        # 行列をソート済みのキーのリストに詰める
        return cls(n, np.flatnonzero(matrix))

    @classmethod
    def from_edges(cls, n: int, edges) -> "AdjacencyGraph":
        """(i, j) のペアの列からグラフを作ります（テストや外部入力用）。"""
        keys: List[int] = []
        for i, j in edges:
            if i == j:
                raise ValueError(f"Self-loop on vertex {i}")
            if not (0 <= i < n and 0 <= j < n):
                raise ValueError(f"Edge ({i}, {j}) out of range for n={n}")
            keys.append(i * n + j)
            keys.append(j * n + i)
        return cls(n, keys)

    @property
    def edge_count(self) -> int:
        """無向辺の本数。"""
        return len(self.keys) // 2

    def edge_index(self, i: int, j: int) -> int:
        """辺 (i, j) のキーの位置を返します。無ければ -1。"""
        key = i * self.n + j
        idx = bisect_left(self._key_list, key)
        if idx < len(self._key_list) and self._key_list[idx] == key:
            return idx
        return -1

    def edge_exists(self, i: int, j: int) -> bool:
        return self.edge_index(i, j) >= 0

    def neighbour_range(self, i: int) -> Tuple[int, int]:
        """頂点 i の辺が格納されている [start, stop) の範囲。"""
        start = bisect_left(self._key_list, i * self.n)
        stop = bisect_left(self._key_list, (i + 1) * self.n)
        return start, stop

    def neighbours(self, i: int) -> Tuple[int, ...]:
        """頂点 i に隣接する頂点（昇順）。"""
        return self._neighbours[i]

    def edges(self) -> Iterator[Tuple[int, int]]:
        """i < j となる無向辺 (i, j) を昇順に列挙します。"""
        n = self.n
        for key in self._key_list:
            i, j = divmod(key, n)
            if i < j:
                yield i, j

    def __repr__(self) -> str:
        return f"AdjacencyGraph(n={self.n}, edges={self.edge_count})"
