# -*- coding: utf-8 -*-
"""
問題を 1 本の文字列（問題記述）に変換・復元するモジュールです。

形式: "<辺リスト>,<ヒントリスト>"

辺リスト
--------
盤面内部のすべての辺を
- 横向きの辺（上下のマスの間）を行ごとに w*(h-1) 本
- 縦向きの辺（左右のマスの間）を列ごとに (w-1)*h 本
の順に並べ、「境界である / ない」の連続長をランレングスで書きます。
- 最初は「境界でない」状態から始まり、先頭に仮想的な 1 本を足します
  （最初の辺が境界の場合も必ず 'a' が出るように）
- 'a'〜'y' は長さ 1〜25 で、書いたあと状態が反転します
- 'z' は長さ 25 で、状態は反転しません（26 以上の連続を表すため）

ヒントリスト
------------
領域番号順に、ヒントの色は数字 '0'〜'3'、
空欄の連続は 'a'〜'z'（長さ 1〜26）で書きます。
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..config import NUM_COLOURS
from ..types import BLANK, Colouring


class _DisjointSet:
    """マスの結合に使う素集合データ構造。"""

    def __init__(self, size: int):
        self.parent = list(range(size))

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def merge(self, a: int, b: int) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra != rb:
            self.parent[max(ra, rb)] = min(ra, rb)


def _edge_cells(pos: int, w: int, h: int) -> Tuple[int, int]:
    """pos 番目の辺を挟む 2 マスの番号。"""
    if pos < w * (h - 1):
        # 横向きの辺
        y, x = divmod(pos, w)
        return y * w + x, (y + 1) * w + x
    # 縦向きの辺
    x, y = divmod(pos - w * (h - 1), h)
    return y * w + x, y * w + x + 1


def _letter(run: int) -> str:
    return chr(ord("a") - 1 + run)


def encode_edges(region_map: np.ndarray) -> str:
    """領域番号の配列から辺リストの文字列を作ります。"""
    h, w = region_map.shape
    cells = region_map.ravel().tolist()
    out: List[str] = []

    run = 1
    prev = False
    for pos in range(w * (h - 1) + (w - 1) * h):
        a, b = _edge_cells(pos, w, h)
        is_edge = cells[a] != cells[b]
        if is_edge != prev:
            out.append(_letter(run))
            run = 1
            prev = is_edge
        else:
            if run == 25:
                out.append("z")
                run = 0
            run += 1

    out.append(_letter(run))
    return "".join(out)


def encode_clues(clues: Colouring) -> str:
    """ヒントの色リストからヒントリストの文字列を作ります。"""
    out: List[str] = []
    run = 0
    for colour in clues:
        if colour == BLANK:
            if run == 26:
                out.append("z")
                run = 0
            run += 1
        else:
            if run > 0:
                out.append(_letter(run))
            out.append(str(colour))
            run = 0
    if run > 0:
        out.append(_letter(run))
    return "".join(out)


def encode_description(region_map: np.ndarray, clues: Colouring) -> str:
    """問題記述 "<辺リスト>,<ヒントリスト>" を作ります。"""
    return encode_edges(region_map) + "," + encode_clues(clues)


def decode_edges(w: int, h: int, n: int, edge_desc: str) -> np.ndarray:
    """
    辺リストから領域番号の配列を復元します。

    境界でない辺で隔てられた 2 マスを同じ領域にまとめ、
    左上から出現順に番号を振ります。
    """
    wh = w * h
    total = 2 * wh - w - h
    dsf = _DisjointSet(wh)

    pos = -1
    state = False
    for ch in edge_desc:
        if not "a" <= ch <= "z":
            raise ValueError("Unexpected character in edge list")
        k = 25 if ch == "z" else ord(ch) - ord("a") + 1
        for _ in range(k):
            if pos < 0:
                # 先頭の仮想的な辺
                pos += 1
                continue
            if pos >= total:
                raise ValueError("Too much data in edge list")
            if not state:
                dsf.merge(*_edge_cells(pos, w, h))
            pos += 1
        if ch != "z":
            state = not state

    if pos < total:
        raise ValueError("Too little data in edge list")

    labels: dict = {}
    cells = []
    for i in range(wh):
        root = dsf.find(i)
        if root not in labels:
            labels[root] = len(labels)
        cells.append(labels[root])

    if len(labels) != n:
        raise ValueError("Edge list defines the wrong number of regions")

    return np.array(cells, dtype=int).reshape(h, w)


def decode_clues(n: int, clue_desc: str) -> Colouring:
    """ヒントリストから、各領域のヒントの色（空欄は -1）を復元します。"""
    clues: Colouring = []
    for ch in clue_desc:
        if "0" <= ch < str(NUM_COLOURS):
            clues.append(int(ch))
        elif "a" <= ch <= "z":
            clues.extend([BLANK] * (ord(ch) - ord("a") + 1))
        else:
            raise ValueError("Unexpected character in clue list")

    if len(clues) < n:
        raise ValueError("Too little data in clue list")
    if len(clues) > n:
        raise ValueError("Too much data in clue list")
    return clues


def decode_description(w: int, h: int, n: int, desc: str) -> Tuple[np.ndarray, Colouring]:
    """
    問題記述から (領域番号の配列, ヒント) を復元します。

    形式が正しくなければ ValueError を送出します。
    """
    edge_desc, sep, clue_desc = desc.partition(",")
    region_map = decode_edges(w, h, n, edge_desc)
    if not sep:
        raise ValueError("Expected comma before clue list")
    return region_map, decode_clues(n, clue_desc)
