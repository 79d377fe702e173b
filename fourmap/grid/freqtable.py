# -*- coding: utf-8 -*-
"""
累積度数表（重み付き抽選用のテーブル）を扱うモジュールです。

盤面生成では「どのマスをどの領域に広げるか」を重み付きで
何千回も抽選し、そのたびに周辺マスの重みを更新します。
毎回 O(n) で累積和を取り直すのは遅いので、
Fenwick 木と同じ考え方で
- 重みの更新
- 累積重みの参照
- 抽選値からシンボルの逆引き
をすべて O(log n) で行います。

インデックス 0 には全体の合計が入ります。
"""

from __future__ import annotations

from typing import List


class CumulativeFrequencyTable:
    """
    シンボル 0..n-1 の重みを管理する累積度数表です。

    Parameters
    ----------
    n : int
        シンボル数。
    """

    def __init__(self, n: int):
        self.n = n
        self.table: List[int] = [0] * n
        # 探索開始ビット（n 以上の最小の 2 の冪）
        self._top_bit = 1
        while self._top_bit < n:
            self._top_bit <<= 1

    @property
    def total(self) -> int:
        """全シンボルの重みの合計。"""
        return self.table[0]

    def add(self, sym: int, count: int) -> None:
        """シンボル sym の重みを count だけ増やします（負の値で減らす）。"""
        bit = 1
        while sym != 0:
            if sym & bit:
                self.table[sym] += count
                sym &= ~bit
            bit <<= 1

        self.table[0] += count

    def cumulative(self, sym: int) -> int:
        """sym より小さいシンボルの重みの合計を返します。"""
        if sym == 0:
            return 0
        assert 0 < sym <= self.n

        count = self.table[0]
        bit = self._top_bit
        limit = self.n

        while bit > 0:
            # sym 以上で、最下位ビットが bit の位置にある最小の数
            index = ((sym + bit - 1) & ~(bit * 2 - 1)) + bit
            if index < limit:
                count -= self.table[index]
                limit = index
            bit >>= 1

        return count

    def single(self, sym: int) -> int:
        """シンボル sym 単独の重みを返します。"""
        assert 0 <= sym < self.n

        count = self.table[sym]
        bit = 1
        while sym + bit < self.n and not (sym & bit):
            count -= self.table[sym + bit]
            bit <<= 1

        return count

    def pick(self, draw: int) -> int:
        """
        累積重みが draw 以下となる最大のシンボルを返します。

        draw を [0, total) の一様乱数にすれば、
        重みに比例した確率でシンボルが選ばれます。
        """
        assert 0 <= draw < self.table[0]

        bit = self._top_bit
        sym = 0
        top = self.table[0]

        while bit > 0:
            if sym + bit < self.n:
                if draw >= top - self.table[sym + bit]:
                    sym += bit
                else:
                    top -= self.table[sym + bit]
            bit >>= 1

        return sym
