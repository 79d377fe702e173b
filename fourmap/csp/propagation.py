# -*- coding: utf-8 -*-
"""
制約伝播（推論テクニック）を行うモジュールです。

難易度ごとに使えるテクニックが増えます。

1. singleton（EASY 以上）
   候補が 1 色だけになった領域をその色で確定し、
   隣接領域の候補からその色を除く。
2. pair exclusion（NORMAL 以上）
   隣り合う 2 領域 a, b の候補が同じ 2 色 {x, y} だけなら、
   a と b で x と y を 1 つずつ使うことになる。
   よって a と b の両方に隣接する領域は x も y も使えない。
3. forcing chain（HARD 以上）
   候補が 2 色の領域をたどる「連鎖」を使った推論。
   詳しくは apply_forcing_chains() を参照。

各関数は「候補を 1 つでも減らせたか」を bool で返します。
候補が空の領域を見つけたら Contradiction を送出します。
"""

from __future__ import annotations

from collections import deque
from typing import Dict

from ..config import NUM_COLOURS
from ..types import BLANK, Contradiction, Difficulty
from .context import SolverContext, bitcount


def apply_singletons(ctx: SolverContext) -> bool:
    """候補が 1 色だけの未確定領域を確定させます。"""
    done_something = False

    for i in range(ctx.n):
        if ctx.colouring[i] != BLANK:
            continue
        p = ctx.possible[i]
        if p == 0:
            raise Contradiction(f"region {i} has no possible colour")
        if p & (p - 1) == 0:
            colour = p.bit_length() - 1
            placed = ctx.place(i, colour)
            assert placed
            ctx.stats.singletons += 1
            done_something = True

    return done_something


def apply_pair_exclusion(ctx: SolverContext) -> bool:
    """
    同じ 2 色の候補を持つ隣接ペアの共通の隣接領域から、その 2 色を除きます。
    """
    graph = ctx.graph
    possible = ctx.possible
    done_something = False

    for a, b in graph.edges():
        if ctx.colouring[a] != BLANK or ctx.colouring[b] != BLANK:
            continue
        v = possible[a]
        if v != possible[b] or bitcount(v) != 2:
            continue

        for k in graph.neighbours(a):
            if k != b and graph.edge_exists(k, b) and possible[k] & v:
                ctx.restrict(k, v)
                ctx.stats.pair_eliminations += 1
                done_something = True

    return done_something


def apply_forcing_chains(ctx: SolverContext) -> bool:
    """
    フォーシングチェーンによる候補の削除を行います。

    候補がちょうど 2 色 {c, d} の未確定領域 v について、
    「v が c ではない（= d である）」と仮定して幅優先探索を行います。

    - 探索で訪れる領域はすべて「未確定・候補 2 色」で、
      直前の領域に強制される色を候補に含むものに限ります。
      すると、その領域は残りのもう 1 色に強制されます。
      （forced[k] は仮定のもとで k が取る色のビット）
    - 領域 j が仮定のもとで色 c に強制され、j の隣接領域 k が
      v にも隣接しているなら、k は c になれません。
        * v が c でなければ、j が c なので隣の k は c ではない
        * v が c なら、隣の k は c ではない
      どちらの場合でも k は c ではないので、k の候補から c を除けます。

    仮定が矛盾する（同じ領域が 2 通りに強制される）場合も、
    そのときは v = c が確定するだけなので結論は変わりません。
    """
    graph = ctx.graph
    possible = ctx.possible
    colouring = ctx.colouring
    done_something = False

    for v in range(ctx.n):
        if colouring[v] != BLANK or bitcount(possible[v]) != 2:
            continue

        for c in range(NUM_COLOURS):
            origc = 1 << c
            if not possible[v] & origc:
                continue

            forced: Dict[int, int] = {v: possible[v] & ~origc}
            queue = deque([v])

            while queue:
                j = queue.popleft()
                currc = forced[j]

                for k in graph.neighbours(j):
                    if (
                        k not in forced
                        and colouring[k] == BLANK
                        and bitcount(possible[k]) == 2
                        and possible[k] & currc
                    ):
                        forced[k] = possible[k] & ~currc
                        queue.append(k)

                    if (
                        currc == origc
                        and graph.edge_exists(k, v)
                        and possible[k] & origc
                    ):
                        ctx.restrict(k, origc)
                        ctx.stats.chain_eliminations += 1
                        done_something = True

    return done_something


def deduce(ctx: SolverContext, difficulty: int) -> None:
    """
    難易度 difficulty で使えるテクニックを、何も進まなくなるまで適用します。

    何か進んだら、必ず一番簡単なテクニックからやり直します。
    矛盾が見つかった場合は Contradiction がそのまま送出されます。
    """
    while difficulty >= Difficulty.EASY:
        if apply_singletons(ctx):
            continue
        if difficulty < Difficulty.NORMAL:
            break
        if apply_pair_exclusion(ctx):
            continue
        if difficulty < Difficulty.HARD:
            break
        if not apply_forcing_chains(ctx):
            break
