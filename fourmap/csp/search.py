# -*- coding: utf-8 -*-
"""
ソルバー本体（推論 + 場合分け探索）と難易度判定を行うモジュールです。

ざっくり流れ
------------
1. ヒントを置く（矛盾していれば INCONSISTENT）
2. 難易度で許されたテクニックを、何も進まなくなるまで適用する
3. 全領域が確定していれば UNIQUE
4. 場合分けが許されていなければ UNFINISHED
5. 候補が最も少ない領域を選び、候補色ごとに場合分けして 2〜5 を繰り返す
   - 解が 1 つも見つからなければ INCONSISTENT
   - ちょうど 1 つなら UNIQUE
   - 2 つ目が見つかった時点で AMBIGUOUS（残りの分岐は調べない）

場合分けは Python の再帰ではなく、分岐のスタック（_Branch のリスト）で行います。
領域数が数千になっても再帰の深さの上限に当たりません。
状態は同じ SolverContext の上で持ち、分岐ごとに mark() / undo() で巻き戻します。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import NUM_COLOURS
from ..graph.adjacency import AdjacencyGraph
from ..logging_utils import get_logger
from ..types import Contradiction, Difficulty, SolveResult, SolveStatus
from .context import SolverContext, bitcount, colours_in
from .propagation import deduce

logger = get_logger()


@dataclass
class _Branch:
    """
    場合分け 1 段ぶんの状態。

    Attributes
    ----------
    region : int
        場合分けする領域。
    colours : list[int]
        まだ試していない候補色。
    mark : int
        この段に入った時点の変更ログの位置。
    """

    region: int
    colours: List[int]
    mark: int


def choose_branch_region(ctx: SolverContext) -> int:
    """
    場合分けする領域を選びます（MRV: 候補数が最少のもの）。

    候補数が同じなら番号の小さい領域を選びます。
    """
    best = -1
    best_count = NUM_COLOURS + 1
    for i in ctx.undecided():
        count = bitcount(ctx.possible[i])
        assert count > 1  # 1 なら singleton で確定しているはず
        if count < best_count:
            best = i
            best_count = count
    assert best >= 0
    return best


def _settle(ctx: SolverContext, difficulty: int) -> Optional[bool]:
    """推論を進めます。矛盾なら False、完成なら True、どちらでもなければ None。"""
    ctx.stats.max_depth = max(ctx.stats.max_depth, ctx.depth)
    try:
        deduce(ctx, difficulty)
    except Contradiction:
        return False
    if ctx.is_complete():
        return True
    return None


def _open_branch(ctx: SolverContext) -> _Branch:
    best = choose_branch_region(ctx)
    ctx.stats.case_splits += 1
    return _Branch(best, colours_in(ctx.possible[best]), ctx.mark())


def run_solver(ctx: SolverContext, difficulty: int) -> SolveResult:
    """
    ヒントを置き終えた ctx に対して、推論と場合分け探索を行います。

    戻り値の colouring は見つかった解です。
    呼び出し後の ctx は、最初の推論が止まった時点の状態になります。
    """
    settled = _settle(ctx, difficulty)
    if settled is False:
        return SolveResult.inconsistent(ctx.stats)
    if settled:
        return SolveResult.unique(ctx.colouring, ctx.stats)
    if difficulty < Difficulty.RECURSE:
        return SolveResult.unfinished(ctx.stats)

    found: Optional[tuple] = None
    stack: List[_Branch] = [_open_branch(ctx)]
    base = stack[0].mark

    while stack:
        branch = stack[-1]
        # 前の候補色で行った変更を取り消す
        ctx.undo(branch.mark)
        if not branch.colours:
            stack.pop()
            continue

        colour = branch.colours.pop(0)
        ctx.depth = len(stack)
        placed = ctx.place(branch.region, colour)
        assert placed

        settled = _settle(ctx, difficulty)
        if settled is None:
            stack.append(_open_branch(ctx))
        elif settled:
            if found is not None:
                ctx.undo(base)
                ctx.depth = 0
                return SolveResult.ambiguous(ctx.stats)
            found = tuple(ctx.colouring)

    ctx.depth = 0
    if found is None:
        return SolveResult.inconsistent(ctx.stats)
    return SolveResult.unique(found, ctx.stats)


def solve(
    graph: AdjacencyGraph,
    clues: Sequence[int],
    max_difficulty: int = Difficulty.RECURSE,
) -> SolveResult:
    """
    ヒント付きの盤面を解き、結果の種類を判定します。

    Parameters
    ----------
    graph : AdjacencyGraph
        隣接グラフ。
    clues : sequence of int
        各領域のヒントの色（空欄は -1）。変更されません。
    max_difficulty : int
        使ってよい推論の上限。Difficulty.EASY 未満なら推論を一切しません。

    Returns
    -------
    SolveResult
        INCONSISTENT / UNIQUE(colouring) / AMBIGUOUS / UNFINISHED
    """
    ctx = SolverContext(graph)
    if not ctx.place_clues(clues):
        return SolveResult.inconsistent(ctx.stats)

    result = run_solver(ctx, max_difficulty)
    logger.debug(
        "solve(difficulty=%s): %s, stats=%s",
        max_difficulty, result.status.value, result.stats,
    )
    return result


def grade(graph: AdjacencyGraph, clues: Sequence[int]) -> Optional[Difficulty]:
    """
    唯一解を導ける最も低い難易度を返します。

    どの難易度でも UNIQUE にならない（解なし・複数解）場合は None。
    """
    for difficulty in Difficulty:
        result = solve(graph, clues, difficulty)
        if result.is_unique:
            return difficulty
        if result.status in (SolveStatus.INCONSISTENT, SolveStatus.AMBIGUOUS):
            return None
    return None
