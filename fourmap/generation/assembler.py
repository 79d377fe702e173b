# -*- coding: utf-8 -*-
"""
問題（ヒント付きの盤面）を組み立てるモジュールです。

流れ
----
1. 盤面を生成し、隣接グラフを作って 4 色で塗り分ける
2. 全領域をヒントにした状態から、ランダムな順にヒントを 1 つずつ外す
   - 外しても目標難易度で唯一解なら、外したままにする
   - そうでなければ元に戻す
   - ただし、その色の最後の 1 つのヒントは外さない
     （プレイヤーがどの色もドラッグ元として使えるように）
3. 出来上がった問題が
   - 目標難易度で唯一解になること
   - 最低難易度より 1 段階低い難易度では解けないこと（簡単すぎない）
   を確認する
4. 条件を満たさなければ作り直す。
   GENERATION_TRIES 回続けて失敗したら、最低難易度を 1 段階下げる。
   EASY より下まで下がったら、どんな問題でも採用する。
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..config import GENERATION_TRIES, MIN_REGIONS, NUM_COLOURS
from ..csp.search import solve
from ..graph.adjacency import AdjacencyGraph
from ..graph.fourcolour import four_colour
from ..grid.generator import generate_region_map
from ..logging_utils import get_logger
from ..types import BLANK, Colouring, Difficulty, GameParams, Puzzle

logger = get_logger()


def validate_params(params: GameParams) -> None:
    """
    パラメータが盤面として成立するかを確認します。

    成立しない場合は ValueError を送出します。
    """
    if params.w < 2 or params.h < 2:
        raise ValueError("Width and height must be at least two")
    if params.n < MIN_REGIONS:
        raise ValueError("Must have at least five regions")
    if params.n > params.w * params.h:
        raise ValueError("Too many regions to fit in grid")


def strip_clues(
    graph: AdjacencyGraph,
    solution: Colouring,
    difficulty: int,
    rng: random.Random,
) -> Colouring:
    """
    完成した塗り分けから、唯一解を保ったままヒントを減らします。

    Parameters
    ----------
    graph : AdjacencyGraph
        隣接グラフ。
    solution : list[int]
        完成した塗り分け。
    difficulty : int
        ヒントを外すたびに解かせる難易度。
    rng : random.Random
        ヒントを外す順番を決める乱数生成器。

    Returns
    -------
    list[int]
        残ったヒント（空欄は -1）。
    """
    clues = list(solution)
    colour_count = [0] * NUM_COLOURS
    for c in clues:
        colour_count[c] += 1

    order = list(range(graph.n))
    rng.shuffle(order)

    for region in order:
        colour = clues[region]
        if colour_count[colour] == 1:
            continue  # その色の最後のヒント

        clues[region] = BLANK
        result = solve(graph, clues, difficulty)
        if result.is_unique:
            colour_count[colour] -= 1
        else:
            clues[region] = colour

    return clues


def assemble_puzzle(params: GameParams, rng: random.Random) -> Puzzle:
    """
    パラメータに従って問題を 1 つ生成します。

    Parameters
    ----------
    params : GameParams
        盤面サイズ・領域数・目標難易度。
    rng : random.Random
        乱数生成器。同じシードなら同じ問題になります。

    Returns
    -------
    Puzzle
        生成された問題。
    """
    validate_params(params)

    w, h, n = params.w, params.h, params.n
    target = params.difficulty
    min_difficulty = int(target)
    tries = GENERATION_TRIES
    attempts = 0

    logger.info("Generating puzzle: %dx%d, n=%d, difficulty=%s", w, h, n, target.title)

    while True:
        attempts += 1

        region_map = generate_region_map(w, h, n, rng)
        graph = AdjacencyGraph.from_region_map(region_map, n)
        solution = four_colour(graph, rng)
        clues = strip_clues(graph, solution, target, rng)

        accepted, reason = _check_difficulty(graph, clues, target, min_difficulty)
        if accepted:
            break

        logger.debug("Attempt %d rejected: %s", attempts, reason)
        tries -= 1
        if tries <= 0 and min_difficulty >= Difficulty.EASY:
            min_difficulty -= 1
            tries = GENERATION_TRIES
            logger.warning(
                "No %s puzzle found in %d tries; lowering minimum difficulty to %s",
                _difficulty_label(min_difficulty + 1), GENERATION_TRIES,
                _difficulty_label(min_difficulty),
            )

    puzzle = Puzzle(
        params=params,
        region_map=region_map,
        graph=graph,
        solution=solution,
        clues=clues,
        min_difficulty=min_difficulty,
        attempts=attempts,
    )
    logger.info(
        "Puzzle generated after %d attempt(s): %d clues, %d edges",
        attempts, puzzle.clue_count, graph.edge_count,
    )
    return puzzle


def _check_difficulty(
    graph: AdjacencyGraph,
    clues: Colouring,
    target: Difficulty,
    min_difficulty: int,
) -> tuple[bool, Optional[str]]:
    """問題が採用条件を満たすか判定し、(採用可否, 不採用の理由) を返します。"""
    if not solve(graph, clues, target).is_unique:
        return False, "not uniquely solvable at target difficulty"

    # EASY より下まで下がっていれば、どんな問題でも採用
    if min_difficulty < Difficulty.EASY:
        return True, None

    if solve(graph, clues, min_difficulty - 1).is_unique:
        return False, "too easy"

    return True, None


def _difficulty_label(value: int) -> str:
    if value < Difficulty.EASY:
        return "any"
    return Difficulty(value).title


def generate(
    w: int,
    h: int,
    n: int,
    difficulty: Difficulty,
    rng: random.Random,
) -> tuple[AdjacencyGraph, List[int]]:
    """
    問題を生成し、(隣接グラフ, ヒント) を返します。

    盤面の形や解答も必要な場合は assemble_puzzle() を使ってください。
    """
    puzzle = assemble_puzzle(GameParams(w, h, n, Difficulty(difficulty)), rng)
    return puzzle.graph, puzzle.clues
