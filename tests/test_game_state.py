"""
局面と手の適用のテスト
"""

import random

import pytest

from fourmap.codec.description import encode_description
from fourmap.generation.assembler import assemble_puzzle
from fourmap.game.state import MapGameState
from fourmap.types import BLANK, Difficulty, GameParams

TWO = GameParams(2, 2, 2)


def _two_regions(clues="0a"):
    # 上段が領域 0、下段が領域 1
    return MapGameState.new(TWO, "abb," + clues)


def test_new_state_starts_from_clues():
    state = _two_regions()
    assert state.colouring == [0, BLANK]
    assert state.is_immutable(0) and not state.is_immutable(1)
    assert not state.completed and not state.cheated


def test_colouring_completes_the_puzzle():
    state = _two_regions()
    after = state.execute_move("1:1")

    assert after.colouring == [0, 1]
    assert after.completed
    assert after.conflicts() == []
    # 元の局面は変わらない
    assert state.colouring == [0, BLANK]


def test_same_colour_neighbours_conflict():
    state = _two_regions().execute_move("0:1")
    assert state.conflicts() == [(0, 1)]
    assert not state.completed


def test_completed_stays_set():
    state = _two_regions().execute_move("1:1").execute_move("C:1")
    assert state.colouring == [0, BLANK]
    assert state.completed


def test_pencil_marks():
    state = _two_regions()

    state = state.execute_move("p2:1;p3:1")
    assert state.pencil[1] == 0b1100
    assert state.pencil_colours(1) == [2, 3]

    state = state.execute_move("p2:1")
    assert state.pencil[1] == 0b1000

    state = state.execute_move("pC:1")
    assert state.pencil[1] == 0

    # 塗ると鉛筆書きは消える
    state = state.execute_move("p1:1;2:1")
    assert state.pencil[1] == 0


def test_mark_all_pencils_empty_regions():
    state = _two_regions().execute_move("M")
    assert state.pencil == [0, 0b1111]


@pytest.mark.parametrize("move", ["x", "5:1", "1:9", "1:", "p1:0", "1:0", ";", "1:1;;"])
def test_rejected_moves(move):
    with pytest.raises(ValueError):
        _two_regions().execute_move(move)


def test_cheat_flag():
    state = _two_regions().execute_move("S;1:1")
    assert state.cheated
    assert state.completed


def test_solve_move_reaches_solution():
    puzzle = assemble_puzzle(GameParams(6, 6, 10, Difficulty.NORMAL), random.Random(21))
    state = MapGameState.new(puzzle.params, encode_description(puzzle.region_map, puzzle.clues))

    move = state.solve_move()
    assert move.startswith("S")

    solved = state.execute_move(move)
    assert solved.colouring == puzzle.solution
    assert solved.completed and solved.cheated


def test_solve_move_skips_regions_already_correct():
    puzzle = assemble_puzzle(GameParams(6, 6, 10, Difficulty.EASY), random.Random(4))
    state = MapGameState.new(puzzle.params, encode_description(puzzle.region_map, puzzle.clues))

    blank = next(i for i, c in enumerate(puzzle.clues) if c == BLANK)
    state = state.execute_move(f"{puzzle.solution[blank]}:{blank}")

    assert f":{blank};" not in state.solve_move() + ";"


def test_solve_move_errors():
    with pytest.raises(ValueError, match="Unable to find a unique solution for this puzzle"):
        _two_regions().solve_move()
    with pytest.raises(ValueError, match="Puzzle is inconsistent"):
        _two_regions("00").solve_move()


def test_empty_move_is_a_no_op():
    state = _two_regions().execute_move("p2:1")
    after = state.execute_move("")

    assert after is not state
    assert after.colouring == state.colouring
    assert after.pencil == state.pencil


def test_trailing_separator_is_ignored():
    state = _two_regions().execute_move("1:1;")
    assert state.colouring == [0, 1]
    assert state.completed
