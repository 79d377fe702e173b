"""
盤面の正規化・結果構築・solve_board のテスト
"""

import random

import numpy as np
import pandas as pd
import pytest

from fourmap import solve_board
from fourmap.generation.assembler import assemble_puzzle
from fourmap.grid.parser import normalize_label, normalize_region_grid
from fourmap.postprocess.render_result import apply_colouring_to_grid
from fourmap.types import BLANK, Difficulty, GameParams


def test_blocks_of_equal_labels_become_regions():
    df = pd.DataFrame([
        ["a", "a", "b"],
        ["c", "a", "b"],
    ])
    assert normalize_region_grid(df).tolist() == [[0, 0, 1], [2, 0, 1]]


def test_disconnected_labels_are_separate_regions():
    df = pd.DataFrame([["x", "y", "x"]])
    assert normalize_region_grid(df).tolist() == [[0, 1, 2]]


def test_numeric_labels_normalised():
    assert normalize_label(3) == normalize_label("3") == normalize_label(3.0) == "3"
    assert normalize_label(" 07 ") == "7"
    assert normalize_label(float("nan")) == ""

    df = pd.DataFrame([[1, "1"], [1.0, 2]])
    assert normalize_region_grid(df).tolist() == [[0, 0], [0, 1]]


def test_blank_or_empty_board_rejected():
    with pytest.raises(ValueError):
        normalize_region_grid(pd.DataFrame([["a", None]]))
    with pytest.raises(ValueError):
        normalize_region_grid(pd.DataFrame())


def test_apply_colouring_to_grid():
    region_map = np.array([[0, 0, 1], [2, 1, 1]])
    grid = apply_colouring_to_grid(region_map, [3, BLANK, 0])
    assert grid.tolist() == [[3, 3, -1], [0, -1, -1]]


def test_solve_board_on_generated_puzzle():
    puzzle = assemble_puzzle(GameParams(6, 6, 10, Difficulty.NORMAL), random.Random(8))
    df = pd.DataFrame(puzzle.region_map).astype(str)

    result = solve_board(df, puzzle.clues)

    assert result["solve_status"] == "unique"
    expected = np.asarray(puzzle.solution)[puzzle.region_map].tolist()
    assert result["solved_board"] == expected
    assert result["shape"] == (6, 6)
    assert len(result["regions"]) == 10
    assert result["difficulty"] in {d.title for d in Difficulty}
    assert sum(r["clue"] for r in result["regions"]) == puzzle.clue_count


def test_solve_board_without_clues_is_ambiguous():
    df = pd.DataFrame([["a", "b"], ["c", "d"]])
    result = solve_board(df)

    assert result["solve_status"] == "ambiguous"
    assert result["solved_board"] == [[-1, -1], [-1, -1]]
    assert result["difficulty"] is None


def test_solve_board_checks_clue_count():
    df = pd.DataFrame([["a", "b"]])
    with pytest.raises(ValueError):
        solve_board(df, [0])
