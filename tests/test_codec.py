"""
問題記述・パラメータ文字列のテスト
"""

import random

import numpy as np
import pytest

from fourmap.codec.description import (
    decode_clues,
    decode_description,
    decode_edges,
    encode_clues,
    encode_description,
    encode_edges,
)
from fourmap.codec.params import (
    decode_params,
    default_params,
    encode_params,
    preset_params,
    validate_params,
)
from fourmap.generation.assembler import assemble_puzzle
from fourmap.types import BLANK, Difficulty, GameParams


def test_two_by_two_description():
    region_map = np.array([[0, 0], [1, 1]])
    assert encode_description(region_map, [0, BLANK]) == "abb,0a"

    decoded_map, clues = decode_description(2, 2, 2, "abb,0a")
    assert decoded_map.tolist() == [[0, 0], [1, 1]]
    assert clues == [0, BLANK]


def test_generated_puzzle_survives_description():
    puzzle = assemble_puzzle(GameParams(8, 8, 16, Difficulty.EASY), random.Random(3))
    desc = encode_description(puzzle.region_map, puzzle.clues)

    region_map, clues = decode_description(8, 8, 16, desc)
    assert np.array_equal(region_map, puzzle.region_map)
    assert clues == puzzle.clues


def test_long_runs_use_z():
    single = np.zeros((8, 8), dtype=int)
    edges = encode_edges(single)
    assert edges.startswith("zzzz")
    assert decode_edges(8, 8, 1, edges).tolist() == single.tolist()

    assert encode_clues([BLANK] * 30) == "zd"
    assert decode_clues(30, "zd") == [BLANK] * 30
    assert encode_clues([1] + [BLANK] * 26 + [2]) == "1z2"


@pytest.mark.parametrize(
    "desc, message",
    [
        ("ab!,0a", "Unexpected character in edge list"),
        ("abbb,0a", "Too much data in edge list"),
        ("ab,0a", "Too little data in edge list"),
        ("e,0a", "Edge list defines the wrong number of regions"),
        ("abb", "Expected comma before clue list"),
        ("abb,0A", "Unexpected character in clue list"),
        ("abb,4a", "Unexpected character in clue list"),
        ("abb,0", "Too little data in clue list"),
        ("abb,0ab", "Too much data in clue list"),
    ],
)
def test_malformed_descriptions(desc, message):
    with pytest.raises(ValueError, match=message):
        decode_description(2, 2, 2, desc)


@pytest.mark.parametrize(
    "string, expected",
    [
        ("12x12n32dn", GameParams(12, 12, 32, Difficulty.NORMAL)),
        ("8x8n16de", GameParams(8, 8, 16, Difficulty.EASY)),
        ("16x16n64dh", GameParams(16, 16, 64, Difficulty.HARD)),
        ("8x8n16du", GameParams(8, 8, 16, Difficulty.RECURSE)),
        ("8", GameParams(8, 8, 8, Difficulty.NORMAL)),
        ("10x6", GameParams(10, 6, 7, Difficulty.NORMAL)),
        ("8x8n16dq", GameParams(8, 8, 16, Difficulty.NORMAL)),
    ],
)
def test_decode_params(string, expected):
    assert decode_params(string) == expected


def test_encode_params():
    params = GameParams(8, 8, 16, Difficulty.HARD)
    assert encode_params(params) == "8x8n16dh"
    assert encode_params(params, full=False) == "8x8n16"
    assert decode_params(encode_params(params)) == params


def test_defaults_and_presets():
    assert default_params() == GameParams(12, 12, 32, Difficulty.NORMAL)

    presets = preset_params()
    assert len(presets) == 7
    for params in presets:
        validate_params(params)
    assert GameParams(16, 16, 64, Difficulty.HARD) in presets
