"""
累積度数表のテスト
"""

import random

from fourmap.grid.freqtable import CumulativeFrequencyTable


def _filled_table(weights):
    table = CumulativeFrequencyTable(len(weights))
    for sym, w in enumerate(weights):
        table.add(sym, w)
    return table


def test_total_is_sum_of_weights():
    weights = [3, 0, 5, 1, 0, 0, 7, 2, 4]
    table = _filled_table(weights)
    assert table.total == sum(weights)


def test_cumulative_and_single_match_prefix_sums():
    weights = [3, 0, 5, 1, 0, 0, 7, 2, 4, 6, 1]
    table = _filled_table(weights)

    for sym in range(len(weights)):
        assert table.cumulative(sym) == sum(weights[:sym])
        assert table.single(sym) == weights[sym]
    assert table.cumulative(len(weights)) == sum(weights)


def test_pick_returns_symbol_owning_draw():
    weights = [2, 0, 3, 0, 0, 1, 4]
    table = _filled_table(weights)

    expected = []
    for sym, w in enumerate(weights):
        expected.extend([sym] * w)

    assert [table.pick(draw) for draw in range(table.total)] == expected


def test_updates_with_negative_counts():
    rng = random.Random(7)
    n = 37
    weights = [0] * n
    table = CumulativeFrequencyTable(n)

    for _ in range(500):
        sym = rng.randrange(n)
        delta = rng.randint(-weights[sym], 5)
        weights[sym] += delta
        table.add(sym, delta)

    assert table.total == sum(weights)
    for sym in range(n):
        assert table.single(sym) == weights[sym]
        assert table.cumulative(sym) == sum(weights[:sym])
    for draw in range(0, table.total, 3):
        sym = table.pick(draw)
        assert table.cumulative(sym) <= draw < table.cumulative(sym) + weights[sym]
