from __future__ import annotations

import pytest

from farkle.game.combos import Combo, possible_combos, triple_points
from farkle.game.patterns import SixDicePatterns, any_scoring_pattern, six_dice_patterns


def _labels(counts) -> list[str]:
    return [c.label for c in possible_combos(counts)]


@pytest.mark.unit
@pytest.mark.parametrize(
    "counts, labels",
    [
        ((0, 0, 0, 0, 0, 0), []),
        ((0, 1, 1, 1, 0, 0), []),
        ((1, 1, 1, 1, 1, 1), ["Straight 1-6", "Single 1", "Single 5"]),
        ((2, 2, 2, 0, 0, 0), ["Three pairs", "Single 1"]),
        ((0, 0, 0, 0, 4, 0), ["Triple of 5", "Four of 5", "Single 5"]),
        (
            (0, 4, 0, 0, 2, 0),
            ["Four of a kind and a pair", "Triple of 2", "Four of 2", "Single 5"],
        ),
        (
            (3, 0, 0, 0, 3, 0),
            ["Two triples", "Triple of 1", "Triple of 5", "Single 1", "Single 5"],
        ),
        (
            (0, 0, 6, 0, 0, 0),
            ["Triple of 3", "Four of 3", "Five of 3", "Six of 3"],
        ),
    ],
)
def test_possible_combos_order_and_overlap(counts, labels):
    assert _labels(counts) == labels


@pytest.mark.unit
def test_six_dice_groups_consume_whole_roll():
    counts = (0, 2, 0, 2, 0, 2)
    (combo,) = possible_combos(counts)
    assert combo == Combo("Three pairs", counts, 1500)


@pytest.mark.unit
def test_every_combo_fits_its_counts():
    counts = (3, 0, 0, 0, 3, 0)
    for combo in possible_combos(counts):
        assert combo.points > 0
        assert all(need <= have for need, have in zip(combo.use, counts))


@pytest.mark.unit
def test_three_pairs_needs_exactly_six_dice():
    # two pairs only, and a fourth face breaks the pattern
    assert "Three pairs" not in _labels((2, 2, 0, 0, 0, 0))
    assert "Three pairs" not in _labels((2, 2, 1, 0, 0, 1))


@pytest.mark.unit
@pytest.mark.parametrize(
    "face, points",
    [(1, 1000), (2, 200), (3, 300), (4, 400), (5, 500), (6, 600)],
)
def test_triple_points(face, points):
    assert triple_points(face) == points


@pytest.mark.unit
@pytest.mark.parametrize(
    "counts, expected",
    [
        ((1, 1, 1, 1, 1, 1), SixDicePatterns(True, False, False, False)),
        ((2, 0, 2, 0, 0, 2), SixDicePatterns(False, True, False, False)),
        ((0, 0, 4, 2, 0, 0), SixDicePatterns(False, False, True, False)),
        ((0, 3, 0, 0, 0, 3), SixDicePatterns(False, False, False, True)),
        ((0, 2, 2, 0, 0, 0), SixDicePatterns(False, False, False, False)),
        ((3, 0, 0, 0, 0, 3), SixDicePatterns(False, False, False, True)),
    ],
)
def test_six_dice_patterns(counts, expected):
    assert six_dice_patterns(counts) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "counts, expected",
    [
        ((0, 1, 1, 1, 0, 1), False),
        ((0, 0, 0, 0, 0, 0), False),
        ((0, 2, 2, 0, 0, 2), True),
        ((0, 0, 0, 3, 0, 0), True),
        ((0, 0, 0, 0, 1, 0), True),
    ],
)
def test_any_scoring_pattern(counts, expected):
    assert any_scoring_pattern(counts) is expected
