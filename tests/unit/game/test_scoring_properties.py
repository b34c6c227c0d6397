from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from farkle.game.scoring import (
    ScoreResult,
    faces_to_counts_tuple,
    has_any_scoring_option,
    score_selection,
)

rolls = st.lists(st.integers(min_value=1, max_value=6), min_size=1, max_size=6)


@pytest.mark.unit
@given(rolls)
def test_valid_result_uses_every_die_once(roll: list[int]) -> None:
    result = score_selection(roll)
    if not result.valid:
        assert result == ScoreResult.invalid()
        return
    assert result.points > 0
    assert sum(c.points for c in result.breakdown) == result.points
    used = tuple(sum(c.use[i] for c in result.breakdown) for i in range(6))
    assert used == faces_to_counts_tuple(roll)


@pytest.mark.unit
@given(rolls, st.randoms(use_true_random=False))
def test_score_selection_is_permutation_invariant(roll: list[int], rnd) -> None:
    shuffled = list(roll)
    rnd.shuffle(shuffled)
    assert score_selection(shuffled) == score_selection(roll)


@pytest.mark.unit
@given(rolls)
def test_valid_selection_implies_scoring_option(roll: list[int]) -> None:
    if score_selection(roll).valid:
        assert has_any_scoring_option(roll)


@pytest.mark.unit
@given(rolls)
def test_faces_to_counts_total_matches_roll_length(faces: list[int]) -> None:
    counts = faces_to_counts_tuple(faces)
    assert sum(counts) == len(faces)
