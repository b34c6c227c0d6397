# src/farkle/game/scoring.py
"""Score a set of dice the player wants to set aside, and detect busts.

:func:`score_selection` finds the highest-scoring way to split *every* die of
a selection into scoring groups from :mod:`farkle.game.combos`. A selection
that leaves any die unused is rejected outright. :func:`has_any_scoring_option`
is the much cheaper question asked right after a roll: can the player score
anything at all, or is this a Farkle?

Nothing in this module keeps state between calls. The search memo lives in
the frame of :func:`best_score_using_all` and is dropped when it returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

import numba as nb
import numpy as np

from farkle.game.combos import Combo, possible_combos
from farkle.game.patterns import any_scoring_pattern
from farkle.utils.types import NUM_DICE, SixFaceCounts

LOGGER = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# 0.  Result type
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """Outcome of scoring a selection.

    Attributes
    ----------
    valid
        True only when every die was consumed by some group.
    points
        Sum of the breakdown's points; always 0 when ``valid`` is False.
    breakdown
        Groups in the order the search discovered them.
    """

    valid: bool
    points: int = 0
    breakdown: tuple[Combo, ...] = field(default=())

    @classmethod
    def invalid(cls) -> ScoreResult:
        return cls(valid=False, points=0, breakdown=())

    def as_dict(self) -> dict[str, Any]:
        """Return plain builtins, with ``use`` keyed by the faces consumed."""
        return {
            "valid": self.valid,
            "points": self.points,
            "breakdown": [
                {
                    "label": combo.label,
                    "points": combo.points,
                    "use": {face: n for face, n in enumerate(combo.use, 1) if n},
                }
                for combo in self.breakdown
            ],
        }


# --------------------------------------------------------------------------- #
# 1.  Tiny helpers – all immutable / hash-friendly
# --------------------------------------------------------------------------- #
@nb.njit(cache=True)
def _faces_to_counts_nb(faces: np.ndarray) -> SixFaceCounts:
    """Count occurrences of each face value.

    Inputs
    ------
    faces (np.ndarray):
        1-D array of dice faces.

    Returns
    -------
    SixFaceCounts:
        Tuple of counts for faces one through six.
    """
    out = np.zeros(6, dtype=np.int64)
    for v in faces:
        out[v - 1] += 1
    return (int(out[0]), int(out[1]), int(out[2]), int(out[3]), int(out[4]), int(out[5]))


def faces_to_counts_tuple(faces: Sequence[int]) -> SixFaceCounts:
    """Convert a sequence of faces to a counts tuple.

    Inputs
    ------
    faces (Sequence[int]):
        Iterable of dice faces.

    Returns
    -------
    SixFaceCounts:
        Six-element tuple of counts for faces one through six.

    Raises
    ------
    ValueError:
        If any face value is outside the ``1``–``6`` range.
    """
    if not all(1 <= f <= 6 for f in faces):
        raise ValueError("dice faces must be between 1 and 6")
    return _faces_to_counts_nb(np.asarray(faces, dtype=np.int64))


def _fits(use: SixFaceCounts, state: SixFaceCounts) -> bool:
    return all(need <= have for need, have in zip(use, state))


def _subtract(state: SixFaceCounts, use: SixFaceCounts) -> SixFaceCounts:
    return (
        state[0] - use[0],
        state[1] - use[1],
        state[2] - use[2],
        state[3] - use[3],
        state[4] - use[4],
        state[5] - use[5],
    )


# --------------------------------------------------------------------------- #
# 2.  Full-decomposition search (memo scoped to one call)
# --------------------------------------------------------------------------- #
def best_score_using_all(counts: SixFaceCounts) -> ScoreResult:
    """Find the best split of ``counts`` into scoring groups.

    Every group offered by :func:`possible_combos` is tried at every depth,
    each branch subtracting its own group before recursing, so a die is never
    spent twice. Of the decompositions that use up every die the highest
    total wins; on a tie the first one found is kept.

    Inputs
    ------
    counts (SixFaceCounts):
        Counts for faces one through six.

    Returns
    -------
    ScoreResult:
        The best full decomposition, or an invalid result when some die can
        never be consumed.
    """
    memo: dict[SixFaceCounts, ScoreResult] = {}

    def _best(state: SixFaceCounts) -> ScoreResult:
        cached = memo.get(state)
        if cached is not None:
            return cached

        if not any(state):
            result = ScoreResult(valid=True, points=0, breakdown=())
            memo[state] = result
            return result

        best = ScoreResult.invalid()
        for combo in possible_combos(state):
            if not _fits(combo.use, state):
                continue
            sub = _best(_subtract(state, combo.use))
            if not sub.valid:
                continue
            total = combo.points + sub.points
            if not best.valid or total > best.points:
                best = ScoreResult(valid=True, points=total, breakdown=(combo, *sub.breakdown))

        memo[state] = best
        return best

    result = _best(tuple(counts))  # type: ignore[arg-type]
    LOGGER.debug(
        "Scored counts",
        extra={
            "stage": "scoring",
            "counts": tuple(counts),
            "valid": result.valid,
            "points": result.points,
            "states": len(memo),
        },
    )
    return result


# --------------------------------------------------------------------------- #
# 3.  High-level public API
# --------------------------------------------------------------------------- #
def score_selection(values: Sequence[int]) -> ScoreResult:
    """Score the dice a player is trying to set aside.

    Inputs
    ------
    values (Sequence[int]):
        Up to six faces, each between 1 and 6.

    Returns
    -------
    ScoreResult:
        The best full decomposition. Empty selections, selections with a die
        that cannot score and zero-point selections all give
        :meth:`ScoreResult.invalid`.

    Raises
    ------
    ValueError:
        If more than six dice are given or a face is out of range.
    """
    if len(values) == 0:
        return ScoreResult.invalid()
    if len(values) > NUM_DICE:
        raise ValueError(f"at most {NUM_DICE} dice can be scored at once")
    counts = faces_to_counts_tuple(values)
    best = best_score_using_all(counts)
    if not best.valid or best.points <= 0:
        return ScoreResult.invalid()
    return best


def has_any_scoring_option(roll_values: Sequence[int]) -> bool:
    """Return True if the roll contains at least one scoring group.

    This only answers whether *something* scores. A roll that passes can
    still contain subsets that :func:`score_selection` rejects.

    Inputs
    ------
    roll_values (Sequence[int]):
        Faces of the dice just rolled.

    Returns
    -------
    bool:
        False means the roll is a Farkle.
    """
    counts = faces_to_counts_tuple(roll_values)
    return any_scoring_pattern(counts)


# --------------------------------------------------------------------------- #
# 4.  Selection helpers for automated players
# --------------------------------------------------------------------------- #
def scoring_selections(roll: Sequence[int]) -> list[tuple[int, tuple[int, ...]]]:
    """Return ``(points, kept_indices)`` for every subset that scores.

    Sorted high-to-low by points, then by the number of dice kept.
    """
    n = len(roll)
    out: list[tuple[int, tuple[int, ...]]] = []

    for mask in range(1, 1 << n):
        kept_idx = tuple(i for i in range(n) if mask & (1 << i))
        result = score_selection([roll[i] for i in kept_idx])
        if result.valid:
            out.append((result.points, kept_idx))

    out.sort(key=lambda x: (x[0], len(x[1])), reverse=True)
    return out


def best_selection(roll: Sequence[int]) -> tuple[int, tuple[int, ...]] | None:
    """Return the highest-scoring subset of ``roll`` or ``None`` on a Farkle."""
    options = scoring_selections(roll)
    return options[0] if options else None


__all__ = [
    "ScoreResult",
    "faces_to_counts_tuple",
    "best_score_using_all",
    "score_selection",
    "has_any_scoring_option",
    "scoring_selections",
    "best_selection",
]
