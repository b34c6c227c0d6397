# src/farkle/game/patterns.py  – Numba-ready pattern kernels
"""Detect the six-dice scoring patterns from face counts.

The straight, three pairs, four-of-a-kind-plus-pair and two triples patterns
are shared by :mod:`farkle.game.combos` (which turns them into scoring
groups) and :func:`farkle.game.scoring.has_any_scoring_option` (which only
needs to know that one of them matched). All kernels work on a six-entry
count array where index 0 holds the number of ones.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

import numba as nb
import numpy as np

from farkle.utils.types import NUM_DICE, Int64Array1D, SixFaceCounts

# ---------------------------------------------------------------------------
# 0.  Low-level helpers  (all *nopython*-safe)
# ---------------------------------------------------------------------------


@nb.njit(cache=True)
def _straight(ctr: Int64Array1D) -> bool:
    """Return True when every face from one to six is present."""
    return bool(np.all(ctr >= 1))


@nb.njit(cache=True)
def _three_pairs(ctr: Int64Array1D) -> bool:
    """Detect exactly three different pairs and nothing else.

    Args:
        ctr: Array of counts for faces one through six.
    """
    pairs = (ctr == 2).sum()
    nonzero = (ctr != 0).sum()
    return pairs == 3 and nonzero == 3


@nb.njit(cache=True)
def _four_kind_plus_pair(ctr: Int64Array1D) -> bool:
    """Check for four of a kind together with a pair of another face."""
    return (ctr == 4).sum() == 1 and (ctr == 2).sum() == 1


@nb.njit(cache=True)
def _two_triplets(ctr: Int64Array1D) -> bool:
    """Detect two distinct three-of-a-kind groups."""
    return (ctr == 3).sum() == 2


# ---------------------------------------------------------------------------
# 1.  Pattern evaluators (Numba core)
# ---------------------------------------------------------------------------


@nb.njit(cache=True)
def _six_dice_patterns_nb(
    c1: int,
    c2: int,
    c3: int,
    c4: int,
    c5: int,
    c6: int,
) -> Tuple[bool, bool, bool, bool]:
    """Evaluate every six-dice pattern purely within Numba.

    Args:
        c1, c2, c3, c4, c5, c6: Number of dice showing each face value
            from 1 through 6.

    Returns:
        (straight, three_pairs, four_and_pair, two_triples). The last three
        only ever match when exactly six dice are counted.
    """
    ctr = np.array([c1, c2, c3, c4, c5, c6], dtype=np.int64)
    straight = _straight(ctr)
    if ctr.sum() != NUM_DICE:
        return straight, False, False, False
    return straight, _three_pairs(ctr), _four_kind_plus_pair(ctr), _two_triplets(ctr)


@nb.njit(cache=True)
def _has_scoring_option_nb(
    c1: int,
    c2: int,
    c3: int,
    c4: int,
    c5: int,
    c6: int,
) -> bool:
    """Return True if at least one scoring group can be formed.

    Loose ones and fives always score, as does any face seen three or more
    times. The six-dice patterns are only consulted for a full roll.
    """
    if c1 > 0 or c5 > 0:
        return True
    ctr = np.array([c1, c2, c3, c4, c5, c6], dtype=np.int64)
    if np.any(ctr >= 3):
        return True
    if ctr.sum() != NUM_DICE:
        return False
    return _straight(ctr) or _three_pairs(ctr) or _four_kind_plus_pair(ctr) or _two_triplets(ctr)


# ---------------------------------------------------------------------------
# 2.  Thin Python shims (hashable → JIT core)
# ---------------------------------------------------------------------------


class SixDicePatterns(NamedTuple):
    """Which of the six-dice patterns a set of counts matches."""

    straight: bool
    three_pairs: bool
    four_and_pair: bool
    two_triples: bool


def six_dice_patterns(counts: SixFaceCounts) -> SixDicePatterns:
    """Evaluate the six-dice patterns for a counts tuple.

    Args:
        counts: A 6-tuple giving the number of dice showing each face.

    Returns:
        A :class:`SixDicePatterns` with one flag per pattern.
    """
    return SixDicePatterns(*(bool(flag) for flag in _six_dice_patterns_nb(*counts)))


def any_scoring_pattern(counts: SixFaceCounts) -> bool:
    """Return True if ``counts`` contains at least one scoring group."""
    return bool(_has_scoring_option_nb(*counts))


__all__ = ["SixDicePatterns", "six_dice_patterns", "any_scoring_pattern"]
