# src/farkle/game/combos.py
"""Enumerate the scoring groups available in a set of face counts.

House rules
-----------
=========================  ==========================  ======
Group                      Consumes                    Points
=========================  ==========================  ======
Straight 1-6               one of each face            1500
Three pairs                all six dice                1500
Four of a kind and a pair  all six dice                1500
Two triples                all six dice                2500
Triple of v                three of v                  1000 for ones, 100*v otherwise
Four / five / six of v     four / five / six of v      1000 / 2000 / 3000
Single 1                   one 1                       100
Single 5                   one 5                       50
=========================  ==========================  ======

Overlapping groups are all emitted: four fives yield ``Triple of 5``,
``Four of 5`` and ``Single 5``. Choosing between them is left to the
search in :mod:`farkle.game.scoring`.
"""

from __future__ import annotations

from typing import NamedTuple

from farkle.game.patterns import six_dice_patterns
from farkle.utils.types import EMPTY_COUNTS, NUM_FACES, SixFaceCounts

POINTS_SINGLE_ONE = 100
POINTS_SINGLE_FIVE = 50
POINTS_STRAIGHT = 1500
POINTS_THREE_PAIRS = 1500
POINTS_FOUR_AND_PAIR = 1500
POINTS_TWO_TRIPLES = 2500
# points for four, five and six of a kind, any face
POINTS_N_OF_A_KIND = {4: 1000, 5: 2000, 6: 3000}
_N_OF_A_KIND_WORDS = {4: "Four", 5: "Five", 6: "Six"}


class Combo(NamedTuple):
    """One scoring group: a label, the dice it consumes and its value."""

    label: str
    use: SixFaceCounts
    points: int


def triple_points(face: int) -> int:
    """Return the value of three dice showing ``face``."""
    return 1000 if face == 1 else face * 100


def _use_of(face: int, n: int) -> SixFaceCounts:
    """Counts tuple consuming ``n`` dice of ``face``."""
    use = list(EMPTY_COUNTS)
    use[face - 1] = n
    return (use[0], use[1], use[2], use[3], use[4], use[5])


def possible_combos(counts: SixFaceCounts) -> tuple[Combo, ...]:
    """List every scoring group that can be taken from ``counts``.

    The enumeration order is fixed (six-dice patterns, triples, larger sets,
    singles) because the search keeps the first of several equally good
    decompositions.

    Inputs
    ------
    counts (SixFaceCounts):
        Counts for faces one through six.

    Returns
    -------
    tuple[Combo, ...]:
        Groups whose ``use`` never exceeds ``counts``.
    """
    combos: list[Combo] = []
    patterns = six_dice_patterns(counts)

    if patterns.straight:
        combos.append(Combo("Straight 1-6", (1, 1, 1, 1, 1, 1), POINTS_STRAIGHT))
    # the remaining six-dice patterns swallow the whole roll
    if patterns.three_pairs:
        combos.append(Combo("Three pairs", tuple(counts), POINTS_THREE_PAIRS))
    if patterns.four_and_pair:
        combos.append(Combo("Four of a kind and a pair", tuple(counts), POINTS_FOUR_AND_PAIR))
    if patterns.two_triples:
        combos.append(Combo("Two triples", tuple(counts), POINTS_TWO_TRIPLES))

    for face in range(1, NUM_FACES + 1):
        if counts[face - 1] >= 3:
            combos.append(Combo(f"Triple of {face}", _use_of(face, 3), triple_points(face)))

    for face in range(1, NUM_FACES + 1):
        for n in (4, 5, 6):
            if counts[face - 1] >= n:
                label = f"{_N_OF_A_KIND_WORDS[n]} of {face}"
                combos.append(Combo(label, _use_of(face, n), POINTS_N_OF_A_KIND[n]))

    if counts[0] >= 1:
        combos.append(Combo("Single 1", _use_of(1, 1), POINTS_SINGLE_ONE))
    if counts[4] >= 1:
        combos.append(Combo("Single 5", _use_of(5, 1), POINTS_SINGLE_FIVE))

    return tuple(combos)


__all__ = ["Combo", "possible_combos", "triple_points"]
