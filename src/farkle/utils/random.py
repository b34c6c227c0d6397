# src/farkle/utils/random.py
"""Random number generator helpers."""

from __future__ import annotations

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a :class:`numpy.random.Generator` seeded with *seed*."""

    return np.random.default_rng(seed)


__all__ = ["make_rng"]
