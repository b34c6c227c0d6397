# src/farkle/utils/__init__.py
"""Utility subpackage for Farkle.

Small helpers shared by the game engine, the configuration loader and the
command line, kept apart so that the scoring core stays free of side effects
like logging setup or file I/O.

The most commonly used helpers are re-exported here for convenience.
"""

from __future__ import annotations

from .logging import configure_logging, setup_info_logging, setup_warning_logging
from .random import make_rng

__all__ = [
    "configure_logging",
    "setup_info_logging",
    "setup_warning_logging",
    "make_rng",
]
