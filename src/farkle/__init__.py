# src/farkle/__init__.py
"""Farkle - scoring engine and two-player table engine.

The scoring core (:func:`score_selection`, :func:`has_any_scoring_option`)
is pure: every call builds its own search memo and nothing is cached between
calls.
"""

from __future__ import annotations

import tomllib
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _v
from pathlib import Path

# Path to the project's pyproject.toml for local version fallback
PYPROJECT_TOML = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

DIST_NAME = "farkle-scoring"

# --------------------------------------------------------------------------- #
# Lazily expose the "friendly" surface
# Numba kernels are compiled only when a scoring symbol is first accessed,
# keeping ``import farkle`` cheap for config-only users.
# --------------------------------------------------------------------------- #

__all__ = [  # loads lazily, that's why reportUnsupportedDunderAll is triggered
    "Combo",  # pyright: ignore[reportUnsupportedDunderAll]
    "ScoreResult",  # pyright: ignore[reportUnsupportedDunderAll]
    "score_selection",  # pyright: ignore[reportUnsupportedDunderAll]
    "has_any_scoring_option",  # pyright: ignore[reportUnsupportedDunderAll]
    "FarkleGame",  # pyright: ignore[reportUnsupportedDunderAll]
    "FarkleRuleError",  # pyright: ignore[reportUnsupportedDunderAll]
]

_LAZY_IMPORTS = {
    "Combo": "farkle.game.combos",
    "ScoreResult": "farkle.game.scoring",
    "score_selection": "farkle.game.scoring",
    "has_any_scoring_option": "farkle.game.scoring",
    "FarkleGame": "farkle.game.engine",
    "FarkleRuleError": "farkle.game.engine",
}


def __getattr__(name: str):  # pragma: no cover - simple dynamic loader
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(module_name)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def _read_version_from_toml() -> str:
    """Return the package version declared in ``pyproject.toml``.

    The file is expected to reside at the repository root three directories
    above this module.
    """
    with PYPROJECT_TOML.open("rb") as fh:
        data = tomllib.load(fh)
    return data["project"]["version"]


try:
    __version__ = _v(DIST_NAME)  # importlib.metadata
except PackageNotFoundError:
    __version__ = _read_version_from_toml()
