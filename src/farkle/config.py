# src/farkle/config.py
"""Configuration schemas and helpers for Farkle games.

Defines dataclasses describing table rules and the automated watch mode, and
includes utilities for loading YAML-based application configs and applying
``section.option=value`` overrides from the command line.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field, is_dataclass
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]

from farkle.utils.yaml_helpers import expand_dotted_keys

# ─────────────────────────────────────────────────────────────────────────────
# Dataclasses (schema)
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class GameConfig:
    """Table rules for a two-player game."""

    victory_score: int = 2000
    min_victory_score: int = 100
    max_victory_score: int = 100_000
    player_names: list[str] = field(default_factory=lambda: ["Player 1", "Player 2"])
    seed: int | None = None

    def resolve_victory_score(self, requested: int | None) -> int:
        """Return ``requested`` if it lies within bounds, else the default."""
        if requested is None:
            return self.victory_score
        if requested < self.min_victory_score or requested > self.max_victory_score:
            return self.victory_score
        return requested


@dataclass
class WatchConfig:
    """Banking policy for the bots in ``farkle watch``."""

    bank_threshold: int = 300
    min_dice_to_roll: int = 3
    max_turns: int = 200


@dataclass
class AppConfig:
    """Application-wide configuration container."""

    game: GameConfig = field(default_factory=GameConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)


# ─────────────────────────────────────────────────────────────────────────────
# Loader (one or more YAML overlays; dotted keys allowed)
# ─────────────────────────────────────────────────────────────────────────────


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``overlay`` onto ``base`` and return a new mapping."""
    result: dict[str, Any] = dict(base)
    for key, val in overlay.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(val, Mapping):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _annotation_contains(annotation: Any, target: type) -> bool:
    """Recursively inspect type annotations for the presence of ``target``."""
    if annotation is None:
        return False
    if annotation is target:
        return True
    origin = get_origin(annotation)
    if origin is None:
        return False
    if origin is target:
        return True
    return any(_annotation_contains(arg, target) for arg in get_args(annotation))


def _build(cls, section: Mapping[str, Any]) -> Any:
    """Instantiate a dataclass ``cls`` from a mapping of attributes."""
    obj = cls()
    type_hints = get_type_hints(cls)
    for f in dataclasses.fields(cls):
        if f.name not in section:
            continue
        val = section[f.name]
        annotation = type_hints.get(f.name)
        if annotation is not None and is_dataclass(annotation) and isinstance(val, Mapping):
            val = _build(annotation, val)
        setattr(obj, f.name, val)
    return obj


def load_app_config(*overlays: Path) -> AppConfig:
    """Deterministically merge one or more YAML overlays into an :class:`AppConfig`.

    Files are read in the order provided, dotted keys are expanded, and later
    overlays always win.
    """
    data: dict[str, Any] = {}
    for path in overlays:
        with path.open("r", encoding="utf-8") as fh:
            overlay = yaml.safe_load(fh) or {}
        if not isinstance(overlay, Mapping):
            raise TypeError(f"Config file {path} must contain a mapping")
        expanded = expand_dotted_keys(overlay)
        data = _deep_merge(data, expanded)

    # an empty section header (``game:``) loads as None
    for name in ("game", "watch"):
        if name in data and not data[name]:
            data[name] = {}

    # Light compatibility with the server's flat key names
    if "game" in data:
        game_section = data["game"]
        if "default_victory_score" in game_section and "victory_score" not in game_section:
            game_section["victory_score"] = game_section.pop("default_victory_score")

    return AppConfig(
        game=_build(GameConfig, data.get("game", {})),
        watch=_build(WatchConfig, data.get("watch", {})),
    )


def _coerce(value: str, current: Any, annotation: Any | None = None) -> Any:
    """Coerce ``value`` to the type of ``current``."""
    if isinstance(current, bool) or _annotation_contains(annotation, bool):
        val_lower = value.lower()
        if val_lower in {"1", "true", "yes", "on"}:
            return True
        if val_lower in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"Cannot parse boolean value from {value!r}")
    if isinstance(current, list) or _annotation_contains(annotation, list):
        return [part.strip() for part in value.split(",")]
    if isinstance(current, int) and not isinstance(current, bool):
        return int(value)
    if (
        annotation is not None
        and _annotation_contains(annotation, int)
        and not _annotation_contains(annotation, bool)
    ):
        if value.lower() in {"none", "null", ""}:
            return None
        return int(value)
    return value


def apply_dot_overrides(cfg: AppConfig, pairs: list[str]) -> AppConfig:
    """Apply ``section.option=value`` overrides to *cfg*."""
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid override {pair!r}")
        key, raw = pair.split("=", 1)
        if "." not in key:
            raise ValueError(f"Invalid override {pair!r}")
        section_name, option = key.split(".", 1)
        section = getattr(cfg, section_name)
        if not hasattr(section, option):
            raise AttributeError(f"Unknown option {option!r} in section {section_name!r}")
        current = getattr(section, option)
        type_hints = get_type_hints(type(section))
        annotation = type_hints.get(option)
        new_value = _coerce(raw, current, annotation)
        setattr(section, option, new_value)
    return cfg


__all__ = [
    "GameConfig",
    "WatchConfig",
    "AppConfig",
    "load_app_config",
    "apply_dot_overrides",
]
