# src/farkle/cli/main.py
"""
Command line interface for the :mod:`farkle` package.

``farkle score`` and ``farkle check`` expose the scoring engine directly;
``farkle watch`` plays a logged bot-versus-bot game.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import yaml  # type: ignore[import-untyped]

from farkle.config import AppConfig, apply_dot_overrides, load_app_config
from farkle.game.scoring import has_any_scoring_option, score_selection
from farkle.simulation.watch_game import watch_game
from farkle.utils.logging import parse_level, setup_info_logging
from farkle.utils.types import NUM_DICE

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _face(raw: str) -> int:
    """argparse type for a single die face."""
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{raw!r} is not a die face") from exc
    if not 1 <= value <= 6:
        raise argparse.ArgumentTypeError(f"die faces must be between 1 and 6, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="farkle")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override configuration values",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Root logging level",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # score
    score_parser = sub.add_parser("score", help="Score dice set aside together")
    score_parser.add_argument("faces", type=_face, nargs="+", metavar="FACE")
    score_parser.add_argument("--json", action="store_true", help="Print JSON instead of YAML")

    # check
    check_parser = sub.add_parser("check", help="Tell whether a roll can score at all")
    check_parser.add_argument("faces", type=_face, nargs="+", metavar="FACE")

    # watch
    watch_parser = sub.add_parser("watch", help="Watch two bots play a game")
    watch_parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic play")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _load_config(args: argparse.Namespace) -> AppConfig:
    overlays: list[Path] = [args.config] if args.config is not None else []
    cfg = load_app_config(*overlays) if overlays else AppConfig()
    return apply_dot_overrides(cfg, list(args.overrides or []))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``farkle`` CLI dispatcher.

    Returns the process exit status: 0 on success, 1 when ``score`` rejects
    the selection or ``check`` finds a Farkle.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_info_logging()
    root_logger = logging.getLogger()
    root_logger.setLevel(parse_level(args.log_level))

    LOGGER.debug(
        "CLI arguments parsed",
        extra={
            "stage": "cli",
            "command": args.command,
            "config_path": str(args.config) if args.config is not None else None,
            "overrides": list(args.overrides or []),
        },
    )

    if args.command in ("score", "check") and len(args.faces) > NUM_DICE:
        parser.error(f"at most {NUM_DICE} dice, got {len(args.faces)}")

    if args.command == "score":
        result = score_selection(args.faces)
        payload = result.as_dict()
        if args.json:
            print(json.dumps(payload, indent=2))
        else:
            print(yaml.safe_dump(payload, sort_keys=False), end="")
        return 0 if result.valid else 1
    elif args.command == "check":
        ok = has_any_scoring_option(args.faces)
        print("scoring option" if ok else "farkle")
        return 0 if ok else 1
    elif args.command == "watch":
        cfg = _load_config(args)
        LOGGER.info(
            "Dispatching watch_game",
            extra={"stage": "cli", "command": "watch", "seed": args.seed},
        )
        watch_game(seed=args.seed, cfg=cfg)
        return 0
    else:  # pragma: no cover - argparse enforces valid choices
        parser.error(f"Unknown command {args.command}")
    return 2  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
