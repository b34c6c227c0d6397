# src/farkle/simulation/watch_game.py
"""
watch_game.py - run a *single* two-bot Farkle game with very chatty logging.

It
 • logs every dice throw,
 • logs every set-aside with its scoring breakdown,
 • logs every keep-rolling / bank decision, and
 • finishes with a tiny summary.

No game-logic is duplicated - the bots only drive the real
:class:`~farkle.game.engine.FarkleGame`.
"""

from __future__ import annotations

import logging
from typing import Any

from farkle.config import AppConfig, WatchConfig
from farkle.game.engine import FARKLE, HOT_DICE, FarkleGame, GameEvent
from farkle.game.scoring import best_selection
from farkle.utils.random import make_rng

LOGGER = logging.getLogger(__name__)


# ── 1.  Bot policy -----------------------------------------------------------
def should_keep_rolling(game: FarkleGame, cfg: WatchConfig) -> bool:
    """Decide whether the current player rolls again instead of banking.

    During the final round the chasing player never banks while still
    behind, since a lower total loses anyway.
    """
    player = game.players[game.current_player_index]
    if game.final_round_trigger_index is not None:
        leader = game.players[game.final_round_trigger_index]
        if player.total + game.turn_points <= leader.total:
            return True
    if game.turn_points >= cfg.bank_threshold:
        return False
    return game.remaining_dice >= cfg.min_dice_to_roll


def _log_events(events: list[GameEvent]) -> None:
    for event in events:
        if event.message:
            LOGGER.info("  %s: %s", event.kind, event.message, extra={"stage": "watch"})


def play_turn(game: FarkleGame, cfg: WatchConfig) -> list[GameEvent]:
    """Play one full turn for the current player and return its events."""
    player_index = game.current_player_index
    name = game.players[player_index].name
    history: list[GameEvent] = []

    while True:
        events = game.roll(player_index)
        history.extend(events)
        rolled = events[0].data["values"]
        LOGGER.info("%s rolls %s", name, rolled, extra={"stage": "watch"})
        if any(e.kind == FARKLE for e in events):
            _log_events(events)
            return history

        free = [i for i, d in enumerate(game.dice) if not d.held]
        pick = best_selection([game.dice[i].value for i in free])
        if pick is None:  # pragma: no cover - a non-Farkle roll always scores
            raise RuntimeError(f"No scoring selection in {rolled}")
        _, kept = pick
        for j in kept:
            game.toggle_select(player_index, free[j])
        events = game.set_aside(player_index)
        history.extend(events)
        taken = events[0].data
        LOGGER.info(
            "%s sets aside %s -> %d pts %s (turn=%d)",
            name,
            list(taken["move"]["values"]),
            taken["points"],
            [c["label"] for c in taken["breakdown"]],
            game.turn_points,
            extra={"stage": "watch"},
        )
        _log_events(events)

        if any(e.kind == HOT_DICE for e in events):
            continue
        keep = should_keep_rolling(game, cfg)
        LOGGER.info(
            "%s decide(): turn=%-4d dice_left=%d  →  %s",
            name,
            game.turn_points,
            game.remaining_dice,
            "ROLL" if keep else "BANK",
            extra={"stage": "watch"},
        )
        if not keep:
            events = game.bank(player_index)
            history.extend(events)
            _log_events(events)
            return history


# ── 2.  High-level entry-point ----------------------------------------------
def watch_game(seed: int | None = None, cfg: AppConfig | None = None) -> dict[str, Any]:
    """Run a single bot-versus-bot game with very verbose output.

    Parameters
    ----------
    seed:
        Optional seed forwarded to :func:`farkle.utils.random.make_rng`;
        falls back to ``cfg.game.seed``.
    cfg:
        Table rules and bot policy, defaults to :class:`AppConfig`.

    Returns
    -------
    dict
        The final :meth:`FarkleGame.snapshot`.
    """
    cfg = cfg or AppConfig()
    rng = make_rng(seed if seed is not None else cfg.game.seed)
    game = FarkleGame(rng=rng, config=cfg.game)
    LOGGER.info(
        "%s vs %s, playing to %d",
        game.players[0].name,
        game.players[1].name,
        game.victory_score,
        extra={"stage": "watch"},
    )

    turns = 0
    while not game.is_finished and turns < cfg.watch.max_turns:
        turns += 1
        play_turn(game, cfg.watch)

    snapshot = game.snapshot()
    if not game.is_finished:
        LOGGER.warning(
            "Stopped after %d turns without a winner",
            turns,
            extra={"stage": "watch"},
        )
        return snapshot

    winner = game.players[game.winner_index]  # type: ignore[index]
    LOGGER.info("===== final result =====", extra={"stage": "watch"})
    LOGGER.info(
        "Winner: %s  score=%d  turns=%d",
        winner.name,
        winner.total,
        turns,
        extra={"stage": "watch"},
    )
    return snapshot


if __name__ == "__main__":
    # run:  python -m farkle.simulation.watch_game
    watch_game()
