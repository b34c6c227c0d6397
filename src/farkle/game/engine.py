from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, List, Sequence

import numpy as np

from farkle.config import GameConfig
from farkle.game.scoring import has_any_scoring_option, score_selection
from farkle.utils.types import NUM_DICE

"""engine.py
============
Two-player table engine for interactive Farkle games.

High-level flow
---------------
* The current player calls FarkleGame.roll.  A fresh turn rolls six
  dice; later rolls only throw the dice that are not held.  If the new
  dice cannot score at all the turn is a *Farkle*: the turn points are
  lost and play passes on.
* FarkleGame.toggle_select and FarkleGame.set_aside move scoring
  dice out of play.  Every selected die has to take part in a scoring
  group.  Holding all six (*hot dice*) gives the player a fresh set.
* FarkleGame.bank adds the turn points to the player's total.  The
  first player to reach victory_score triggers the *final round*:
  the other player gets one last turn, then the higher total wins and a
  tie goes to the player who triggered it.

Illegal moves raise FarkleRuleError and leave the game untouched.
"""


__all__ = [
    "FarkleRuleError",
    "Die",
    "TurnMove",
    "GameEvent",
    "PlayerState",
    "FarkleGame",
]

LOGGER = logging.getLogger(__name__)

NUM_PLAYERS: int = 2

ERR_NOT_YOUR_TURN = "Not your turn"
ERR_GAME_FINISHED = "The game has ended"
ERR_INVALID_INDEX = "Invalid index"
ERR_ROLL_WITHOUT_SET_ASIDE = "You must set aside at least one scoring die before rolling again"
ERR_SELECT_HELD_DIE = "You cannot select a die that is already set aside"
ERR_ROLL_FIRST = "You must roll the dice first"
ERR_SELECT_BEFORE_SET_ASIDE = "You must select dice before setting aside"
ERR_SELECT_NOT_HELD = "Select dice that are not already set aside"
ERR_INVALID_SELECTION = "Invalid selection: all dice must score"
ERR_BANK_NO_POINTS = "You have no points to bank"
ERR_BANK_MUST_SET_ASIDE = "You must set aside at least one combination before banking"

# event kinds
ROLL_RESULT = "roll_result"
SET_ASIDE = "set_aside"
FARKLE = "farkle"
HOT_DICE = "hot_dice"
TURN_CHANGED = "turn_changed"
FINAL_ROUND = "final_round"
GAME_OVER = "game_over"


class FarkleRuleError(ValueError):
    """Raised when a move breaks the rules of the table."""


# ---------------------------------------------------------------------------
# Table state
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class Die:
    value: int
    held: bool = False


@dataclass(frozen=True, slots=True)
class TurnMove:
    """One successful set-aside within the current turn."""

    id: int
    values: tuple[int, ...]
    points: int


@dataclass(frozen=True, slots=True)
class GameEvent:
    """Something the table announces to both players.

    Attributes
    ----------
    kind
        One of ``roll_result``, ``set_aside``, ``farkle``, ``hot_dice``,
        ``turn_changed``, ``final_round`` or ``game_over``.
    message
        Human readable text for the event.
    data
        Event payload (dice, points, winner index, ...).
    """

    kind: str
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class PlayerState:
    name: str
    total: int = 0


class FarkleGame:
    """State machine for a single two-player game."""

    def __init__(
        self,
        player_names: Sequence[str] | None = None,
        *,
        victory_score: int | None = None,
        rng: np.random.Generator | None = None,
        config: GameConfig | None = None,
    ) -> None:
        """Create a new game.

        Inputs
        ------
        player_names
            Names in seat order; blanks fall back to ``Player N``.
        victory_score
            Score that triggers the final round.  Values outside the
            configured bounds fall back to the configured default.
        rng
            Source of dice faces; anything with a NumPy-style
            ``integers(low, high, size)`` method.
        config
            Table rules, defaults to :class:`GameConfig`.
        """
        self.config = config or GameConfig()
        names = list(player_names if player_names is not None else self.config.player_names)
        names += [""] * (NUM_PLAYERS - len(names))
        self.players: List[PlayerState] = [
            PlayerState(name=name or f"Player {i + 1}") for i, name in enumerate(names[:NUM_PLAYERS])
        ]
        self.victory_score: int = self.config.resolve_victory_score(victory_score)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.current_player_index: int = 0
        self.dice: List[Die] = []
        self.selected_indices: List[int] = []
        self.turn_points: int = 0
        self.turn_moves: List[TurnMove] = []
        self.has_set_aside_this_roll: bool = False
        self.final_round_trigger_index: int | None = None
        self.winner_index: int | None = None

    # ----------------------------- helpers -----------------------------
    @property
    def is_finished(self) -> bool:
        return self.winner_index is not None

    @property
    def remaining_dice(self) -> int:
        """Dice the current player would throw on the next roll."""
        if not self.dice:
            return NUM_DICE
        return sum(1 for d in self.dice if not d.held)

    def _check_turn(self, player_index: int) -> None:
        if self.is_finished:
            raise FarkleRuleError(ERR_GAME_FINISHED)
        if player_index != self.current_player_index:
            raise FarkleRuleError(ERR_NOT_YOUR_TURN)

    def _roll_faces(self, n: int) -> list[int]:
        return [int(v) for v in self.rng.integers(1, 7, size=n)]

    def _clear_turn(self) -> None:
        self.turn_points = 0
        self.turn_moves = []
        self.dice = []
        self.selected_indices = []
        self.has_set_aside_this_roll = False

    def _pass_turn(self) -> int:
        finished = self.current_player_index
        self.current_player_index = (self.current_player_index + 1) % NUM_PLAYERS
        return finished

    def _final_round_over(self, finished_index: int) -> bool:
        trigger = self.final_round_trigger_index
        return trigger is not None and finished_index != trigger

    def _finish(self) -> GameEvent:
        """Pick the winner once the final round is over."""
        assert self.final_round_trigger_index is not None
        t0, t1 = self.players[0].total, self.players[1].total
        if t1 > t0:
            winner = 1
        elif t0 == t1:
            winner = self.final_round_trigger_index
        else:
            winner = 0
        self.winner_index = winner
        self.turn_moves = []
        LOGGER.info(
            "Game over",
            extra={
                "stage": "engine",
                "winner": winner,
                "totals": [p.total for p in self.players],
            },
        )
        return GameEvent(GAME_OVER, "Game over", {"winner": winner})

    # ------------------------------ moves ------------------------------
    def roll(self, player_index: int) -> list[GameEvent]:
        """Throw the dice that are still in play.

        Returns
        -------
        list[GameEvent]
            ``roll_result`` followed, on a Farkle, by ``farkle`` and possibly
            ``game_over``.
        """
        self._check_turn(player_index)
        if self.dice and not self.has_set_aside_this_roll:
            raise FarkleRuleError(ERR_ROLL_WITHOUT_SET_ASIDE)

        if not self.dice:
            active = self._roll_faces(NUM_DICE)
            self.dice = [Die(value=v) for v in active]
        else:
            free = [d for d in self.dice if not d.held]
            active = self._roll_faces(len(free))
            for die, value in zip(free, active):
                die.value = value
        self.selected_indices = []
        self.has_set_aside_this_roll = False

        LOGGER.info(
            "Dice rolled",
            extra={"stage": "engine", "player": player_index, "values": active},
        )
        events = [
            GameEvent(
                ROLL_RESULT,
                data={"dice": [asdict(d) for d in self.dice], "values": list(active)},
            )
        ]

        # held dice never count towards a Farkle
        if has_any_scoring_option(active):
            return events

        LOGGER.info(
            "Farkle",
            extra={"stage": "engine", "player": player_index, "lost": self.turn_points},
        )
        self._clear_turn()
        finished = self._pass_turn()
        events.append(GameEvent(FARKLE, "Farkle: the turn's points are lost"))
        if self._final_round_over(finished):
            events.append(self._finish())
        return events

    def toggle_select(self, player_index: int, index: int) -> tuple[int, ...]:
        """Add or remove a die from the current selection.

        Returns
        -------
        tuple[int, ...]
            The selected indices after the toggle.
        """
        self._check_turn(player_index)
        if index < 0 or index >= len(self.dice):
            raise FarkleRuleError(ERR_INVALID_INDEX)
        if self.dice[index].held:
            raise FarkleRuleError(ERR_SELECT_HELD_DIE)

        if index in self.selected_indices:
            self.selected_indices.remove(index)
        else:
            self.selected_indices.append(index)
        return tuple(self.selected_indices)

    def set_aside(self, player_index: int) -> list[GameEvent]:
        """Score the selected dice and hold them for the rest of the turn."""
        self._check_turn(player_index)
        if not self.dice:
            raise FarkleRuleError(ERR_ROLL_FIRST)
        if not self.selected_indices:
            raise FarkleRuleError(ERR_SELECT_BEFORE_SET_ASIDE)

        picked = [
            idx for idx in self.selected_indices if 0 <= idx < len(self.dice) and not self.dice[idx].held
        ]
        if not picked:
            raise FarkleRuleError(ERR_SELECT_NOT_HELD)
        values = tuple(self.dice[idx].value for idx in picked)

        result = score_selection(values)
        if not result.valid:
            raise FarkleRuleError(ERR_INVALID_SELECTION)

        self.turn_points += result.points
        self.has_set_aside_this_roll = True
        move = TurnMove(id=len(self.turn_moves) + 1, values=values, points=result.points)
        self.turn_moves.append(move)
        for idx in picked:
            self.dice[idx].held = True
        self.selected_indices = []

        LOGGER.info(
            "Dice set aside",
            extra={
                "stage": "engine",
                "player": player_index,
                "values": list(values),
                "points": result.points,
                "turn_points": self.turn_points,
            },
        )
        events = [GameEvent(SET_ASIDE, data={"move": asdict(move), **result.as_dict()})]

        if all(d.held for d in self.dice):
            self.dice = []
            events.append(GameEvent(HOT_DICE, "Hot dice! Roll all six dice again"))
        return events

    def bank(self, player_index: int) -> list[GameEvent]:
        """Add the turn points to the player's total and pass the turn."""
        self._check_turn(player_index)
        if self.turn_points <= 0:
            raise FarkleRuleError(ERR_BANK_NO_POINTS)
        has_active_dice = any(not d.held for d in self.dice)
        if has_active_dice and not self.has_set_aside_this_roll:
            raise FarkleRuleError(ERR_BANK_MUST_SET_ASIDE)

        player = self.players[player_index]
        player.total += self.turn_points
        LOGGER.info(
            "Points banked",
            extra={
                "stage": "engine",
                "player": player_index,
                "banked": self.turn_points,
                "total": player.total,
            },
        )
        self._clear_turn()
        finished = self._pass_turn()

        if self.final_round_trigger_index is None and player.total >= self.victory_score:
            self.final_round_trigger_index = finished
            return [GameEvent(FINAL_ROUND, "Final round for the other player", {"trigger": finished})]

        if self._final_round_over(finished):
            return [self._finish()]

        next_name = self.players[self.current_player_index].name
        return [
            GameEvent(
                TURN_CHANGED,
                f"{next_name}'s turn",
                {"current_player_index": self.current_player_index},
            )
        ]

    # ----------------------------- reporting ----------------------------
    def snapshot(self) -> dict[str, Any]:
        """Return the full table state as plain builtins."""
        return {
            "players": [asdict(p) for p in self.players],
            "current_player_index": self.current_player_index,
            "dice": [asdict(d) for d in self.dice],
            "selected_indices": list(self.selected_indices),
            "remaining_dice": self.remaining_dice,
            "turn_points": self.turn_points,
            "turn_moves": [asdict(m) for m in self.turn_moves],
            "victory_score": self.victory_score,
            "final_round_trigger_index": self.final_round_trigger_index,
            "winner_index": self.winner_index,
            "status": "finished" if self.is_finished else "playing",
        }
