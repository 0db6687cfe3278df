"""GameController — the session boundary around one game.

Coordinates: GameState, MoveValidator, the opponent.
Emits events via simple callbacks so transports / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from chessbox.core.enums import Color, GameResult
from chessbox.core.move import Move, MoveRequest
from chessbox.engine.random_opponent import RandomOpponent
from chessbox.engine.settings import IOpponent, OpponentSettings
from chessbox.game import operations
from chessbox.game.models import (
    GameOverError,
    MoveOutcome,
    NoActiveGameError,
    OutOfTurnError,
)
from chessbox.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one game and serialises every operation on it.

    Each public method holds the controller's lock for its whole
    validate-execute cycle (or checkmate scan), so callers on different
    threads never observe a half-applied move. Independent games need
    independent controllers.
    """

    __slots__ = ("_state", "_opponent", "_lock", "events")

    def __init__(
        self,
        settings: OpponentSettings | None = None,
        opponent: IOpponent | None = None,
    ) -> None:
        self._state = GameState()
        self._opponent: IOpponent = opponent or RandomOpponent(settings)
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def has_game(self) -> bool:
        with self._lock:
            return self._state.is_started

    @contextmanager
    def session(self) -> Iterator[GameState]:
        """Hold the controller lock across several calls."""
        with self._lock:
            yield self._state

    # ── Operations ───────────────────────────────────────────────────────

    def new_game(self, player_color: Color, fen: str | None = None) -> GameState:
        with self._lock:
            self._state = operations.new_game(player_color, fen)
            _LOGGER.info("New game, player is %s", player_color)
            return self._state

    def reset(self) -> None:
        """Discard the current game."""
        with self._lock:
            self._state = GameState()

    def submit_move(self, request: MoveRequest) -> MoveOutcome:
        """Validate and execute a move for the player's side."""
        with self._lock:
            self._require_turn(self._state.player)
            outcome = operations.submit_move(self._state, request)
            self._notify(outcome, was_over=False)
            return outcome

    def opponent_move(self) -> MoveOutcome:
        """Let the opponent pick and execute its move."""
        with self._lock:
            self._require_game()
            was_over = self._state.is_game_over
            outcome = operations.opponent_move(self._state, self._opponent)
            self._notify(outcome, was_over)
            return outcome

    def render_board(self) -> str:
        with self._lock:
            self._require_game()
            return operations.render_board(self._state)

    def is_game_over(self) -> bool:
        with self._lock:
            return operations.is_game_over(self._state)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _require_game(self) -> None:
        if not self._state.is_started:
            raise NoActiveGameError("No active game")

    def _require_turn(self, color: Color) -> None:
        self._require_game()
        if self._state.is_game_over:
            raise GameOverError("Game is over")
        if self._state.turn != color:
            raise OutOfTurnError(f"It is {self._state.turn}'s turn, not {color}'s")

    def _notify(self, outcome: MoveOutcome, was_over: bool) -> None:
        if outcome.applied and outcome.move is not None:
            for cb in self.events.on_move:
                cb(outcome.move, self._state)
        if self._state.is_game_over and not was_over:
            for cb in self.events.on_game_over:
                cb(self._state.result)
