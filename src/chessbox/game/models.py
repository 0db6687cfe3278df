"""Value types and errors shared by the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessbox.core.enums import GameResult

if TYPE_CHECKING:
    from chessbox.core.errors import RejectReason
    from chessbox.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Outcomes ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened to one submitted or generated move."""

    applied: bool
    in_check: bool = False
    is_checkmate: bool = False
    no_moves_available: bool = False
    reason: RejectReason | None = None
    move: Move | None = None
    result: GameResult = GameResult.IN_PROGRESS

    @classmethod
    def rejected(cls, reason: RejectReason, in_check: bool = False) -> MoveOutcome:
        return cls(applied=False, in_check=in_check, reason=reason)


# ── Session errors ───────────────────────────────────────────────────────────


class GameError(RuntimeError):
    """A game operation was called in a state that does not allow it."""


class NoActiveGameError(GameError):
    pass


class GameOverError(GameError):
    pass


class OutOfTurnError(GameError):
    pass
