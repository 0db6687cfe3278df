"""Opponent configuration and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessbox.core.move import Move
    from chessbox.core.position import Position


class PromotionPolicy(Enum):
    """How the opponent picks the piece a pawn promotes to."""

    QUEEN = "queen"
    RANDOM = "random"  # uniform among knight, bishop, rook, queen


@dataclass(slots=True, frozen=True)
class OpponentSettings:
    """Constraints for opponent move selection."""

    promotion: PromotionPolicy = PromotionPolicy.RANDOM
    seed: int | None = None


class IOpponent(Protocol):
    """Protocol for opponents driven by the game controller."""

    def choose(self, position: Position) -> Move | None: ...
