"""RandomOpponent: picks a uniformly random legal move."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from chessbox.core.enums import PieceType
from chessbox.core.move import Move
from chessbox.core.move_generator import MoveGenerator
from chessbox.core.position import Position
from chessbox.engine.settings import OpponentSettings, PromotionPolicy

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


class RandomOpponent:
    """Opponent that samples uniformly from every legal move of its color.

    Legality follows the reduced rule set of :class:`MoveGenerator`. The
    random source is private to the instance, so a fixed seed replays the
    same game.
    """

    __slots__ = ("_settings", "_rng")

    def __init__(self, settings: OpponentSettings | None = None) -> None:
        self._settings = settings or OpponentSettings()
        self._rng = random.Random(self._settings.seed)

    @property
    def settings(self) -> OpponentSettings:
        return self._settings

    def choose(self, position: Position) -> Move | None:
        """Pick a move for the side to move, or ``None`` if there is none."""
        color = position.turn
        legal = MoveGenerator(position.board, color).generate_legal_moves()
        _LOGGER.debug("%d legal moves for %s", len(legal), color)
        if not legal:
            _LOGGER.warning("No legal moves available for %s", color)
            return None

        move = self._rng.choice(legal)
        if move.promotion is not None:
            move = replace(move, promotion=self._promotion_kind())
        return move

    def _promotion_kind(self) -> PieceType:
        if self._settings.promotion == PromotionPolicy.QUEEN:
            return PieceType.QUEEN
        return self._rng.choice(_PROMOTION_TYPES)
