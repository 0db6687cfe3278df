"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessbox.core.attacks import is_in_check
from chessbox.core.enums import Color, GameResult
from chessbox.core.move_generator import MoveGenerator
from chessbox.core.validator import MoveValidator, candidate_request

if TYPE_CHECKING:
    from chessbox.core.position import Position

_VALIDATOR = MoveValidator()


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Every search runs on ``position.copy()``; the position passed in is
    never modified.
    """

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.turn)

    @staticmethod
    def has_legal_move(position: Position, color: Color) -> bool:
        """Can *color* make any move under its own rule set?

        The player's side is judged by the human validator (with the
        directive tokens a well-formed request would carry), the opponent
        by the reduced rule set.
        """
        snapshot = position.copy()
        board = snapshot.board
        if color != snapshot.player:
            return MoveGenerator(board, color).has_legal_move()

        for start in board.pieces(color):
            for end in range(64):
                request = candidate_request(board, start, end)
                if request is not None and _VALIDATOR.is_legal(board, request):
                    return True
        return False

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position, position.turn)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position, position.turn)

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if Rules.has_legal_move(position, position.turn):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(position):
            return (
                GameResult.BLACK_WINS
                if position.turn == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
