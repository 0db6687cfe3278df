"""Reduced rule set used by the opponent, plus legal move generation.

The opponent never types directive tokens, so its legality check has no
disambiguation: any opposite-colored piece (kings excepted) on the
destination may be captured and any empty destination may be entered,
as long as the piece's geometry and path allow it and the move does not
expose the mover's king.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessbox.core.attacks import KING_TARGETS, KNIGHT_TARGETS, QUEEN_RAYS
from chessbox.core.enums import Color, PieceType
from chessbox.core.move import Move
from chessbox.core.paths import path_is_open
from chessbox.core.types import Square, deltas, file_of, make_square, on_board, rank_of
from chessbox.core.validator import (
    far_rank,
    leaves_king_attacked,
    pawn_direction,
    pawn_start_rank,
)

if TYPE_CHECKING:
    from chessbox.core.board import Board


class MoveGenerator:
    """Generates legal opponent moves for *color* on a :class:`Board`.

    Speculative moves are played on scratch copies; the board handed in
    is only read.
    """

    __slots__ = ("_board", "_color")

    def __init__(self, board: Board, color: Color) -> None:
        self._board = board
        self._color = color

    # -- Public API ---------------------------------------------------------

    def is_legal(self, start: Square, end: Square) -> bool:
        """Whether moving the piece on *start* to *end* is legal."""
        if not self.is_pseudo_legal(start, end):
            return False
        return not leaves_king_attacked(self._board, self._as_move(start, end), self._color)

    def is_pseudo_legal(self, start: Square, end: Square) -> bool:
        """Geometry, path and destination rules, without the self-check guard."""
        board = self._board
        sign = int(self._color)
        value = board[start]
        if value * sign <= 0 or start == end:
            return False

        target = board[end]
        if target * sign > 0 or abs(target) == PieceType.KING:
            return False

        kind = abs(value)
        dr, df = deltas(start, end)
        if kind == PieceType.PAWN:
            return self._pawn_ok(start, end, dr, df, target)
        if kind == PieceType.KNIGHT:
            return (abs(dr), abs(df)) in ((2, 1), (1, 2))
        if kind == PieceType.KING:
            return abs(dr) <= 1 and abs(df) <= 1
        if kind == PieceType.ROOK and dr != 0 and df != 0:
            return False
        if kind == PieceType.BISHOP and abs(dr) != abs(df):
            return False
        if kind == PieceType.QUEEN and not (dr == 0 or df == 0 or abs(dr) == abs(df)):
            return False
        return path_is_open(board, start, end)

    def generate_legal_moves(self) -> list[Move]:
        """All legal moves for the generator's color, in board order."""
        legal: list[Move] = []
        for start in self._board.pieces(self._color):
            for end in self._candidate_targets(start):
                if self.is_legal(start, end):
                    legal.append(self._as_move(start, end))
        return legal

    def has_legal_move(self) -> bool:
        for start in self._board.pieces(self._color):
            for end in self._candidate_targets(start):
                if self.is_legal(start, end):
                    return True
        return False

    # -- Helpers (private) --------------------------------------------------

    def _as_move(self, start: Square, end: Square) -> Move:
        # Far-rank pawn moves default to a queen; the executor may swap it.
        if abs(self._board[start]) == PieceType.PAWN and rank_of(end) == far_rank(
            self._color
        ):
            return Move(start, end, PieceType.QUEEN)
        return Move(start, end)

    def _pawn_ok(self, start: Square, end: Square, dr: int, df: int, target: int) -> bool:
        direction = pawn_direction(self._color)
        if df == 0 and dr == direction:
            return target == 0
        if df == 0 and dr == 2 * direction and rank_of(start) == pawn_start_rank(self._color):
            return target == 0 and path_is_open(self._board, start, end)
        if abs(df) == 1 and dr == direction:
            return target * int(self._color) < 0
        return False

    def _candidate_targets(self, start: Square) -> tuple[Square, ...]:
        """Squares the piece on *start* could conceivably reach."""
        kind = abs(self._board[start])
        if kind == PieceType.KNIGHT:
            return KNIGHT_TARGETS[start]
        if kind == PieceType.KING:
            return KING_TARGETS[start]
        if kind == PieceType.PAWN:
            return self._pawn_targets(start)
        return tuple(sq for ray in QUEEN_RAYS[start] for sq in ray)

    def _pawn_targets(self, start: Square) -> tuple[Square, ...]:
        direction = pawn_direction(self._color)
        rank, file = rank_of(start), file_of(start)
        targets: list[Square] = []
        for dr, df in ((direction, 0), (2 * direction, 0), (direction, -1), (direction, 1)):
            if on_board(file + df, rank + dr):
                targets.append(make_square(file + df, rank + dr))
        return tuple(targets)
