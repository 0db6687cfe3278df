"""Position — board plus side to move, player color and check flag."""

from __future__ import annotations

from chessbox.core.attacks import is_in_check
from chessbox.core.board import Board
from chessbox.core.enums import Color
from chessbox.core.move import Move
from chessbox.core.piece import Piece


class Position:
    """The live rules state of one game.

    *player* is the human side; the opponent plays the other color.
    *in_check* tells whether the side about to move is in check after the
    most recent :meth:`make_move`.
    """

    __slots__ = ("board", "turn", "player", "in_check")

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        player: Color = Color.WHITE,
        in_check: bool | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self.player = player
        self.in_check = is_in_check(self.board, turn) if in_check is None else in_check

    @property
    def opponent(self) -> Color:
        return self.player.opposite

    # ── Move execution ───────────────────────────────────────────────────

    def make_move(self, move: Move) -> int:
        """Execute an already validated *move* and return the captured value.

        No legality checks happen here.
        """
        board = self.board
        moving = board[move.from_sq]
        if moving == 0:
            raise ValueError(f"No piece on {move.from_sq}")

        placed = None
        if move.promotion is not None:
            placed = Piece(self.turn, move.promotion).value
        captured = board.move_piece(move.from_sq, move.to_sq, placed)

        self.turn = self.turn.opposite
        self.in_check = is_in_check(board, self.turn)
        return captured

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Fully independent copy; nothing is shared with the original."""
        return Position(
            board=self.board.copy(),
            turn=self.turn,
            player=self.player,
            in_check=self.in_check,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.turn == other.turn
            and self.player == other.player
            and self.in_check == other.in_check
        )

    def __repr__(self) -> str:
        return (
            f"Position(turn={self.turn}, player={self.player}, "
            f"in_check={self.in_check})\n{self.board!r}"
        )
