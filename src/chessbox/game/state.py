"""Game state machine — tracks phase transitions, result and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessbox.core.board import Board
from chessbox.core.enums import Color, GameResult
from chessbox.core.move import Move
from chessbox.core.notation import position_from_fen
from chessbox.core.piece import Piece
from chessbox.core.position import Position
from chessbox.core.rules import Rules
from chessbox.game.models import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_check: bool = False

    @property
    def notation(self) -> str:
        text = f"{self.piece.code}{self.move}"
        if self.captured is not None:
            text += f"x{self.captured.code}"
        return text + ("+" if self.was_check else "")


@dataclass
class GameState:
    """Manages game lifecycle: position, phase, result, move history.

    Pure data and logic with no locking; see ``GameController``.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, player: Color = Color.WHITE, fen: str | None = None) -> None:
        """Initialise (or reset) the game with *player* as the human side."""
        if fen is None:
            self.position = Position(player=player)
        else:
            self.position = position_from_fen(fen, player)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Execute a validated move and return the history record.

        Caller is responsible for legality check.
        """
        piece = Piece.from_value(self.position.board[move.from_sq])
        captured = self.position.make_move(move)

        record = MoveRecord(
            move=move,
            piece=piece,
            captured=Piece.from_value(captured) if captured else None,
            was_check=self.position.in_check,
        )
        self.move_history.append(record)
        self._check_game_over()
        return record

    def conclude(self, result: GameResult) -> None:
        self.result = result
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def turn(self) -> Color:
        return self.position.turn

    @property
    def player(self) -> Color:
        return self.position.player

    @property
    def opponent(self) -> Color:
        return self.position.opponent

    @property
    def in_check(self) -> bool:
        return self.position.in_check

    @property
    def is_started(self) -> bool:
        return self.phase != GamePhase.NOT_STARTED

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_checkmate(self) -> bool:
        return self.result in (GameResult.WHITE_WINS, GameResult.BLACK_WINS)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result != GameResult.IN_PROGRESS:
            self.conclude(result)
