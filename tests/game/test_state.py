"""Tests for GameState."""

from chessbox.core.enums import Color, GameResult
from chessbox.core.move import Move
from chessbox.core.types import A1, A8, E2, E4
from chessbox.game.models import GamePhase
from chessbox.game.state import GameState

_MATE_IN_ONE = "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"


class TestGameStateSetup:
    def test_not_started_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert not gs.is_started
        assert not gs.is_game_over

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.turn == Color.WHITE
        assert gs.player == Color.WHITE
        assert gs.ply_count == 0

    def test_setup_as_black(self) -> None:
        gs = GameState()
        gs.setup(Color.BLACK)
        assert gs.player == Color.BLACK
        assert gs.opponent == Color.WHITE
        assert gs.turn == Color.WHITE

    def test_setup_custom_fen(self) -> None:
        gs = GameState()
        gs.setup(Color.WHITE, "4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert gs.turn == Color.BLACK

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(Move(E2, E4))
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.turn == Color.WHITE


class TestApplyMove:
    def test_records_history(self) -> None:
        gs = GameState()
        gs.setup()
        record = gs.apply_move(Move(E2, E4))
        assert record.notation == "WPe2-e4"
        assert gs.move_history == [record]
        assert gs.turn == Color.BLACK

    def test_checkmate_ends_game(self) -> None:
        gs = GameState()
        gs.setup(Color.WHITE, _MATE_IN_ONE)
        record = gs.apply_move(Move(A1, A8))
        assert record.was_check
        assert record.notation == "WRa1-a8+"
        assert gs.is_game_over
        assert gs.is_checkmate
        assert gs.result == GameResult.WHITE_WINS

    def test_capture_notation(self) -> None:
        gs = GameState()
        gs.setup(Color.WHITE, "k2r4/8/8/8/8/8/8/3RK3 w - - 0 1")
        record = gs.apply_move(Move(3, 59))
        assert record.notation == "WRd1-d8xBR+"

    def test_conclude(self) -> None:
        gs = GameState()
        gs.setup()
        gs.conclude(GameResult.DRAW)
        assert gs.is_game_over
        assert not gs.is_checkmate
