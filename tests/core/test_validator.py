"""Tests for MoveValidator, the human side's full rule set."""

import pytest

from chessbox.core.board import Board
from chessbox.core.enums import Color, PieceType
from chessbox.core.errors import IllegalMoveError, RejectReason
from chessbox.core.move import Directive, Move
from chessbox.core.notation import board_from_fen, parse_move_request
from chessbox.core.piece import Piece
from chessbox.core.types import D8, E2, E3, E4, E5, E7, E8, parse_square
from chessbox.core.validator import MoveValidator, candidate_request


def _validate(board: Board, text: str) -> Move:
    return MoveValidator().validate(board, parse_move_request(text))


def _reason(board: Board, text: str) -> RejectReason:
    with pytest.raises(IllegalMoveError) as excinfo:
        _validate(board, text)
    return excinfo.value.reason


class TestShape:
    def test_pawn_double_step(self) -> None:
        assert _validate(Board.initial(), "WPe2-e4") == Move(E2, E4)

    def test_pawn_single_step(self) -> None:
        assert _validate(Board.initial(), "WPe2-e3") == Move(E2, E3)

    def test_black_pawn_moves_down(self) -> None:
        assert _validate(Board.initial(), "BPe7-e5") == Move(E7, E5)

    def test_pawn_triple_step(self) -> None:
        assert _reason(Board.initial(), "WPe2-e5") == RejectReason.INVALID_SHAPE

    def test_pawn_backwards(self) -> None:
        board = board_from_fen("4k3/8/8/8/4P3/8/8/4K3 w - - 0 1")
        assert _reason(board, "WPe4-e3") == RejectReason.INVALID_SHAPE

    def test_double_step_off_start_rank(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/4P3/8/4K3 w - - 0 1")
        assert _reason(board, "WPe3-e5") == RejectReason.INVALID_SHAPE

    def test_descriptor_must_match_start_square(self) -> None:
        assert _reason(Board.initial(), "WNe2-e4") == RejectReason.INVALID_SHAPE
        assert _reason(Board.initial(), "BPe2-e4") == RejectReason.INVALID_SHAPE

    def test_empty_start_square(self) -> None:
        assert _reason(Board.initial(), "WPe4-e5") == RejectReason.INVALID_SHAPE

    def test_start_equals_end(self) -> None:
        assert _reason(Board.initial(), "WNb1-b1") == RejectReason.INVALID_SHAPE

    def test_knight_jump(self) -> None:
        assert _validate(Board.initial(), "WNg1-f3") == Move(
            parse_square("g1"), parse_square("f3")
        )

    def test_knight_bad_shape(self) -> None:
        assert _reason(Board.initial(), "WNg1-g3") == RejectReason.INVALID_SHAPE

    def test_king_two_squares(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert _reason(board, "WKe1-g1") == RejectReason.INVALID_SHAPE

    def test_bishop_orthogonal(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        assert _reason(board, "WBc1-c4") == RejectReason.INVALID_SHAPE


class TestPath:
    def test_queen_blocked_by_own_pawn(self) -> None:
        board = Board.initial()
        snapshot = board.copy()
        assert _reason(board, "WQd1-d3") == RejectReason.BLOCKED_PATH
        assert board == snapshot

    def test_rook_blocked_by_enemy_piece(self) -> None:
        board = board_from_fen("4k3/8/8/8/p7/8/8/R3K3 w - - 0 1")
        assert _reason(board, "WRa1-a8") == RejectReason.BLOCKED_PATH

    def test_pawn_forward_into_piece(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/4p3/4P3/4K3 w - - 0 1")
        assert _reason(board, "WPe2-e3") == RejectReason.BLOCKED_PATH

    def test_pawn_double_step_over_piece(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        assert _reason(board, "WPe2-e4") == RejectReason.BLOCKED_PATH

    def test_pawn_double_step_onto_piece(self) -> None:
        board = board_from_fen("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1")
        assert _reason(board, "WPe2-e4") == RejectReason.BLOCKED_PATH


class TestDirectives:
    def test_capture_with_correct_name(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 0 1")
        move = _validate(board, "WQd1-d5xBP")
        assert move == Move(parse_square("d1"), parse_square("d5"))

    def test_occupied_destination_without_capture(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 0 1")
        assert _reason(board, "WQd1-d5") == RejectReason.DIRECTIVE_MISMATCH

    def test_capture_names_wrong_piece(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 0 1")
        assert _reason(board, "WQd1-d5xBN") == RejectReason.DIRECTIVE_MISMATCH

    def test_capture_on_empty_square(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert _reason(board, "WRa1-a5xBP") == RejectReason.DIRECTIVE_MISMATCH
        assert _reason(board, "WKe1-e2xBP") == RejectReason.DIRECTIVE_MISMATCH

    def test_capture_own_piece(self) -> None:
        assert _reason(Board.initial(), "WNb1-d2xWP") == RejectReason.DIRECTIVE_MISMATCH

    def test_king_is_never_captured(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4R1K1 w - - 0 1")
        assert _reason(board, "WRe1-e8xBK") == RejectReason.DIRECTIVE_MISMATCH

    def test_pawn_diagonal_needs_capture(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/3p4/4P3/4K3 w - - 0 1")
        assert _reason(board, "WPe2-d3") == RejectReason.DIRECTIVE_MISMATCH
        assert _validate(board, "WPe2-d3xBP") == Move(E2, parse_square("d3"))

    def test_pawn_diagonal_onto_empty_square(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4P3/4K3 w - - 0 1")
        assert _reason(board, "WPe2-d3xBP") == RejectReason.DIRECTIVE_MISMATCH

    def test_pawn_advance_rejects_tokens(self) -> None:
        assert _reason(Board.initial(), "WPe2-e3yWQ") == RejectReason.DIRECTIVE_MISMATCH
        assert _reason(Board.initial(), "WPe2-e4xBP") == RejectReason.DIRECTIVE_MISMATCH

    def test_non_pawn_rejects_promotion_token(self) -> None:
        assert _reason(Board.initial(), "WNb1-c3yWQ") == RejectReason.DIRECTIVE_MISMATCH

    def test_stray_second_token(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 0 1")
        assert _reason(board, "WQd1-d5xBPxBP") == RejectReason.DIRECTIVE_MISMATCH


class TestPromotion:
    _QUIET = "k7/4P3/8/8/8/8/8/4K3 w - - 0 1"
    _CAPTURE = "k2r4/4P3/8/8/8/8/8/4K3 w - - 0 1"

    def test_quiet_promotion(self) -> None:
        board = board_from_fen(self._QUIET)
        assert _validate(board, "WPe7-e8yWQ") == Move(E7, E8, PieceType.QUEEN)

    def test_underpromotion(self) -> None:
        board = board_from_fen(self._QUIET)
        assert _validate(board, "WPe7-e8yWN").promotion == PieceType.KNIGHT

    def test_far_rank_needs_token(self) -> None:
        board = board_from_fen(self._QUIET)
        assert _reason(board, "WPe7-e8") == RejectReason.DIRECTIVE_MISMATCH

    @pytest.mark.parametrize("token", ["yWK", "yWP", "yBQ", "xBQ"])
    def test_bad_promotion_spec(self, token: str) -> None:
        board = board_from_fen(self._QUIET)
        assert _reason(board, f"WPe7-e8{token}") == RejectReason.DIRECTIVE_MISMATCH

    def test_capture_promotion(self) -> None:
        board = board_from_fen(self._CAPTURE)
        assert _validate(board, "WPe7-d8xBRyWR") == Move(E7, D8, PieceType.ROOK)

    def test_capture_promotion_needs_spec(self) -> None:
        board = board_from_fen(self._CAPTURE)
        assert _reason(board, "WPe7-d8xBR") == RejectReason.DIRECTIVE_MISMATCH

    def test_capture_promotion_needs_capture_first(self) -> None:
        board = board_from_fen(self._CAPTURE)
        assert _reason(board, "WPe7-d8yWQ") == RejectReason.DIRECTIVE_MISMATCH

    def test_black_promotes_on_row_zero(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/3p4/K7 b - - 0 1")
        move = _validate(board, "BPd2-d1yBQ")
        assert move == Move(parse_square("d2"), parse_square("d1"), PieceType.QUEEN)


class TestSelfCheck:
    def test_pinned_knight_capture(self) -> None:
        board = board_from_fen("4r3/8/8/8/3p4/8/4N3/4K2k w - - 0 1")
        snapshot = board.copy()
        assert _reason(board, "WNe2-d4xBP") == RejectReason.SELF_CHECK
        assert board == snapshot

    def test_king_steps_into_check(self) -> None:
        board = board_from_fen("3rk3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert _reason(board, "WKe1-d1") == RejectReason.SELF_CHECK

    def test_king_captures_protected_piece(self) -> None:
        board = board_from_fen("4r2k/8/8/8/8/8/4p3/4K3 w - - 0 1")
        assert _reason(board, "WKe1-e2xBP") == RejectReason.SELF_CHECK

    def test_move_must_resolve_check(self) -> None:
        board = board_from_fen("4r2k/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert _reason(board, "WRa1-a2") == RejectReason.SELF_CHECK

    def test_king_escapes_check(self) -> None:
        board = board_from_fen("4r2k/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert MoveValidator().is_legal(board, parse_move_request("WKe1-d2"))
        assert not MoveValidator().is_legal(board, parse_move_request("WKe1-e2"))


class TestCandidateRequest:
    def test_quiet_move(self) -> None:
        request = candidate_request(Board.initial(), E2, E4)
        assert request == parse_move_request("WPe2-e4")

    def test_capture_names_occupant(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 0 1")
        request = candidate_request(board, parse_square("d1"), parse_square("d5"))
        assert request is not None
        assert request.primary == Directive.capture(Piece(Color.BLACK, PieceType.PAWN))

    def test_capture_promotion_tokens(self) -> None:
        board = board_from_fen("k2r4/4P3/8/8/8/8/8/4K3 w - - 0 1")
        request = candidate_request(board, E7, D8)
        assert request == parse_move_request("WPe7-d8xBRyWQ")

    def test_empty_start(self) -> None:
        assert candidate_request(Board.initial(), E4, E5) is None
