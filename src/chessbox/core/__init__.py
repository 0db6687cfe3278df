"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessbox.core import MoveValidator, Position, parse_move_request

    pos = Position()
    move = MoveValidator().validate(pos.board, parse_move_request("WPe2-e4"))
    pos.make_move(move)
"""

from chessbox.core.attacks import is_in_check, is_king_attacked
from chessbox.core.board import Board
from chessbox.core.enums import Color, DirectiveKind, GameResult, PieceType
from chessbox.core.errors import IllegalMoveError, RejectReason
from chessbox.core.move import Directive, Move, MoveRequest
from chessbox.core.move_generator import MoveGenerator
from chessbox.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_move_request,
    position_from_fen,
    render_board,
)
from chessbox.core.paths import clear_path, path_is_open
from chessbox.core.piece import Piece
from chessbox.core.position import Position
from chessbox.core.rules import Rules
from chessbox.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from chessbox.core.validator import MoveValidator, candidate_request

__all__ = [
    # Enums
    "Color",
    "DirectiveKind",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Directive",
    "Move",
    "MoveRequest",
    "Piece",
    "Position",
    # Rules
    "IllegalMoveError",
    "MoveGenerator",
    "MoveValidator",
    "RejectReason",
    "Rules",
    "candidate_request",
    "clear_path",
    "is_in_check",
    "is_king_attacked",
    "path_is_open",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "parse_move_request",
    "position_from_fen",
    "render_board",
]
