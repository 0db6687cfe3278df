"""Human move validation: geometry, path, directive tokens, self-check.

Every request goes through the same four stages, in order:

1. shape - can this kind of piece make that displacement at all?
2. path - are the intervening squares (and the destination) passable?
3. directives - do the ``x``/``y`` tokens agree with the board?
4. self-check guard - would the mover's own king be attacked afterwards?

The first failing stage raises :class:`IllegalMoveError`. The guard plays
the move on a scratch copy of the board, so the caller's board is never
touched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessbox.core.attacks import is_in_check
from chessbox.core.enums import Color, PieceType
from chessbox.core.errors import IllegalMoveError, RejectReason
from chessbox.core.move import Directive, Move, MoveRequest
from chessbox.core.paths import clear_path, path_is_open
from chessbox.core.piece import Piece, color_of
from chessbox.core.types import Square, deltas, rank_of

if TYPE_CHECKING:
    from chessbox.core.board import Board

_LOGGER = logging.getLogger(__name__)

_SLIDING: frozenset[PieceType] = frozenset(
    (PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)
)
_PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    (PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)
)


def pawn_direction(color: Color) -> int:
    return 1 if color == Color.WHITE else -1


def pawn_start_rank(color: Color) -> int:
    return 1 if color == Color.WHITE else 6


def far_rank(color: Color) -> int:
    """Row on which a pawn of *color* promotes."""
    return 7 if color == Color.WHITE else 0


def _shape_ok(kind: PieceType, dr: int, df: int) -> bool:
    adr, adf = abs(dr), abs(df)
    if kind == PieceType.KNIGHT:
        return (adr, adf) in ((2, 1), (1, 2))
    if kind == PieceType.KING:
        return adr <= 1 and adf <= 1
    if kind == PieceType.ROOK:
        return dr == 0 or df == 0
    if kind == PieceType.BISHOP:
        return adr == adf
    if kind == PieceType.QUEEN:
        return dr == 0 or df == 0 or adr == adf
    return False


def _reject(reason: RejectReason, message: str) -> IllegalMoveError:
    _LOGGER.debug("Move rejected (%s): %s", reason.value, message)
    return IllegalMoveError(reason, message)


class MoveValidator:
    """Full rule set for moves submitted by the human side."""

    __slots__ = ()

    # -- Public API ---------------------------------------------------------

    def validate(self, board: Board, request: MoveRequest) -> Move:
        """Check *request* against *board* and return the move to execute."""
        start, end = request.from_sq, request.to_sq
        if board[start] != request.piece.value:
            raise _reject(
                RejectReason.INVALID_SHAPE,
                f"{request.piece.code} is not on the start square",
            )
        if start == end:
            raise _reject(RejectReason.INVALID_SHAPE, "start and end coincide")

        color = request.piece.color
        kind = request.piece.piece_type

        promotion: PieceType | None = None
        if kind == PieceType.PAWN:
            promotion = self._check_pawn(board, request, color)
        else:
            dr, df = deltas(start, end)
            if not _shape_ok(kind, dr, df):
                raise _reject(
                    RejectReason.INVALID_SHAPE,
                    f"{kind.name.lower()} cannot move by ({dr}, {df})",
                )
            if kind in _SLIDING:
                if not path_is_open(board, start, end):
                    raise _reject(RejectReason.BLOCKED_PATH, "path is blocked")
                if not clear_path(board, start, end, request.primary):
                    raise _reject(
                        RejectReason.DIRECTIVE_MISMATCH,
                        "destination is occupied but no capture was asserted",
                    )
            self._check_directives(board, request, color)

        move = Move(start, end, promotion)
        self._guard_self_check(board, move, color)
        return move

    def is_legal(self, board: Board, request: MoveRequest) -> bool:
        try:
            self.validate(board, request)
        except IllegalMoveError:
            return False
        return True

    # -- Stages (private) ---------------------------------------------------

    def _check_pawn(
        self, board: Board, request: MoveRequest, color: Color
    ) -> PieceType | None:
        start, end = request.from_sq, request.to_sq
        dr, df = deltas(start, end)
        direction = pawn_direction(color)
        promotes = rank_of(end) == far_rank(color)

        if df == 0 and dr == direction:
            if not board.is_empty(end):
                raise _reject(RejectReason.BLOCKED_PATH, "pawn is blocked")
            if request.secondary is not None:
                raise _reject(
                    RejectReason.DIRECTIVE_MISMATCH, "unexpected second token"
                )
            if promotes:
                return self._promotion_kind(request.primary, color)
            if request.primary is not None:
                raise _reject(
                    RejectReason.DIRECTIVE_MISMATCH,
                    f"token {request.primary} not allowed on a pawn advance",
                )
            return None

        if df == 0 and dr == 2 * direction and rank_of(start) == pawn_start_rank(color):
            if not path_is_open(board, start, end) or not board.is_empty(end):
                raise _reject(RejectReason.BLOCKED_PATH, "pawn is blocked")
            if request.primary is not None or request.secondary is not None:
                raise _reject(
                    RejectReason.DIRECTIVE_MISMATCH,
                    "tokens are not allowed on a double step",
                )
            return None

        if abs(df) == 1 and dr == direction:
            if not request.asserts_capture:
                raise _reject(
                    RejectReason.DIRECTIVE_MISMATCH,
                    "diagonal pawn move must assert a capture",
                )
            assert request.primary is not None
            self._check_capture_target(board, end, color, request.primary.piece)
            if promotes:
                return self._promotion_kind(request.secondary, color)
            if request.secondary is not None:
                raise _reject(
                    RejectReason.DIRECTIVE_MISMATCH,
                    "promotion token off the far rank",
                )
            return None

        raise _reject(RejectReason.INVALID_SHAPE, f"pawn cannot move by ({dr}, {df})")

    def _check_directives(self, board: Board, request: MoveRequest, color: Color) -> None:
        """Directive rule for every piece but the pawn."""
        if request.has_promotion_token:
            raise _reject(
                RejectReason.DIRECTIVE_MISMATCH,
                f"{request.piece.piece_type.name.lower()} cannot carry a promotion token",
            )
        if request.secondary is not None:
            raise _reject(RejectReason.DIRECTIVE_MISMATCH, "unexpected second token")

        if board.is_empty(request.to_sq):
            if request.asserts_capture:
                raise _reject(
                    RejectReason.DIRECTIVE_MISMATCH,
                    "capture asserted on an empty square",
                )
            return

        if request.primary is None:
            raise _reject(
                RejectReason.DIRECTIVE_MISMATCH,
                "destination is occupied but no capture was asserted",
            )
        self._check_capture_target(board, request.to_sq, color, request.primary.piece)

    @staticmethod
    def _check_capture_target(
        board: Board, sq: Square, color: Color, named: Piece
    ) -> None:
        value = board[sq]
        if value == 0:
            raise _reject(RejectReason.DIRECTIVE_MISMATCH, "nothing to capture")
        if color_of(value) == color:
            raise _reject(RejectReason.DIRECTIVE_MISMATCH, "cannot capture own piece")
        if value != named.value:
            raise _reject(
                RejectReason.DIRECTIVE_MISMATCH,
                f"capture names {named.code}, square holds {Piece.from_value(value).code}",
            )
        if abs(value) == PieceType.KING:
            raise _reject(RejectReason.DIRECTIVE_MISMATCH, "kings are never captured")

    @staticmethod
    def _promotion_kind(directive: Directive | None, color: Color) -> PieceType:
        if directive is None or not directive.is_promotion:
            raise _reject(
                RejectReason.DIRECTIVE_MISMATCH,
                "pawn reaching the far rank needs a promotion token",
            )
        if directive.piece.color != color:
            raise _reject(
                RejectReason.DIRECTIVE_MISMATCH,
                "promotion piece must belong to the mover",
            )
        if directive.piece.piece_type not in _PROMOTION_TYPES:
            raise _reject(
                RejectReason.DIRECTIVE_MISMATCH,
                f"cannot promote to {directive.piece.piece_type.name.lower()}",
            )
        return directive.piece.piece_type

    @staticmethod
    def _guard_self_check(board: Board, move: Move, color: Color) -> None:
        if leaves_king_attacked(board, move, color):
            raise _reject(RejectReason.SELF_CHECK, "move leaves own king attacked")


def leaves_king_attacked(board: Board, move: Move, color: Color) -> bool:
    """Play *move* on a scratch copy and test *color*'s king."""
    trial = board.copy()
    placed = None
    if move.promotion is not None:
        placed = Piece(color, move.promotion).value
    trial.move_piece(move.from_sq, move.to_sq, placed)
    return is_in_check(trial, color)


def candidate_request(board: Board, start: Square, end: Square) -> MoveRequest | None:
    """The well-formed request a player would submit for *start* → *end*.

    Capture-asserts name the actual occupant; far-rank pawn moves carry a
    queen promotion spec. ``None`` when *start* is empty.
    """
    value = board[start]
    if value == 0:
        return None
    piece = Piece.from_value(value)
    target = board[end]
    primary = Directive.capture(Piece.from_value(target)) if target else None
    secondary = None
    if piece.piece_type == PieceType.PAWN and rank_of(end) == far_rank(piece.color):
        promote = Directive.promote(Piece(piece.color, PieceType.QUEEN))
        if primary is None:
            primary = promote
        else:
            secondary = promote
    return MoveRequest(piece, start, end, primary, secondary)
