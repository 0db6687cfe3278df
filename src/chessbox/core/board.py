"""Board - signed piece values on an 8x8 grid."""

from __future__ import annotations

from chessbox.core.enums import Color, PieceType
from chessbox.core.piece import EMPTY, Piece, color_of, square_code
from chessbox.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board with a per-color king square cache.

    The board knows nothing about legality. Every write keeps the king
    cache in step with the square that actually holds each king.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[int] = [EMPTY] * 64
        self._king_squares: dict[Color, Square | None] = {
            Color.WHITE: None,
            Color.BLACK: None,
        }

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> int:
        return self._squares[sq]

    def __setitem__(self, sq: Square, value: int) -> None:
        old_value = self._squares[sq]
        if old_value == value:
            return

        if abs(old_value) == PieceType.KING:
            old_color = color_of(old_value)
            assert old_color is not None
            if self._king_squares[old_color] == sq:
                self._king_squares[old_color] = None

        self._squares[sq] = value

        if abs(value) == PieceType.KING:
            color = color_of(value)
            assert color is not None
            self._king_squares[color] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] == EMPTY

    def piece_at(self, sq: Square) -> Piece | None:
        value = self._squares[sq]
        return Piece.from_value(value) if value else None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in row-major order."""
        sign = int(color)
        return [sq for sq, value in enumerate(self._squares) if value * sign > 0]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[color]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, start: Square, end: Square, placed: int | None = None) -> int:
        """Move the piece on *start* to *end* and return what *end* held.

        *placed* replaces the moving value on arrival (promotion).
        """
        moving = self._squares[start]
        captured = self._squares[end]
        self[start] = EMPTY
        self[end] = moving if placed is None else placed
        return captured

    def unmove_piece(self, start: Square, end: Square, moved: int, captured: int) -> None:
        """Exact inverse of :meth:`move_piece`."""
        self[end] = captured
        self[start] = moved

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [EMPTY] * 64
        self._king_squares = {Color.WHITE: None, Color.BLACK: None}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN).value
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN).value

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt).value
            b[make_square(f, 7)] = Piece(Color.BLACK, pt).value
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [square_code(self[make_square(file, rank)]) for file in range(8)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a  b  c  d  e  f  g  h")
        return "\n".join(rows)
