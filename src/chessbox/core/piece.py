"""Piece descriptor and signed square-value helpers.

The board stores pieces as signed integers: ``0`` is an empty square, the
sign is the color and the magnitude the :class:`PieceType`.
:class:`Piece` is the (color, kind) descriptor callers pass around.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessbox.core.enums import Color, PieceType

EMPTY = 0

_KIND_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_KINDS: dict[str, PieceType] = {v: k for k, v in _KIND_LETTERS.items()}

# FEN character ↔ (Color, PieceType)
_FEN_MAP: dict[str, tuple[Color, PieceType]] = {
    **{letter: (Color.WHITE, kind) for letter, kind in _LETTER_KINDS.items()},
    **{letter.lower(): (Color.BLACK, kind) for letter, kind in _LETTER_KINDS.items()},
}

EMPTY_CODE = "**"


def color_of(value: int) -> Color | None:
    """Color of a square value, ``None`` for an empty square."""
    if value > 0:
        return Color.WHITE
    if value < 0:
        return Color.BLACK
    return None


def kind_of(value: int) -> PieceType | None:
    return PieceType(abs(value)) if value else None


def kind_letter(kind: PieceType) -> str:
    return _KIND_LETTERS[kind]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, kind) descriptor."""

    color: Color
    piece_type: PieceType

    @property
    def value(self) -> int:
        """Signed board value, e.g. black knight → -2."""
        return int(self.color) * int(self.piece_type)

    @classmethod
    def from_value(cls, value: int) -> Piece:
        if not value or abs(value) > PieceType.KING:
            raise ValueError(f"Not a piece value: {value!r}")
        color = Color.WHITE if value > 0 else Color.BLACK
        return cls(color, PieceType(abs(value)))

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def code(self) -> str:
        """Two-letter code, e.g. 'WP' or 'BQ'."""
        return self.color.letter + _KIND_LETTERS[self.piece_type]

    @classmethod
    def from_code(cls, code: str) -> Piece:
        """Parse a two-letter code such as 'WN'."""
        if len(code) != 2 or code[1] not in _LETTER_KINDS:
            raise ValueError(f"Invalid piece code: {code!r}")
        return cls(Color.from_letter(code[0]), _LETTER_KINDS[code[1]])

    @classmethod
    def from_fen_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _FEN_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def fen_char(self) -> str:
        letter = _KIND_LETTERS[self.piece_type]
        return letter if self.color is Color.WHITE else letter.lower()

    def __str__(self) -> str:
        return self.code


def square_code(value: int) -> str:
    """Board-dump code of a square value; ``**`` when empty."""
    if value == EMPTY:
        return EMPTY_CODE
    return Piece.from_value(value).code
