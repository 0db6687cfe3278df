"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. The value is the sign a piece of that side carries."""

    WHITE = 1
    BLACK = -1

    @property
    def opposite(self) -> Color:
        return Color(-self.value)

    @property
    def letter(self) -> str:
        """Single-letter code used by the board dump and move requests."""
        return "W" if self is Color.WHITE else "B"

    @classmethod
    def from_letter(cls, letter: str) -> Color:
        if letter == "W":
            return cls.WHITE
        if letter == "B":
            return cls.BLACK
        raise ValueError(f"Invalid color letter: {letter!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds; the value is the magnitude stored on the board."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class DirectiveKind(IntEnum):
    """Annotation attached to a move request."""

    CAPTURE = 1  # "x": destination holds the named opponent piece
    PROMOTE = 2  # "y": quiet move carrying a promotion piece-spec


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
