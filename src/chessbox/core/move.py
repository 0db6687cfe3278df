"""Move value objects: validated moves and incoming move requests."""

from __future__ import annotations

from dataclasses import dataclass

from chessbox.core.enums import DirectiveKind, PieceType
from chessbox.core.piece import Piece, kind_letter
from chessbox.core.types import Square, square_name

_DIRECTIVE_CHARS: dict[DirectiveKind, str] = {
    DirectiveKind.CAPTURE: "x",
    DirectiveKind.PROMOTE: "y",
}


@dataclass(frozen=True, slots=True)
class Move:
    """A move that passed validation and is ready for execution."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += "=" + kind_letter(self.promotion)
        return base


@dataclass(frozen=True, slots=True)
class Directive:
    """A directive token: ``x`` or ``y`` followed by a piece-spec."""

    kind: DirectiveKind
    piece: Piece

    @classmethod
    def capture(cls, piece: Piece) -> Directive:
        return cls(DirectiveKind.CAPTURE, piece)

    @classmethod
    def promote(cls, piece: Piece) -> Directive:
        return cls(DirectiveKind.PROMOTE, piece)

    @property
    def is_capture(self) -> bool:
        return self.kind == DirectiveKind.CAPTURE

    @property
    def is_promotion(self) -> bool:
        return self.kind == DirectiveKind.PROMOTE

    def __str__(self) -> str:
        return _DIRECTIVE_CHARS[self.kind] + self.piece.code


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """A move as submitted by the human side.

    Attributes:
        piece: Descriptor that must match the piece on *from_sq*.
        primary: Capture-assert (``x``) or quiet-assert/promotion (``y``).
        secondary: Promotion spec following a capture-assert.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    primary: Directive | None = None
    secondary: Directive | None = None

    @property
    def asserts_capture(self) -> bool:
        return self.primary is not None and self.primary.is_capture

    @property
    def has_promotion_token(self) -> bool:
        """Whether any slot carries a ``y`` token."""
        return any(d is not None and d.is_promotion for d in (self.primary, self.secondary))

    def __str__(self) -> str:
        text = f"{self.piece.code}{square_name(self.from_sq)}-{square_name(self.to_sq)}"
        for directive in (self.primary, self.secondary):
            if directive is not None:
                text += str(directive)
        return text
