"""Rejection taxonomy for move validation."""

from __future__ import annotations

from enum import Enum


class RejectReason(Enum):
    """Why a move was refused."""

    INVALID_SHAPE = "invalid-shape"
    BLOCKED_PATH = "blocked-path"
    DIRECTIVE_MISMATCH = "directive-mismatch"
    SELF_CHECK = "self-check"
    NO_LEGAL_MOVES = "no-legal-moves"


class IllegalMoveError(ValueError):
    """Raised by the validators; the board is never modified when raised."""

    def __init__(self, reason: RejectReason, message: str = "") -> None:
        super().__init__(message or reason.value)
        self.reason = reason
