"""Sliding-path clearance shared by the human and opponent rule sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessbox.core.types import Square, deltas, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chessbox.core.board import Board
    from chessbox.core.move import Directive


def is_line(start: Square, end: Square) -> bool:
    """Same rank, same file or same diagonal (and not the same square)."""
    dr, df = deltas(start, end)
    if dr == 0 and df == 0:
        return False
    return dr == 0 or df == 0 or abs(dr) == abs(df)


def between(start: Square, end: Square) -> list[Square]:
    """Intermediate squares walked from *start* towards *end*.

    Raises ``ValueError`` when the two squares do not share a line.
    """
    if not is_line(start, end):
        raise ValueError(f"Squares {start} and {end} are not on a common line")
    dr, df = deltas(start, end)
    step_r = (dr > 0) - (dr < 0)
    step_f = (df > 0) - (df < 0)
    squares: list[Square] = []
    rank = rank_of(start) + step_r
    file = file_of(start) + step_f
    end_rank, end_file = rank_of(end), file_of(end)
    while (rank, file) != (end_rank, end_file):
        squares.append(make_square(file, rank))
        rank += step_r
        file += step_f
    return squares


def path_is_open(board: Board, start: Square, end: Square) -> bool:
    """Every square strictly between *start* and *end* is empty."""
    return all(board.is_empty(sq) for sq in between(start, end))


def clear_path(
    board: Board,
    start: Square,
    end: Square,
    directive: Directive | None = None,
) -> bool:
    """Path and destination rule for a straight or diagonal move.

    Intermediate squares must be empty. An occupied destination is only
    acceptable under a capture-assert; an empty one always is. Piece shape
    and the occupant's color are the caller's business.
    """
    if not path_is_open(board, start, end):
        return False
    if board.is_empty(end):
        return True
    return directive is not None and directive.is_capture
