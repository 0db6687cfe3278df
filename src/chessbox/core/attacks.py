"""Check detection: is a given king attacked?"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessbox.core.enums import Color, PieceType
from chessbox.core.types import Square, make_square

if TYPE_CHECKING:
    from chessbox.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# (rank step, file step)
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        moves: list[Square] = []
        for dr, df in offsets:
            ar = rank_idx + dr
            af = file_idx + df
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ar = rank_idx + dr
            af = file_idx + df
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                ar += dr
                af += df
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attackers() -> dict[Color, tuple[tuple[Square, ...], ...]]:
    # Squares from which an enemy pawn hits a king of the given color.
    # Enemy pawns of a White king sit one row up (Black pawns move down),
    # enemy pawns of a Black king one row down.
    tables: dict[Color, tuple[tuple[Square, ...], ...]] = {}
    for color, dr in ((Color.WHITE, 1), (Color.BLACK, -1)):
        tables[color] = build_targets(((dr, -1), (dr, 1)))
    return tables


KNIGHT_TARGETS = build_targets(KNIGHT_OFFSETS)
KING_TARGETS = build_targets(KING_OFFSETS)
QUEEN_RAYS = build_rays(QUEEN_DIRS)
_PAWN_ATTACKERS = _build_pawn_attackers()

# QUEEN_RAYS lists the four orthogonal rays first.
_ORTHOGONAL_RAY_COUNT = len(ROOK_DIRS)


def is_king_attacked(board: Board, king_sq: Square, color: Color) -> bool:
    """Is a king of *color* standing on *king_sq* attacked by the other side?

    The pawn direction comes from the king's own color.
    """
    sign = int(color)

    for index, ray in enumerate(QUEEN_RAYS[king_sq]):
        orthogonal = index < _ORTHOGONAL_RAY_COUNT
        for sq in ray:
            value = board[sq]
            if value == 0:
                continue
            if value * sign < 0:
                kind = abs(value)
                if (
                    kind == PieceType.QUEEN
                    or (kind == PieceType.ROOK and orthogonal)
                    or (kind == PieceType.BISHOP and not orthogonal)
                ):
                    return True
            break

    enemy_knight = -sign * PieceType.KNIGHT
    if any(board[sq] == enemy_knight for sq in KNIGHT_TARGETS[king_sq]):
        return True

    enemy_pawn = -sign * PieceType.PAWN
    if any(board[sq] == enemy_pawn for sq in _PAWN_ATTACKERS[color][king_sq]):
        return True

    enemy_king = -sign * PieceType.KING
    return any(board[sq] == enemy_king for sq in KING_TARGETS[king_sq])


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king (per the board's king cache) attacked?"""
    return is_king_attacked(board, board.king_square(color), color)
