"""Text forms: board dump, FEN piece placement, move requests."""

from __future__ import annotations

import re

from chessbox.core.board import Board
from chessbox.core.enums import Color, DirectiveKind
from chessbox.core.move import Directive, MoveRequest
from chessbox.core.piece import Piece, square_code
from chessbox.core.position import Position
from chessbox.core.types import make_square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"

_REQUEST_RE = re.compile(
    r"""
    ^\s*
    (?P<piece>[WB][PNBRQK])
    (?P<start>[a-h][1-8])
    -
    (?P<end>[a-h][1-8])
    \s*(?P<primary>[xy][WB][PNBRQK])?
    \s*(?P<secondary>[xy][WB][PNBRQK])?
    \s*$
    """,
    re.VERBOSE,
)

_DIRECTIVE_KINDS: dict[str, DirectiveKind] = {
    "x": DirectiveKind.CAPTURE,
    "y": DirectiveKind.PROMOTE,
}


# ── Board dump ───────────────────────────────────────────────────────────────


def render_board(board: Board) -> str:
    """One line per row starting at row 0, each code followed by a space.

    >>> render_board(Board.initial()).splitlines()[0]
    'WR WN WB WQ WK WB WN WR '
    """
    lines: list[str] = []
    for rank in range(8):
        line = "".join(square_code(board[make_square(file, rank)]) + " " for file in range(8))
        lines.append(line + "\n")
    return "".join(lines)


# ── FEN (piece placement + side to move only) ────────────────────────────────


def board_from_fen(fen: str) -> Board:
    """Build a board from the placement field of a FEN string."""
    placement = fen.split()[0] if fen.strip() else ""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"FEN must have 8 ranks, got {len(ranks)}")

    board = Board()
    for rank_idx, rank_str in enumerate(reversed(ranks)):
        file_idx = 0
        for ch in rank_str:
            if ch.isdigit():
                file_idx += int(ch)
            else:
                if file_idx >= 8:
                    raise ValueError(f"Too many squares in rank {rank_idx + 1}")
                board[make_square(file_idx, rank_idx)] = Piece.from_fen_char(ch).value
                file_idx += 1
        if file_idx != 8:
            raise ValueError(f"Rank {rank_idx + 1} has {file_idx} squares, expected 8")
    return board


def board_to_fen(board: Board) -> str:
    """Placement field of a FEN string."""
    ranks: list[str] = []
    for rank_idx in range(7, -1, -1):
        empty = 0
        out = ""
        for file_idx in range(8):
            value = board[make_square(file_idx, rank_idx)]
            if value == 0:
                empty += 1
                continue
            if empty:
                out += str(empty)
                empty = 0
            out += Piece.from_value(value).fen_char
        if empty:
            out += str(empty)
        ranks.append(out)
    return "/".join(ranks)


def position_from_fen(fen: str, player: Color = Color.WHITE) -> Position:
    """Position from a FEN string; the side field sets whose turn it is."""
    parts = fen.split()
    turn = Color.WHITE
    if len(parts) > 1:
        if parts[1] not in ("w", "b"):
            raise ValueError(f"Invalid side to move: {parts[1]!r}")
        turn = Color.WHITE if parts[1] == "w" else Color.BLACK
    return Position(board_from_fen(fen), turn=turn, player=player)


# ── Move requests ────────────────────────────────────────────────────────────


def parse_directive(token: str) -> Directive:
    """Parse ``xBP`` / ``yWQ`` style tokens."""
    if len(token) != 3 or token[0] not in _DIRECTIVE_KINDS:
        raise ValueError(f"Invalid directive token: {token!r}")
    return Directive(_DIRECTIVE_KINDS[token[0]], Piece.from_code(token[1:]))


def parse_move_request(text: str) -> MoveRequest:
    """Parse e.g. ``WPe2-e4``, ``WQd1-h5xBP`` or ``WPg7-h8xBRyWQ``."""
    match = _REQUEST_RE.match(text)
    if match is None:
        raise ValueError(f"Malformed move request: {text!r}")

    primary = match["primary"]
    secondary = match["secondary"]
    return MoveRequest(
        piece=Piece.from_code(match["piece"]),
        from_sq=parse_square(match["start"]),
        to_sq=parse_square(match["end"]),
        primary=parse_directive(primary) if primary else None,
        secondary=parse_directive(secondary) if secondary else None,
    )
