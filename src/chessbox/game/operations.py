"""Game operations on a bare :class:`GameState`.

These functions do no locking. ``GameController`` wraps them for callers
that share one game between threads.
"""

from __future__ import annotations

import logging

from chessbox.core.enums import Color, GameResult
from chessbox.core.errors import IllegalMoveError, RejectReason
from chessbox.core.move import Move, MoveRequest
from chessbox.core.notation import render_board as _render
from chessbox.core.rules import Rules
from chessbox.core.validator import MoveValidator
from chessbox.engine.settings import IOpponent
from chessbox.game.models import GameOverError, MoveOutcome, OutOfTurnError
from chessbox.game.state import GameState

_LOGGER = logging.getLogger(__name__)
_VALIDATOR = MoveValidator()


def new_game(player_color: Color, fen: str | None = None) -> GameState:
    """Fresh game with *player_color* as the human side."""
    state = GameState()
    state.setup(player_color, fen)
    return state


def submit_move(
    state: GameState,
    request: MoveRequest,
    validator: MoveValidator = _VALIDATOR,
) -> MoveOutcome:
    """Validate *request* and execute it when legal."""
    if state.is_game_over:
        raise GameOverError("Game is over")
    if state.turn != state.player:
        raise OutOfTurnError(f"It is {state.turn}'s turn, not the player's")
    if request.piece.color != state.turn:
        raise OutOfTurnError(f"It is {state.turn}'s turn")

    try:
        move = validator.validate(state.board, request)
    except IllegalMoveError as exc:
        return MoveOutcome.rejected(exc.reason, in_check=state.in_check)

    record = state.apply_move(move)
    _LOGGER.info("Move %s", record.notation)
    return _applied(state, move)


def opponent_move(state: GameState, opponent: IOpponent) -> MoveOutcome:
    """Let *opponent* pick and execute a move for the opponent's color.

    A game already drawn because the opponent has nothing to play reports
    ``no_moves_available`` again instead of raising.
    """
    if state.is_game_over and not _opponent_stalemated(state):
        raise GameOverError("Game is over")
    if state.turn != state.opponent:
        raise OutOfTurnError(f"It is {state.turn}'s turn, not the opponent's")

    move = None if state.is_game_over else opponent.choose(state.position)
    if move is None:
        if not state.is_game_over:
            result = Rules.game_result(state.position)
            if result == GameResult.IN_PROGRESS:
                result = GameResult.DRAW
            state.conclude(result)
        return MoveOutcome(
            applied=False,
            in_check=state.in_check,
            is_checkmate=state.is_checkmate,
            no_moves_available=True,
            reason=RejectReason.NO_LEGAL_MOVES,
            result=state.result,
        )

    record = state.apply_move(move)
    _LOGGER.info("Opponent move %s", record.notation)
    return _applied(state, move)


def render_board(state: GameState) -> str:
    return _render(state.board)


def is_game_over(state: GameState) -> bool:
    return state.is_game_over


def _applied(state: GameState, move: Move) -> MoveOutcome:
    if state.is_game_over:
        _LOGGER.info("Game over: %s", state.result.name)
    return MoveOutcome(
        applied=True,
        in_check=state.in_check,
        is_checkmate=state.is_checkmate,
        move=move,
        result=state.result,
    )


def _opponent_stalemated(state: GameState) -> bool:
    return state.result == GameResult.DRAW and state.turn == state.opponent
