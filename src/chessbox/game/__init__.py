"""Game management layer — state, operations, controller.

Quick start::

    from chessbox.core import Color, parse_move_request
    from chessbox.game import GameController

    ctrl = GameController()
    ctrl.new_game(Color.WHITE)
    ctrl.submit_move(parse_move_request("WPe2-e4"))
    ctrl.opponent_move()
"""

from chessbox.game.controller import GameController, GameEvents
from chessbox.game.models import (
    GameError,
    GameOverError,
    GamePhase,
    MoveOutcome,
    NoActiveGameError,
    OutOfTurnError,
)
from chessbox.game.operations import (
    is_game_over,
    new_game,
    opponent_move,
    render_board,
    submit_move,
)
from chessbox.game.state import GameState, MoveRecord

__all__ = [
    # Models
    "GameError",
    "GameOverError",
    "GamePhase",
    "MoveOutcome",
    "NoActiveGameError",
    "OutOfTurnError",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    # Operations
    "is_game_over",
    "new_game",
    "opponent_move",
    "render_board",
    "submit_move",
]
