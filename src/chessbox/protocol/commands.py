"""Text command protocol.

Each command is a two-digit code followed by its arguments; each reply is
a newline-terminated line (or the board dump for ``01``)::

    00 W|B          start a new game as White or Black
    01              dump the board
    02 WPe2-e4      submit a player move (optional xXX / yXX tokens)
    03              let the opponent move
    04              resign; the game ends

``NOMOVES`` answers every command once the game has ended without mate,
whether the opponent or the player was the side left with no legal move.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessbox.core.enums import Color
from chessbox.core.notation import parse_move_request
from chessbox.game.controller import GameController
from chessbox.game.models import GameError, MoveOutcome
from chessbox.game.state import GameState

_LOGGER = logging.getLogger(__name__)

NEW_GAME = "New game\n"
OK = "OK\n"
CHECK = "CHECK\n"
MATE = "MATE\n"
NO_GAME = "NOGAME\n"
OUT_OF_TURN = "OOT\n"
INVALID_FORMAT = "INVFMT\n"
ILLEGAL_MOVE = "ILLMOVE\n"
NO_MOVES = "NOMOVES\n"


class CommandDispatcher:
    """Maps command strings onto a :class:`GameController`."""

    __slots__ = ("_controller", "_handlers")

    def __init__(self, controller: GameController | None = None) -> None:
        self._controller = controller or GameController()
        self._handlers: dict[str, Callable[[str], str]] = {
            "00": self._new_game,
            "01": self._dump_board,
            "02": self._player_move,
            "03": self._opponent_move,
            "04": self._resign,
        }

    @property
    def controller(self) -> GameController:
        return self._controller

    def handle(self, command: str) -> str:
        """Execute one command and return the reply text."""
        text = command.strip()
        _LOGGER.debug("Command: %r", text)
        handler = self._handlers.get(text[:2])
        if handler is None:
            return INVALID_FORMAT
        try:
            return handler(text[2:].strip())
        except GameError as exc:
            # Raced with another caller between the guard and the call.
            _LOGGER.debug("Command %r refused: %s", text, exc)
            with self._controller.session() as state:
                return self._refusal(state, None) or ILLEGAL_MOVE

    # ── Handlers ─────────────────────────────────────────────────────────

    def _new_game(self, args: str) -> str:
        if args not in ("W", "B"):
            return INVALID_FORMAT
        self._controller.new_game(Color.from_letter(args))
        return NEW_GAME

    def _dump_board(self, _args: str) -> str:
        with self._controller.session() as state:
            if not state.is_started:
                return NO_GAME
            if state.is_checkmate:
                return MATE
            return self._controller.render_board()

    def _player_move(self, args: str) -> str:
        with self._controller.session() as state:
            refusal = self._refusal(state, state.player)
            if refusal is not None:
                return refusal
            try:
                request = parse_move_request(args)
            except ValueError:
                return INVALID_FORMAT
            if request.piece.color != state.player:
                return ILLEGAL_MOVE
            outcome = self._controller.submit_move(request)
            if not outcome.applied:
                _LOGGER.debug("Illegal move %s: %s", request, outcome.reason)
                return ILLEGAL_MOVE
            return self._verdict(outcome)

    def _opponent_move(self, _args: str) -> str:
        with self._controller.session() as state:
            refusal = self._refusal(state, state.opponent)
            if refusal is not None:
                return refusal
            outcome = self._controller.opponent_move()
            if outcome.no_moves_available:
                return MATE if outcome.is_checkmate else NO_MOVES
            return self._verdict(outcome)

    def _resign(self, _args: str) -> str:
        with self._controller.session() as state:
            refusal = self._refusal(state, state.player)
            if refusal is not None:
                return refusal
            self._controller.reset()
            return OK

    # ── Internal helpers ─────────────────────────────────────────────────

    @staticmethod
    def _refusal(state: GameState, color: Color | None) -> str | None:
        """Reply that blocks a command, or ``None`` if it may proceed."""
        if not state.is_started:
            return NO_GAME
        if state.is_checkmate:
            return MATE
        if state.is_game_over:
            return NO_MOVES
        if color is not None and state.turn != color:
            return OUT_OF_TURN
        return None

    @staticmethod
    def _verdict(outcome: MoveOutcome) -> str:
        if outcome.is_checkmate:
            return MATE
        if outcome.in_check:
            return CHECK
        return OK
