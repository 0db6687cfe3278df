"""Qt bridge to run opponent moves in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessbox.game.controller import GameController
from chessbox.game.models import GameError


class OpponentWorker(QObject):
    """Thread-affine worker that plays opponent moves on demand.

    The worker shares its :class:`GameController` with the caller; the
    controller's lock keeps the two sides from interleaving.
    """

    move_ready = pyqtSignal(int, object)
    no_move = pyqtSignal(int, bool)
    move_error = pyqtSignal(int, str)

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller

    @pyqtSlot(int)
    def request_move(self, request_id: int) -> None:
        """Play the opponent's move and emit the outcome."""
        try:
            outcome = self._controller.opponent_move()
        except GameError as exc:
            self.move_error.emit(request_id, str(exc))
            return

        if outcome.no_moves_available:
            self.no_move.emit(request_id, outcome.is_checkmate)
            return

        self.move_ready.emit(request_id, outcome)
