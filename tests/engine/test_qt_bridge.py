"""Tests for the Qt opponent worker."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6")

from PyQt6.QtTest import QSignalSpy  # noqa: E402

from chessbox.core.enums import Color  # noqa: E402
from chessbox.core.notation import parse_move_request  # noqa: E402
from chessbox.engine.qt_bridge import OpponentWorker  # noqa: E402
from chessbox.game.controller import GameController  # noqa: E402


class TestOpponentWorker:
    def test_emits_move_ready(self, controller: GameController) -> None:
        controller.new_game(Color.BLACK)
        worker = OpponentWorker(controller)

        ready = QSignalSpy(worker.move_ready)
        errors = QSignalSpy(worker.move_error)

        worker.request_move(3)

        assert len(ready) == 1
        assert ready[0][0] == 3
        assert ready[0][1].applied
        assert len(errors) == 0
        assert controller.state.turn == Color.BLACK

    def test_emits_no_move_on_stalemate(self, controller: GameController) -> None:
        controller.new_game(Color.WHITE, "7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        worker = OpponentWorker(controller)

        no_move = QSignalSpy(worker.no_move)
        ready = QSignalSpy(worker.move_ready)

        worker.request_move(11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert no_move[0][1] is False
        assert len(ready) == 0

    def test_emits_error_without_game(self, controller: GameController) -> None:
        worker = OpponentWorker(controller)
        errors = QSignalSpy(worker.move_error)

        worker.request_move(7)

        assert len(errors) == 1
        assert errors[0][0] == 7

    def test_emits_no_move_after_stalemating_move(
        self, controller: GameController
    ) -> None:
        controller.new_game(Color.WHITE, "7k/8/5K2/8/8/8/6Q1/8 w - - 0 1")
        controller.submit_move(parse_move_request("WQg2-g6"))
        worker = OpponentWorker(controller)

        no_move = QSignalSpy(worker.no_move)
        errors = QSignalSpy(worker.move_error)

        worker.request_move(5)

        assert len(no_move) == 1
        assert no_move[0][0] == 5
        assert len(errors) == 0
