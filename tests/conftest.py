"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys

import pytest

from chessbox.engine.settings import OpponentSettings
from chessbox.game.controller import GameController

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture
def controller() -> GameController:
    """A controller whose opponent is seeded for repeatable games."""
    return GameController(OpponentSettings(seed=1234))
