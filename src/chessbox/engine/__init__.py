"""Opponent package: random move selection and its settings.

The PyQt6 worker bridge lives in :mod:`chessbox.engine.qt_bridge` and is
imported on demand so the rules engine runs without Qt installed.
"""

from chessbox.engine.random_opponent import RandomOpponent
from chessbox.engine.settings import IOpponent, OpponentSettings, PromotionPolicy

__all__ = [
    "IOpponent",
    "OpponentSettings",
    "PromotionPolicy",
    "RandomOpponent",
]
