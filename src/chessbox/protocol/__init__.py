"""Line-oriented text protocol over a :class:`~chessbox.game.GameController`."""

from chessbox.protocol.commands import CommandDispatcher

__all__ = ["CommandDispatcher"]
