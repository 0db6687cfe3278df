"""Application entry point: the text protocol over stdin/stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from chessbox.engine.settings import OpponentSettings, PromotionPolicy
from chessbox.game.controller import GameController
from chessbox.protocol.commands import CommandDispatcher

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chessbox",
        description="Play chess against a random opponent over a line protocol.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the opponent's move choice",
    )
    parser.add_argument(
        "--promotion",
        choices=[policy.value for policy in PromotionPolicy],
        default=PromotionPolicy.RANDOM.value,
        help="how the opponent picks a promotion piece",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def serve(
    dispatcher: CommandDispatcher,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Answer one command per input line until EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    for line in stdin:
        if not line.strip():
            continue
        stdout.write(dispatcher.handle(line))
        stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the chessbox command loop."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = OpponentSettings(
        promotion=PromotionPolicy(args.promotion),
        seed=args.seed,
    )
    _LOGGER.info("Starting with %s", settings)
    serve(CommandDispatcher(GameController(settings)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
