"""Tests for the stdin/stdout command loop."""

import io

from chessbox.app import _parse_args, serve
from chessbox.engine.settings import PromotionPolicy
from chessbox.protocol.commands import CommandDispatcher


class TestServe:
    def test_one_reply_per_line(self) -> None:
        stdin = io.StringIO("00 W\n\n02 WPe2-e4\n99\n")
        stdout = io.StringIO()
        serve(CommandDispatcher(), stdin, stdout)
        assert stdout.getvalue() == "New game\nOK\nINVFMT\n"


class TestArgs:
    def test_defaults(self) -> None:
        args = _parse_args([])
        assert args.seed is None
        assert PromotionPolicy(args.promotion) == PromotionPolicy.RANDOM

    def test_flags(self) -> None:
        args = _parse_args(["--seed", "9", "--promotion", "queen", "--log-level", "DEBUG"])
        assert args.seed == 9
        assert PromotionPolicy(args.promotion) == PromotionPolicy.QUEEN
        assert args.log_level == "DEBUG"
