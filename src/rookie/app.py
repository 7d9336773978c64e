"""Application entry point: plays a console game against the greedy engine."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import TextIO

from rookie.core.board import BoardSnapshot
from rookie.core.enums import Color
from rookie.core.piece import Piece
from rookie.engine.greedy import GreedyEngine
from rookie.game.config import GameConfig
from rookie.game.controller import GameController
from rookie.game.interfaces import GameOutcome, IMoveInput, IRenderer
from rookie.game.player import AIPlayer, HumanPlayer

_LOGGER = logging.getLogger(__name__)


class ConsoleRenderer(IRenderer):
    """Plain-text board diagram, rank 8 on top."""

    __slots__ = ("_out", "_use_unicode", "_human_color")

    def __init__(
        self,
        out: TextIO | None = None,
        use_unicode: bool = True,
        human_color: Color = Color.WHITE,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._use_unicode = use_unicode
        self._human_color = human_color

    def _glyph(self, piece: Piece | None) -> str:
        if piece is None:
            return "."
        return piece.symbol if self._use_unicode else str(piece)

    def render(self, snapshot: BoardSnapshot) -> None:
        lines = [
            "Captured by White: "
            + " ".join(self._glyph(p) for p in snapshot.captured_by_white),
            "   +-----------------+",
        ]
        for row_idx, row in enumerate(snapshot.rows):
            rank = 8 - row_idx
            cells = " ".join(self._glyph(p) for p in row)
            line = f" {rank} | {cells} | {rank}"
            if row_idx == 0:
                line += f"    Last Move: {snapshot.last_move}"
            elif row_idx == 2:
                who = "You" if snapshot.side_to_move == self._human_color else "AI"
                line += f"    >>> {str(snapshot.side_to_move).capitalize()}'s Turn ({who})"
                if snapshot.in_check:
                    line += " (CHECK!)"
            lines.append(line)
        lines.append("   +-----------------+")
        lines.append("     a b c d e f g h")
        lines.append(
            "Captured by Black: "
            + " ".join(self._glyph(p) for p in snapshot.captured_by_black)
        )
        print("\n".join(lines), file=self._out)

    def show_error(self, message: str) -> None:
        print(f" (!) Invalid Move: {message}", file=self._out)

    def show_result(self, outcome: GameOutcome) -> None:
        print(outcome.describe(), file=self._out)
        print("Game Over.", file=self._out)


class ConsoleInput(IMoveInput):
    """Reads one command per line. End of input counts as ``exit``."""

    __slots__ = ("_in", "_out")

    def __init__(self, stream: TextIO | None = None, out: TextIO | None = None) -> None:
        self._in = stream if stream is not None else sys.stdin
        self._out = out if out is not None else sys.stdout

    def read_command(self, color: Color) -> str:
        print(" Enter move (e.g. e2e4), 'resign', or 'exit': ", end="", file=self._out)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return "exit"
        return line.strip()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rookie", description="Play chess against a greedy capture engine."
    )
    parser.add_argument("--seed", type=int, default=None, help="engine RNG seed")
    parser.add_argument(
        "--no-delay", action="store_true", help="skip the engine's thinking pause"
    )
    parser.add_argument(
        "--ascii", action="store_true", help="draw pieces as letters"
    )
    parser.add_argument("--black", action="store_true", help="play the black side")
    parser.add_argument("--log-level", default=None, help="logging level name")
    return parser.parse_args(argv)


def build_config(argv: list[str] | None = None) -> GameConfig:
    """Environment defaults overridden by command-line flags."""
    args = _parse_args(argv)
    base = GameConfig.from_env()
    return GameConfig(
        human_color=Color.BLACK if args.black else base.human_color,
        ai_delay_ms=0 if args.no_delay else base.ai_delay_ms,
        seed=args.seed if args.seed is not None else base.seed,
        use_unicode=base.use_unicode and not args.ascii,
        log_level=(args.log_level or base.log_level).upper(),
    )


def main(argv: list[str] | None = None) -> int:
    """Launch a console game."""
    config = build_config(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = GreedyEngine(random.Random(config.seed))
    human = HumanPlayer(config.human_color, "You")
    ai = AIPlayer(config.human_color.opposite, engine)
    white, black = (human, ai) if config.human_color == Color.WHITE else (ai, human)

    controller = GameController(
        renderer=ConsoleRenderer(
            use_unicode=config.use_unicode, human_color=config.human_color
        ),
        move_input=ConsoleInput(),
        config=config,
    )
    controller.new_game(white, black)
    try:
        controller.run()
    except KeyboardInterrupt:
        _LOGGER.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
