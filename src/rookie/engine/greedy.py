"""Greedy single-ply move selection by capture value."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from rookie.core.move_generator import MoveGenerator
from rookie.engine.search import IEngine

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.move import Move

_LOGGER = logging.getLogger(__name__)


class GreedyEngine(IEngine):
    """Plays the most valuable capture available, or a random quiet move.

    Moves are scored by :class:`MoveGenerator` (captured piece value, 1 for
    a quiet move). Every move tied at the best score is equally likely.
    There is no lookahead.

    Args:
        rng: Random source used to break ties. Pass a seeded
            :class:`random.Random` for reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select(self, board: Board) -> Move | None:
        moves = MoveGenerator(board).legal_moves()
        if not moves:
            return None

        best_score = max(move.score for move in moves)
        best_moves = [move for move in moves if move.score == best_score]
        chosen = self._rng.choice(best_moves)
        _LOGGER.debug(
            "Selected %s (score %d) among %d tied of %d legal",
            chosen,
            best_score,
            len(best_moves),
            len(moves),
        )
        return chosen
