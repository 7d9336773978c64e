"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import GameResult
from rookie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from rookie.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # The only terminal states are checkmate and stalemate. Repetition,
    # the fifty-move rule and insufficient material are not detected.

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return MoveGenerator(board).is_in_check()

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        gen = MoveGenerator(board)
        return gen.is_in_check() and not gen.has_legal_move()

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        gen = MoveGenerator(board)
        return not gen.is_in_check() and not gen.has_legal_move()

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        gen = MoveGenerator(board)
        if gen.has_legal_move():
            return GameResult.IN_PROGRESS
        if gen.is_in_check():
            return GameResult.win_for(board.side_to_move.opposite)
        return GameResult.DRAW  # stalemate
