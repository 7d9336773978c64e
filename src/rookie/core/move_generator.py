"""Legal move enumeration with capture scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.attacks import is_king_in_check
from rookie.core.move import Move
from rookie.core.types import Square, all_squares
from rookie.core.validator import is_legal

if TYPE_CHECKING:
    from rookie.core.board import Board

QUIET_MOVE_SCORE = 1


class MoveGenerator:
    """Generates legal moves for the side to move on a :class:`Board`.

    Every (origin, destination) pair is run through the validator, whose
    self-check probe mutates the board and always restores it before
    returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self) -> list[Move]:
        """All legal moves, origin row-major then destination row-major."""
        board = self._board
        legal: list[Move] = []
        append_legal = legal.append
        destinations = all_squares()

        for from_sq in board.pieces(board.side_to_move):
            for to_sq in destinations:
                if is_legal(board, from_sq, to_sq):
                    append_legal(Move(from_sq, to_sq, self._score(to_sq)))
        return legal

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        board = self._board
        destinations = all_squares()
        return any(
            is_legal(board, from_sq, to_sq)
            for from_sq in board.pieces(board.side_to_move)
            for to_sq in destinations
        )

    def is_in_check(self) -> bool:
        """Is the side to move currently in check?"""
        return is_king_in_check(self._board, self._board.side_to_move)

    # -- Helpers -------------------------------------------------------------

    def _score(self, to_sq: Square) -> int:
        target = self._board.piece_at(to_sq)
        return target.value if target is not None else QUIET_MOVE_SCORE


def legal_moves(board: Board) -> list[Move]:
    """Shorthand for ``MoveGenerator(board).legal_moves()``."""
    return MoveGenerator(board).legal_moves()
