"""Move execution for already-validated moves."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rookie.core.attacks import is_king_in_check
from rookie.core.types import Square, square_name

if TYPE_CHECKING:
    from rookie.core.board import Board

_LOGGER = logging.getLogger(__name__)


def apply_move(board: Board, from_sq: Square, to_sq: Square) -> str:
    """Play *from_sq* → *to_sq* on *board* and return its notation.

    The move must have passed :func:`rookie.core.validator.validate`;
    nothing is re-checked here and there is no rollback.
    """
    from_sq = Square(*from_sq)
    to_sq = Square(*to_sq)
    mover = board.side_to_move
    piece = board.piece_at(from_sq)
    captured = board.piece_at(to_sq)

    if captured is not None:
        board.captured[mover].append(captured)

    # Board.place keeps the king cache in step when a king moves.
    board.place(to_sq, piece)
    board.place(from_sq, None)

    notation = square_name(from_sq)
    notation += "x" if captured is not None else "-"
    notation += square_name(to_sq)
    if is_king_in_check(board, mover.opposite):
        notation += "+"

    board.last_move_notation = notation
    board.side_to_move = mover.opposite
    _LOGGER.debug("%s played %s", mover, notation)
    return notation
