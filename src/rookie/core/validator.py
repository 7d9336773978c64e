"""Move validation: movement patterns plus the self-check rule.

Checks run in a fixed order and the first failure wins, so a given
(from, to) pair always produces the same error:

1. both squares on the board
2. a piece on the origin
3. that piece belongs to the side to move
4. the destination does not hold one of the mover's own pieces
5. origin and destination differ
6. the piece's movement pattern allows the move
7. the move does not leave the mover's king in check

Castling, en passant and promotion are not part of the rules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rookie.core.attacks import is_king_in_check
from rookie.core.enums import PieceType
from rookie.core.errors import (
    EmptyOriginError,
    IllegalMoveError,
    IllegalPatternError,
    NullMoveError,
    OutOfBoundsError,
    OwnPieceCaptureError,
    SelfCheckError,
    UnknownPieceError,
    WrongSideToMoveError,
)
from rookie.core.types import Square

if TYPE_CHECKING:
    from rookie.core.board import Board


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the two is empty."""
    step_row = _sign(to_sq.row - from_sq.row)
    step_col = _sign(to_sq.col - from_sq.col)
    cur = from_sq.offset(step_row, step_col)
    while cur != to_sq:
        if not board.is_empty(cur):
            return False
        cur = cur.offset(step_row, step_col)
    return True


# -- Piece patterns ---------------------------------------------------------


def _pawn_pattern(board: Board, from_sq: Square, to_sq: Square) -> bool:
    pawn = board.piece_at(from_sq)
    assert pawn is not None
    direction = pawn.color.forward
    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col

    if d_col == 0:
        if d_row == direction:
            return board.is_empty(to_sq)
        if d_row == 2 * direction and from_sq.row == pawn.color.pawn_home_row:
            return board.is_empty(from_sq.offset(direction, 0)) and board.is_empty(
                to_sq
            )
        return False

    # Diagonal: only as a capture. Own-piece targets are rejected earlier.
    return abs(d_col) == 1 and d_row == direction and not board.is_empty(to_sq)


def _rook_pattern(board: Board, from_sq: Square, to_sq: Square) -> bool:
    if from_sq.row != to_sq.row and from_sq.col != to_sq.col:
        return False
    return _path_clear(board, from_sq, to_sq)


def _knight_pattern(board: Board, from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(from_sq.row - to_sq.row)
    d_col = abs(from_sq.col - to_sq.col)
    return (d_row, d_col) in ((2, 1), (1, 2))


def _bishop_pattern(board: Board, from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(from_sq.row - to_sq.row)
    if d_row == 0 or d_row != abs(from_sq.col - to_sq.col):
        return False
    return _path_clear(board, from_sq, to_sq)


def _queen_pattern(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return _rook_pattern(board, from_sq, to_sq) or _bishop_pattern(
        board, from_sq, to_sq
    )


def _king_pattern(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return abs(from_sq.row - to_sq.row) <= 1 and abs(from_sq.col - to_sq.col) <= 1


_PATTERNS: dict[PieceType, Callable[[Board, Square, Square], bool]] = {
    PieceType.PAWN: _pawn_pattern,
    PieceType.KNIGHT: _knight_pattern,
    PieceType.BISHOP: _bishop_pattern,
    PieceType.ROOK: _rook_pattern,
    PieceType.QUEEN: _queen_pattern,
    PieceType.KING: _king_pattern,
}


# -- Public API -------------------------------------------------------------


def leaves_king_in_check(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Would moving *from_sq* → *to_sq* leave the side to move in check?"""
    with board.probe_move(from_sq, to_sq):
        return is_king_in_check(board, board.side_to_move)


def validate(board: Board, from_sq: Square, to_sq: Square) -> None:
    """Raise an :class:`IllegalMoveError` subclass unless the move is legal."""
    from_sq = Square(*from_sq)
    to_sq = Square(*to_sq)
    if not (from_sq.on_board and to_sq.on_board):
        raise OutOfBoundsError(from_sq, to_sq)

    piece = board.piece_at(from_sq)
    if piece is None:
        raise EmptyOriginError(from_sq, to_sq)
    if piece.color != board.side_to_move:
        raise WrongSideToMoveError(from_sq, to_sq, piece)

    target = board.piece_at(to_sq)
    if target is not None and target.color == piece.color:
        raise OwnPieceCaptureError(from_sq, to_sq)

    if from_sq == to_sq:
        raise NullMoveError(from_sq, to_sq)

    pattern = _PATTERNS.get(piece.piece_type)
    if pattern is None:
        raise UnknownPieceError(from_sq, to_sq, piece)
    if not pattern(board, from_sq, to_sq):
        raise IllegalPatternError(from_sq, to_sq, piece)

    if leaves_king_in_check(board, from_sq, to_sq):
        raise SelfCheckError(from_sq, to_sq)


def is_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Boolean form of :func:`validate`."""
    try:
        validate(board, from_sq, to_sq)
    except IllegalMoveError:
        return False
    return True
