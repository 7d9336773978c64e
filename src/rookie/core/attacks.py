"""Attack detection: is a square attacked, is a king in check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.piece import Piece

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.types import Square


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _first_piece_on_ray(
    board: Board, sq: Square, d_row: int, d_col: int
) -> Piece | None:
    cur = sq.offset(d_row, d_col)
    while cur.on_board:
        piece = board.piece_at(cur)
        if piece is not None:
            return piece
        cur = cur.offset(d_row, d_col)
    return None


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    pawn = Piece(by_color, PieceType.PAWN)
    knight = Piece(by_color, PieceType.KNIGHT)
    king = Piece(by_color, PieceType.KING)
    queen = Piece(by_color, PieceType.QUEEN)

    # A pawn attacks one row ahead of itself, so it sits one row behind *sq*.
    source_row = -by_color.forward
    for d_col in (-1, 1):
        if board.piece_at(sq.offset(source_row, d_col)) == pawn:
            return True

    for d_row, d_col in KNIGHT_OFFSETS:
        if board.piece_at(sq.offset(d_row, d_col)) == knight:
            return True

    rook = Piece(by_color, PieceType.ROOK)
    for d_row, d_col in ROOK_DIRS:
        if _first_piece_on_ray(board, sq, d_row, d_col) in (rook, queen):
            return True

    bishop = Piece(by_color, PieceType.BISHOP)
    for d_row, d_col in BISHOP_DIRS:
        if _first_piece_on_ray(board, sq, d_row, d_col) in (bishop, queen):
            return True

    for d_row, d_col in KING_OFFSETS:
        if board.piece_at(sq.offset(d_row, d_col)) == king:
            return True

    return False


def is_king_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)
