"""FEN placement parsing and coordinate move-text decoding."""

from __future__ import annotations

from rookie.core.board import Board
from rookie.core.enums import Color, PieceType
from rookie.core.errors import MoveSyntaxError
from rookie.core.piece import Piece
from rookie.core.types import BOARD_SIZE, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


# ── FEN ──────────────────────────────────────────────────────────────────────


def board_from_fen(fen: str) -> Board:
    """Parse the placement and side-to-move fields of a FEN string.

    Castling, en passant and clock fields are accepted but ignored.
    """
    parts = fen.split()
    if not (2 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 2-6 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 2. Piece placement; FEN lists rank 8 first, which is row 0.
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board(side)
    kings = {Color.WHITE: 0, Color.BLACK: 0}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch)
                if piece.piece_type == PieceType.KING:
                    kings[piece.color] += 1
                board.place(Square(row, col), piece)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for color, count in kings.items():
        if count != 1:
            raise ValueError(f"FEN must contain exactly one {color} king: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise placement and side to move; the remaining fields are fixed."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board.piece_at(Square(row, col))
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    side_str = "w" if board.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str} - - 0 1"


# ── Move text ────────────────────────────────────────────────────────────────


def parse_move_text(text: str) -> tuple[Square, Square]:
    """Decode coordinate move text such as ``e2e4`` into two squares."""
    stripped = text.strip()
    if len(stripped) != 4:
        raise MoveSyntaxError(text, "Input must be 4 chars (e.g., e2e4).")

    start, end = stripped[:2], stripped[2:]
    try:
        from_sq = parse_square(start)
    except ValueError:
        raise MoveSyntaxError(
            text, f"Invalid start square notation: {start!r}."
        ) from None
    try:
        to_sq = parse_square(end)
    except ValueError:
        raise MoveSyntaxError(text, f"Invalid end square notation: {end!r}.") from None
    return from_sq, to_sq
