"""Board - piece placement, side to move and move bookkeeping on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from rookie.core.enums import Color, PieceType
from rookie.core.piece import Piece
from rookie.core.types import BOARD_SIZE, Square, all_squares

NO_MOVE_NOTATION = "N/A"

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view handed to presentation code."""

    rows: tuple[tuple[Piece | None, ...], ...]
    side_to_move: Color
    in_check: bool
    last_move: str
    captured_by_white: tuple[Piece, ...]
    captured_by_black: tuple[Piece, ...]


class Board:
    """Mutable 8x8 board with a cached king square per color.

    Row 0 is rank 8 and column 0 is the a-file. Reads outside the board
    return ``None``; writes outside the board raise :class:`IndexError`.
    """

    __slots__ = (
        "_grid",
        "_king_squares",
        "side_to_move",
        "captured",
        "last_move_notation",
    )

    def __init__(self, side_to_move: Color = Color.WHITE) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._king_squares: dict[Color, Square | None] = {
            Color.WHITE: None,
            Color.BLACK: None,
        }
        self.side_to_move = side_to_move
        # [color] -> pieces captured *by* that color, in capture order.
        self.captured: dict[Color, list[Piece]] = {Color.WHITE: [], Color.BLACK: []}
        self.last_move_notation = NO_MOVE_NOTATION

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        if not sq.on_board:
            return None
        return self._grid[sq.row][sq.col]

    def place(self, sq: Square, piece: Piece | None) -> None:
        if not sq.on_board:
            raise IndexError(f"Square off the board: {tuple(sq)}")

        old_piece = self._grid[sq.row][sq.col]
        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[old_piece.color] == sq
        ):
            self._king_squares[old_piece.color] = None

        self._grid[sq.row][sq.col] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[piece.color] = sq

    __getitem__ = piece_at
    __setitem__ = place

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [
            sq
            for sq in all_squares()
            if (p := self._grid[sq.row][sq.col]) is not None and p.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Return the cached king square for *color*."""
        sq = self._king_squares[color]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Scoped probing -----------------------------------------------------

    @contextmanager
    def probe_move(self, from_sq: Square, to_sq: Square) -> Iterator[Board]:
        """Temporarily relocate the piece on *from_sq* to *to_sq*.

        Placement and king cache are restored when the block exits, whether
        it returns normally or raises.
        """
        moving = self.piece_at(from_sq)
        target = self.piece_at(to_sq)
        saved_kings = dict(self._king_squares)
        self.place(to_sq, moving)
        self.place(from_sq, None)
        try:
            yield self
        finally:
            self._grid[from_sq.row][from_sq.col] = moving
            self._grid[to_sq.row][to_sq.col] = target
            self._king_squares = saved_kings

    # -- Copying / snapshots ------------------------------------------------

    def copy(self) -> Board:
        b = Board(self.side_to_move)
        b._grid = [row.copy() for row in self._grid]
        b._king_squares = dict(self._king_squares)
        b.captured = {color: pieces.copy() for color, pieces in self.captured.items()}
        b.last_move_notation = self.last_move_notation
        return b

    def snapshot(self, in_check: bool = False) -> BoardSnapshot:
        return BoardSnapshot(
            rows=tuple(tuple(row) for row in self._grid),
            side_to_move=self.side_to_move,
            in_check=in_check,
            last_move=self.last_move_notation,
            captured_by_white=tuple(self.captured[Color.WHITE]),
            captured_by_black=tuple(self.captured[Color.BLACK]),
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b.place(Square(0, col), Piece(Color.BLACK, pt))
            b.place(Square(1, col), Piece(Color.BLACK, PieceType.PAWN))
            b.place(Square(6, col), Piece(Color.WHITE, PieceType.PAWN))
            b.place(Square(7, col), Piece(Color.WHITE, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else "." for p in row)
            rows.append(f"{BOARD_SIZE - r} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
