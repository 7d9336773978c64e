"""Exception types raised by the rules engine and the move-text decoder."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.types import square_name

if TYPE_CHECKING:
    from rookie.core.enums import PieceType
    from rookie.core.piece import Piece
    from rookie.core.types import Square


class RookieError(Exception):
    """Base class for every error raised by this package."""


class IllegalMoveError(RookieError, ValueError):
    """A candidate move was rejected. Recoverable: the turn does not advance."""

    def __init__(self, from_sq: Square, to_sq: Square, message: str) -> None:
        super().__init__(message)
        self.from_sq = from_sq
        self.to_sq = to_sq
        self.message = message


class OutOfBoundsError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            from_sq,
            to_sq,
            f"Coordinates out of bounds: {tuple(from_sq)} -> {tuple(to_sq)}.",
        )


class EmptyOriginError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            from_sq, to_sq, f"No piece at starting square {square_name(from_sq)}."
        )


class WrongSideToMoveError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square, piece: Piece) -> None:
        super().__init__(
            from_sq,
            to_sq,
            f"It's not {piece.color}'s turn ({piece} at {square_name(from_sq)}).",
        )
        self.piece = piece


class OwnPieceCaptureError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            from_sq,
            to_sq,
            f"Cannot capture your own piece at {square_name(to_sq)}.",
        )


class NullMoveError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            from_sq, to_sq, "Start and end square cannot be the same."
        )


class IllegalPatternError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square, piece: Piece) -> None:
        super().__init__(
            from_sq,
            to_sq,
            f"Invalid move pattern for {piece} from {square_name(from_sq)} "
            f"to {square_name(to_sq)}.",
        )
        self.piece = piece

    @property
    def piece_type(self) -> PieceType:
        return self.piece.piece_type


class SelfCheckError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(from_sq, to_sq, "Move leaves your king in check.")


class UnknownPieceError(IllegalMoveError):
    def __init__(self, from_sq: Square, to_sq: Square, piece: object) -> None:
        super().__init__(
            from_sq, to_sq, f"Unknown piece type at {square_name(from_sq)}: {piece!r}."
        )
        self.piece = piece


class MoveSyntaxError(RookieError, ValueError):
    """Move text could not be decoded into two squares."""

    def __init__(self, text: str, message: str) -> None:
        super().__init__(message)
        self.text = text
        self.message = message
