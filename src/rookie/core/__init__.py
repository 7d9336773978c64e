"""Core domain layer: chess rules with no third-party dependencies.

Quick start::

    from rookie.core import Board, MoveGenerator, apply_move, parse_move_text

    board = Board.initial()
    apply_move(board, *parse_move_text("e2e4"))
    for move in MoveGenerator(board).legal_moves():
        print(move, move.score)
"""

from rookie.core.attacks import is_king_in_check, is_square_attacked
from rookie.core.board import NO_MOVE_NOTATION, Board, BoardSnapshot
from rookie.core.enums import Color, GameResult, PieceType
from rookie.core.errors import (
    EmptyOriginError,
    IllegalMoveError,
    IllegalPatternError,
    MoveSyntaxError,
    NullMoveError,
    OutOfBoundsError,
    OwnPieceCaptureError,
    RookieError,
    SelfCheckError,
    UnknownPieceError,
    WrongSideToMoveError,
)
from rookie.core.executor import apply_move
from rookie.core.move import Move
from rookie.core.move_generator import MoveGenerator, legal_moves
from rookie.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_move_text,
)
from rookie.core.piece import PIECE_VALUES, Piece
from rookie.core.rules import Rules
from rookie.core.types import Square, parse_square, square_name
from rookie.core.validator import is_legal, validate

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "Move",
    "MoveGenerator",
    "NO_MOVE_NOTATION",
    "PIECE_VALUES",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "is_king_in_check",
    "is_legal",
    "is_square_attacked",
    "legal_moves",
    "validate",
    # Errors
    "EmptyOriginError",
    "IllegalMoveError",
    "IllegalPatternError",
    "MoveSyntaxError",
    "NullMoveError",
    "OutOfBoundsError",
    "OwnPieceCaptureError",
    "RookieError",
    "SelfCheckError",
    "UnknownPieceError",
    "WrongSideToMoveError",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "parse_move_text",
]
