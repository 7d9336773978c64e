"""Tests for FEN handling and coordinate move text."""

import pytest

from rookie.core.board import Board
from rookie.core.enums import Color, PieceType
from rookie.core.errors import MoveSyntaxError
from rookie.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_move_text,
)
from rookie.core.piece import Piece
from rookie.core.types import A1, E1, E2, E4, E8, H8


class TestFenParsing:
    def test_starting_fen_matches_initial(self) -> None:
        assert board_from_fen(STARTING_FEN) == Board.initial()

    def test_side_to_move(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert board.side_to_move == Color.BLACK

    def test_two_fields_accepted(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R3K3 w")
        assert board.piece_at(A1) == Piece(Color.WHITE, PieceType.ROOK)

    def test_king_cache_populated(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_row_zero_is_rank_eight(self) -> None:
        board = board_from_fen("7r/8/8/8/8/8/8/k3K3 w - - 0 1")
        assert board.piece_at(H8) == Piece(Color.BLACK, PieceType.ROOK)

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "4k3/8/8/8/8/8/8/4K3",
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
            "4k3/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K4 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K2 w - - 0 1",
            "4k3/8/8/8/8/8/8/4K2X w - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 1 extra",
            "8/8/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/3KK3 w - - 0 1",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(fen)


class TestFenWriting:
    def test_initial(self) -> None:
        assert board_to_fen(Board.initial()) == (
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        )

    def test_black_to_move_and_gaps(self) -> None:
        fen = "r3k3/8/8/3pP3/8/8/8/4K2R b - - 0 1"
        assert board_to_fen(board_from_fen(fen)) == fen


class TestMoveText:
    def test_simple(self) -> None:
        assert parse_move_text("e2e4") == (E2, E4)

    def test_uppercase_and_whitespace(self) -> None:
        assert parse_move_text("  E2E4\n") == (E2, E4)

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("e2e", "Input must be 4 chars (e.g., e2e4)."),
            ("e2e4q", "Input must be 4 chars (e.g., e2e4)."),
            ("", "Input must be 4 chars (e.g., e2e4)."),
            ("z2e4", "Invalid start square notation: 'z2'."),
            ("e9e4", "Invalid start square notation: 'e9'."),
            ("e2e0", "Invalid end square notation: 'e0'."),
            ("e2i4", "Invalid end square notation: 'i4'."),
        ],
    )
    def test_rejected(self, text: str, message: str) -> None:
        with pytest.raises(MoveSyntaxError) as exc_info:
            parse_move_text(text)
        assert str(exc_info.value) == message
        assert exc_info.value.text == text

    def test_syntax_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_move_text("hello")
