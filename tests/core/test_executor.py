"""Tests for applying validated moves."""

from rookie.core.board import Board
from rookie.core.enums import Color, PieceType
from rookie.core.executor import apply_move
from rookie.core.notation import board_from_fen, parse_move_text
from rookie.core.piece import Piece
from rookie.core.types import E1, E2, E4, parse_square


def play(board: Board, *texts: str) -> list[str]:
    return [apply_move(board, *parse_move_text(text)) for text in texts]


class TestQuietMove:
    def test_e2e4(self, initial_board: Board) -> None:
        notation = apply_move(initial_board, E2, E4)
        assert notation == "e2-e4"
        assert initial_board.last_move_notation == "e2-e4"
        assert initial_board[E2] is None
        assert initial_board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert initial_board.side_to_move == Color.BLACK

    def test_turn_alternates(self, initial_board: Board) -> None:
        play(initial_board, "e2e4", "e7e5")
        assert initial_board.side_to_move == Color.WHITE
        play(initial_board, "g1f3")
        assert initial_board.side_to_move == Color.BLACK

    def test_reverse_moves_restore_placement(self, initial_board: Board) -> None:
        before = initial_board.copy()
        play(initial_board, "g1f3", "g8f6", "f3g1", "f6g8")
        assert initial_board == before
        assert initial_board.side_to_move == Color.WHITE

    def test_king_cache_follows_king(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        apply_move(board, E1, E2)
        assert board.king_square(Color.WHITE) == E2
        play(board, "e8d7")
        assert board.king_square(Color.BLACK) == parse_square("d7")


class TestCapture:
    def test_capture_recorded_for_capturing_side(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        assert play(board, "e4d5") == ["e4xd5"]
        assert board.captured[Color.WHITE] == [Piece(Color.BLACK, PieceType.PAWN)]
        assert board.captured[Color.BLACK] == []

    def test_capture_order_kept(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/2p5/1P1r4/4K3 w - - 0 1")
        assert play(board, "b2c3", "d2d1", "e1d1") == ["b2xc3", "d2-d1+", "e1xd1"]
        assert board.captured[Color.WHITE] == [
            Piece(Color.BLACK, PieceType.PAWN),
            Piece(Color.BLACK, PieceType.ROOK),
        ]


class TestCheckSuffix:
    def test_fools_mate_queen_move(self, initial_board: Board) -> None:
        notations = play(initial_board, "f2f3", "e7e5", "g2g4", "d8h4")
        assert notations == ["f2-f3", "e7-e5", "g2-g4", "d8-h4+"]
        assert initial_board.last_move_notation == "d8-h4+"

    def test_capture_with_check(self) -> None:
        board = board_from_fen("n3k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert play(board, "a1a8") == ["a1xa8+"]
