"""Tests for checkmate / stalemate / result detection."""

import pytest

from rookie.core.board import Board
from rookie.core.enums import GameResult
from rookie.core.executor import apply_move
from rookie.core.notation import board_from_fen, parse_move_text
from rookie.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
BACK_RANK_MATE = "R2k4/8/3K4/8/8/8/8/8 b - - 0 1"
STALEMATE = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = board_from_fen(FOOLS_MATE)
        assert Rules.is_in_check(board)
        assert Rules.is_checkmate(board)
        assert not Rules.is_stalemate(board)
        assert Rules.game_result(board) == GameResult.BLACK_WINS

    def test_back_rank(self) -> None:
        board = board_from_fen(BACK_RANK_MATE)
        assert Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.WHITE_WINS

    def test_fools_mate_played_out(self, initial_board: Board) -> None:
        for text in ("f2f3", "e7e5", "g2g4", "d8h4"):
            apply_move(initial_board, *parse_move_text(text))
        assert Rules.is_checkmate(initial_board)

    def test_check_with_escape_is_not_mate(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4R1K1 b - - 0 1")
        assert Rules.is_in_check(board)
        assert not Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS


class TestStalemate:
    def test_king_boxed_in(self) -> None:
        board = board_from_fen(STALEMATE)
        assert not Rules.is_in_check(board)
        assert Rules.is_stalemate(board)
        assert not Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.DRAW

    def test_stalemate_by_move(self) -> None:
        board = board_from_fen("7k/5K2/8/6Q1/8/8/8/8 w - - 0 1")
        notation = apply_move(board, *parse_move_text("g5g6"))
        assert notation == "g5-g6"
        assert Rules.is_stalemate(board)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1",
        "4k3/8/8/8/8/8/8/4K3 w - - 0 1",
        "4k3/8/8/8/8/8/8/4K3 b - - 0 1",
    ],
)
def test_ongoing(fen: str) -> None:
    board = board_from_fen(fen)
    assert Rules.game_result(board) == GameResult.IN_PROGRESS
    assert not Rules.is_checkmate(board)
    assert not Rules.is_stalemate(board)
