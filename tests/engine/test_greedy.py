"""Tests for the greedy capture engine."""

import random

import pytest

from rookie.core.board import Board
from rookie.core.move import Move
from rookie.core.move_generator import legal_moves
from rookie.core.notation import board_from_fen, parse_move_text
from rookie.engine import DefaultEngine, IEngine
from rookie.engine.greedy import GreedyEngine


def mv(text: str) -> Move:
    return Move(*parse_move_text(text))


class TestCaptures:
    def test_takes_the_only_capture(self) -> None:
        board = board_from_fen("7k/8/8/r7/8/8/8/R6K w - - 0 1")
        for seed in range(20):
            move = GreedyEngine(random.Random(seed)).select(board)
            assert move == mv("a1a5")
            assert move is not None and move.score == 50

    def test_prefers_queen_over_pawn(self) -> None:
        board = board_from_fen("7k/K7/8/8/8/3p4/8/3R3q w - - 0 1")
        for seed in range(20):
            move = GreedyEngine(random.Random(seed)).select(board)
            assert move == mv("d1h1")
            assert move is not None and move.score == 90

    def test_result_is_legal(self, seeded_engine: GreedyEngine) -> None:
        board = board_from_fen("4q2k/8/8/8/8/8/R7/4K1N1 w - - 0 1")
        move = seeded_engine.select(board)
        assert move in legal_moves(board)


class TestQuietPositions:
    def test_start_position_choice_is_legal(
        self, initial_board: Board, seeded_engine: GreedyEngine
    ) -> None:
        move = seeded_engine.select(initial_board)
        assert move in legal_moves(initial_board)
        assert move is not None and move.score == 1

    def test_same_seed_same_choice(self, initial_board: Board) -> None:
        first = GreedyEngine(random.Random(7)).select(initial_board)
        second = GreedyEngine(random.Random(7)).select(initial_board)
        assert first == second

    def test_ties_are_spread(self, initial_board: Board) -> None:
        engine = GreedyEngine(random.Random(42))
        seen = {engine.select(initial_board) for _ in range(200)}
        assert len(seen) > 5

    def test_does_not_mutate_board(
        self, initial_board: Board, seeded_engine: GreedyEngine
    ) -> None:
        seeded_engine.select(initial_board)
        assert initial_board == Board.initial()


class TestNoMoves:
    @pytest.mark.parametrize(
        "fen",
        [
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3",
            "7k/8/5KQ1/8/8/8/8/8 b - - 0 1",
        ],
    )
    def test_returns_none(self, fen: str, seeded_engine: GreedyEngine) -> None:
        assert seeded_engine.select(board_from_fen(fen)) is None


def test_default_engine_satisfies_protocol() -> None:
    engine: IEngine = DefaultEngine()
    assert isinstance(engine, GreedyEngine)
