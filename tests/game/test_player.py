"""Tests for player implementations."""

import random

from rookie.core.board import Board
from rookie.core.enums import Color
from rookie.core.move_generator import legal_moves
from rookie.engine.greedy import GreedyEngine
from rookie.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_defaults(self) -> None:
        p = HumanPlayer(Color.WHITE)
        assert p.color == Color.WHITE
        assert p.name == "Player (white)"
        assert p.is_human

    def test_custom_name(self) -> None:
        assert HumanPlayer(Color.BLACK, "Alice").name == "Alice"

    def test_choose_move_returns_none(self, initial_board: Board) -> None:
        assert HumanPlayer(Color.WHITE).choose_move(initial_board) is None


class TestAIPlayer:
    def test_defaults(self) -> None:
        p = AIPlayer(Color.BLACK)
        assert p.color == Color.BLACK
        assert p.name == "Rookie"
        assert not p.is_human
        assert isinstance(p.engine, GreedyEngine)

    def test_delegates_to_engine(self, initial_board: Board) -> None:
        engine = GreedyEngine(random.Random(3))
        p = AIPlayer(Color.WHITE, engine)
        assert p.engine is engine
        assert p.choose_move(initial_board) in legal_moves(initial_board)
