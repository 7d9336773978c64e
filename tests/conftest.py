"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from rookie.core.board import Board, BoardSnapshot
from rookie.core.enums import Color
from rookie.engine.greedy import GreedyEngine
from rookie.game.config import GameConfig
from rookie.game.interfaces import GameOutcome, IMoveInput, IRenderer


class RecordingRenderer(IRenderer):
    """Collects everything the controller asks to present."""

    def __init__(self) -> None:
        self.snapshots: list[BoardSnapshot] = []
        self.errors: list[str] = []
        self.results: list[GameOutcome] = []

    def render(self, snapshot: BoardSnapshot) -> None:
        self.snapshots.append(snapshot)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_result(self, outcome: GameOutcome) -> None:
        self.results.append(outcome)


class ScriptedInput(IMoveInput):
    """Replays a fixed list of commands, then ``exit``."""

    def __init__(self, commands: list[str]) -> None:
        self._commands = list(commands)
        self.requests: list[Color] = []

    def read_command(self, color: Color) -> str:
        self.requests.append(color)
        if not self._commands:
            return "exit"
        return self._commands.pop(0)


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def no_delay_config() -> GameConfig:
    return GameConfig(ai_delay_ms=0, seed=1234)


@pytest.fixture
def seeded_engine() -> GreedyEngine:
    return GreedyEngine(random.Random(1234))


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def make_input() -> Callable[[list[str]], ScriptedInput]:
    return ScriptedInput
