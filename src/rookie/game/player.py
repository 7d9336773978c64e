"""Human and engine-backed participants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color
from rookie.engine.greedy import GreedyEngine
from rookie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.move import Move
    from rookie.engine.search import IEngine


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the input collaborator.

    ``choose_move`` returns ``None`` because humans submit moves through
    the controller.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, board: Board) -> Move | None:
        return None  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """A computer participant that delegates the choice to an engine.

    Args:
        color: Side the engine plays.
        engine: Move selector; a fresh :class:`GreedyEngine` by default.
        name: Display name.
    """

    __slots__ = ("_color", "_name", "_engine")

    def __init__(
        self,
        color: Color,
        engine: IEngine | None = None,
        name: str = "Rookie",
    ) -> None:
        self._color = color
        self._engine = engine if engine is not None else GreedyEngine()
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def engine(self) -> IEngine:
        return self._engine

    def choose_move(self, board: Board) -> Move | None:
        return self._engine.select(board)
