"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete players, renderers or input sources.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from rookie.core.enums import Color, GameResult

if TYPE_CHECKING:
    from rookie.core.board import Board, BoardSnapshot
    from rookie.core.move import Move
    from rookie.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # engine is choosing
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a game stopped."""

    CHECKMATE = auto()
    STALEMATE = auto()
    RESIGNATION = auto()
    ABORTED = auto()


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Final result of a game plus how it came about."""

    result: GameResult
    reason: GameEndReason
    winner: Color | None = None

    def describe(self) -> str:
        if self.reason == GameEndReason.CHECKMATE:
            return f"CHECKMATE! {str(self.winner).capitalize()} wins!"
        if self.reason == GameEndReason.STALEMATE:
            return "STALEMATE! It's a draw."
        if self.reason == GameEndReason.RESIGNATION:
            assert self.winner is not None
            return (
                f"{str(self.winner.opposite).capitalize()} resigns. "
                f"{str(self.winner).capitalize()} wins!"
            )
        return "Game aborted."


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or engine)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, board: Board) -> Move | None:
        """Pick a move on *board*.

        Humans return ``None``: their moves arrive through the controller.
        """


class IRenderer(ABC):
    """Presentation collaborator. Only ever sees read-only snapshots."""

    @abstractmethod
    def render(self, snapshot: BoardSnapshot) -> None:
        """Draw the current position."""

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Report a rejected command or move."""

    @abstractmethod
    def show_result(self, outcome: GameOutcome) -> None:
        """Announce the end of the game."""


class IMoveInput(ABC):
    """Input collaborator supplying raw command text for a human side."""

    @abstractmethod
    def read_command(self, color: Color) -> str:
        """Return the next command typed for *color* (move text or keyword)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """Player of *color* resigns."""
