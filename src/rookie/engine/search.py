"""Shared engine protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.move import Move


class IEngine(Protocol):
    """Protocol for move selectors used by the game layer."""

    def select(self, board: Board) -> Move | None:
        """Pick a move for the side to move, or ``None`` if there is none."""
        ...
