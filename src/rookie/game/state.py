"""Per-game lifecycle: the board, phase, outcome and applied half-moves."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookie.core.attacks import is_king_in_check
from rookie.core.board import Board
from rookie.core.enums import Color, GameResult
from rookie.core.executor import apply_move
from rookie.core.move import Move
from rookie.core.move_generator import MoveGenerator
from rookie.core.notation import board_from_fen
from rookie.core.types import Square
from rookie.game.interfaces import GameEndReason, GameOutcome, GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    was_capture: bool = False
    was_check: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: phase, outcome, move history.

    Pure data and logic, no I/O.
    """

    board: Board = field(init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    outcome: GameOutcome | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Start from *fen* (the initial position by default), clearing history."""
        self.board = board_from_fen(fen) if fen else Board.initial()
        self.phase = GamePhase.AWAITING_MOVE
        self.outcome = None
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Apply a validated move and return the history record.

        The move must already have passed :func:`rookie.core.validator.validate`.
        """
        was_capture = self.board.piece_at(to_sq) is not None
        notation = apply_move(self.board, from_sq, to_sq)

        record = MoveRecord(
            move=Move(Square(*from_sq), Square(*to_sq)),
            notation=notation,
            was_capture=was_capture,
            was_check=notation.endswith("+"),
        )
        self.move_history.append(record)

        self._check_game_over()
        return record

    # ── Resignation / abort ──────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        winner = color.opposite
        self.outcome = GameOutcome(
            GameResult.win_for(winner), GameEndReason.RESIGNATION, winner
        )
        self.phase = GamePhase.GAME_OVER

    def abort(self) -> None:
        self.outcome = GameOutcome(GameResult.IN_PROGRESS, GameEndReason.ABORTED)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.board.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def in_check(self) -> bool:
        return is_king_in_check(self.board, self.board.side_to_move)

    @property
    def result(self) -> GameResult:
        if self.outcome is None:
            return GameResult.IN_PROGRESS
        return self.outcome.result

    @property
    def ply_count(self) -> int:
        return len(self.move_history)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        """End the game if the side to move has no legal moves."""
        gen = MoveGenerator(self.board)
        if gen.legal_moves():
            return

        if gen.is_in_check():
            winner = self.board.side_to_move.opposite
            self.outcome = GameOutcome(
                GameResult.win_for(winner), GameEndReason.CHECKMATE, winner
            )
        else:
            self.outcome = GameOutcome(GameResult.DRAW, GameEndReason.STALEMATE)
        self.phase = GamePhase.GAME_OVER
