"""GameController: drives one game between two players.

Coordinates: Players, GameState, the rules engine and the I/O collaborators.
Emits events via simple callbacks so presentation code / tests can subscribe.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from rookie.core.board import Board, BoardSnapshot
from rookie.core.enums import Color
from rookie.core.errors import IllegalMoveError, MoveSyntaxError, RookieError
from rookie.core.notation import parse_move_text
from rookie.core.types import Square
from rookie.core.validator import validate
from rookie.game.config import GameConfig
from rookie.game.interfaces import (
    GameOutcome,
    GamePhase,
    IGameController,
    IMoveInput,
    IPlayer,
    IRenderer,
)
from rookie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"exit", "quit"})
RESIGN_COMMAND = "resign"

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
IllegalMoveCallback = Callable[[RookieError], None]
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_illegal_move: list[IllegalMoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full chess game: validates moves, switches turns,
    detects checkmate / stalemate, notifies listeners.

    Single-threaded: one move is validated and applied before the next is
    considered.

    Args:
        renderer: Presentation collaborator; optional outside :meth:`run`.
        move_input: Source of human commands; required by :meth:`run`.
        config: Game settings (only ``ai_delay_ms`` is used here).
    """

    __slots__ = (
        "_state",
        "_players",
        "_renderer",
        "_input",
        "_config",
        "events",
    )

    def __init__(
        self,
        renderer: IRenderer | None = None,
        move_input: IMoveInput | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._renderer = renderer
        self._input = move_input
        self._config = config or GameConfig()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def history(self) -> list[MoveRecord]:
        return self._state.move_history

    @property
    def outcome(self) -> GameOutcome | None:
        return self._state.outcome

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.phase == GamePhase.NOT_STARTED:
            return None
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    def snapshot(self) -> BoardSnapshot:
        """Read-only view of the position for presentation."""
        return self._state.board.snapshot(in_check=self._state.in_check)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(fen)
        _LOGGER.info("New game: %s (white) vs %s (black)", white.name, black.name)

        if self._state.is_game_over:
            self._finish()
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        if self._state.is_game_over or self._state.phase == GamePhase.NOT_STARTED:
            return False

        try:
            validate(self._state.board, from_sq, to_sq)
        except IllegalMoveError as exc:
            self._reject(exc)
            return False

        self._apply(from_sq, to_sq)
        return True

    def submit_text(self, text: str) -> bool:
        """Decode coordinate text such as ``e2e4`` and submit it."""
        try:
            from_sq, to_sq = parse_move_text(text)
        except MoveSyntaxError as exc:
            self._reject(exc)
            return False
        return self.submit_move(from_sq, to_sq)

    def play_ai_turn(self) -> bool:
        """Let the engine move for the side to move. False if it cannot."""
        cp = self.current_player
        if self._state.is_game_over or cp is None or cp.is_human:
            return False

        self._state.phase = GamePhase.THINKING
        self._emit_phase(GamePhase.THINKING)
        if self._config.ai_delay_ms > 0:
            time.sleep(self._config.ai_delay_ms / 1000)

        move = cp.choose_move(self._state.board)
        if move is None:
            # Unreachable while terminal positions end the game on arrival.
            self._state.phase = GamePhase.AWAITING_MOVE
            return False

        self._apply(move.from_sq, move.to_sq)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._finish()

    def abort(self) -> None:
        """Stop the game without a result (the ``exit`` command)."""
        if self._state.is_game_over:
            return
        self._state.abort()
        self._finish()

    def handle_command(self, command: str) -> bool:
        """Route one line from the human side. True if the game advanced."""
        cp = self.current_player
        keyword = command.strip().lower()
        if keyword in QUIT_COMMANDS:
            self.abort()
            return True
        if keyword == RESIGN_COMMAND and cp is not None:
            self.resign(cp.color)
            return True
        return self.submit_text(command)

    def run(self) -> GameOutcome:
        """Drive the game with the collaborators until it ends."""
        if self._renderer is None or self._input is None:
            raise RuntimeError("run() needs both a renderer and a move input")
        if self._state.phase == GamePhase.NOT_STARTED:
            raise RuntimeError("Call new_game() before run()")

        while not self._state.is_game_over:
            self._renderer.render(self.snapshot())
            cp = self.current_player
            assert cp is not None
            if cp.is_human:
                self.handle_command(self._input.read_command(cp.color))
            else:
                self.play_ai_turn()

        self._renderer.render(self.snapshot())
        outcome = self._state.outcome
        assert outcome is not None
        self._renderer.show_result(outcome)
        return outcome

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, from_sq: Square, to_sq: Square) -> None:
        record = self._state.apply_move(from_sq, to_sq)
        self._emit_move(record)

        if self._state.is_game_over:
            self._finish()
            return

        self._state.phase = GamePhase.AWAITING_MOVE
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def _reject(self, exc: RookieError) -> None:
        _LOGGER.debug("Rejected: %s", exc)
        if self._renderer is not None:
            self._renderer.show_error(str(exc))
        for cb in self.events.on_illegal_move:
            cb(exc)

    def _finish(self) -> None:
        outcome = self._state.outcome
        assert outcome is not None
        _LOGGER.info("Game over: %s", outcome.describe())
        self._emit_game_over(outcome)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, outcome: GameOutcome) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
