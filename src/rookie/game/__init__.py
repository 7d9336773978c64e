"""Game management layer: controller, players, state machine and config.

Quick start::

    from rookie.core import Color
    from rookie.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(white=HumanPlayer(Color.WHITE, "Alice"), black=AIPlayer(Color.BLACK))
    ctrl.submit_text("e2e4")
    ctrl.play_ai_turn()
"""

from rookie.game.config import GameConfig
from rookie.game.controller import GameController, GameEvents
from rookie.game.interfaces import (
    GameEndReason,
    GameOutcome,
    GamePhase,
    IGameController,
    IMoveInput,
    IPlayer,
    IRenderer,
)
from rookie.game.player import AIPlayer, HumanPlayer
from rookie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameEndReason",
    "GameOutcome",
    "GamePhase",
    "IGameController",
    "IMoveInput",
    "IPlayer",
    "IRenderer",
    # Concrete
    "AIPlayer",
    "GameConfig",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
