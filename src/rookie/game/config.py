"""Game configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from rookie.core.enums import Color

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(slots=True, frozen=True)
class GameConfig:
    """Settings for a console game.

    Args:
        human_color: Side played from the keyboard; the engine plays the other.
        ai_delay_ms: Pause before the engine moves. Purely cosmetic.
        seed: Seed for the engine's tie-breaking, ``None`` for a fresh one.
        use_unicode: Draw pieces with chess glyphs instead of FEN letters.
        log_level: Name of the root logging level.
    """

    human_color: Color = Color.WHITE
    ai_delay_ms: int = 500
    seed: int | None = None
    use_unicode: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.ai_delay_ms < 0:
            raise ValueError(f"ai_delay_ms must be >= 0, got {self.ai_delay_ms}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        """Build a config from ``ROOKIE_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        delay = env.get("ROOKIE_AI_DELAY_MS")
        seed = env.get("ROOKIE_SEED")
        ascii_only = env.get("ROOKIE_ASCII", "").strip().lower() in _TRUTHY
        return cls(
            human_color=defaults.human_color,
            ai_delay_ms=int(delay) if delay else defaults.ai_delay_ms,
            seed=int(seed) if seed else defaults.seed,
            use_unicode=not ascii_only,
            log_level=env.get("ROOKIE_LOG_LEVEL", defaults.log_level).upper(),
        )
