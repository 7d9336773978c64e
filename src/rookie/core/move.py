"""Move value object (coordinate representation)."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single half-move.

    ``score`` is filled in by move enumeration (capture value, or 1 for a
    quiet move) and is ignored by equality and hashing.
    """

    from_sq: Square
    to_sq: Square
    score: int = field(default=0, compare=False)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def text(self) -> str:
        """Coordinate text as typed by a player, e.g. ``e2e4``."""
        return str(self)
