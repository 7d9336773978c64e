"""Move selection for computer-controlled sides."""

from rookie.engine.greedy import GreedyEngine
from rookie.engine.search import IEngine

DefaultEngine: type[IEngine] = GreedyEngine

__all__ = [
    "DefaultEngine",
    "GreedyEngine",
    "IEngine",
]
