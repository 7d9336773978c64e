"""rookie: a compact chess rules engine with a greedy computer opponent."""

__version__ = "0.1.0"
