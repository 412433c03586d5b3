"""Whist rules engine: cards, players, tricks, rounds, games and a computer opponent."""

__version__ = "0.1.0"
__all__ = ["errors", "deck", "player", "hand", "round", "game", "robot"]