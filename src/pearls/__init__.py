"""Pearls: rule engine for a tile-sliding puzzle game."""

from .game import Direction, PearlsGame, State

__all__ = ["Direction", "PearlsGame", "State"]
