"""Rigid-body physics, game-world logic and a third-person camera for a rolling-ball game."""

__version__ = "0.1.0"