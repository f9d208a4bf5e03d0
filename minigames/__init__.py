"""Arcade minigames: snake, pong, asteroid and tic-tac-toe behind a common menu."""

__version__ = "0.1.0"