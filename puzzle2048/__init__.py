# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 sliding-tile game on an N x N board.

The `core` package is the pure board engine, `envs` holds the game session with its scores and terminal flags,
and `utils` translates user input and renders the game.
"""

from .config import GameConfig
from .core import Direction, InvalidSizeError, MoveResult
from .envs import GameSession, GameState

__version__ = "0.1.0"

__all__ = ["GameConfig", "Direction", "InvalidSizeError", "MoveResult", "GameSession", "GameState"]
