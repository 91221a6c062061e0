# -*- coding: utf-8 -*-
"""
Game session for the 2048 game.

This module provides the immutable `GameState` with its pure transitions, and the `GameSession` class that
holds the current game for a user interface.
"""

from .session import GameSession
from .state import GameState, apply_move, new_game, resize, restart

__all__ = ["GameSession", "GameState", "new_game", "apply_move", "resize", "restart"]
