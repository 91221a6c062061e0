# -*- coding: utf-8 -*-
"""
This module provides the user-facing utilities of the game.

It includes functions translating keys, swipes and typed board sizes into session calls, and a `WindowBoard` class
rendering game snapshots with Matplotlib.
"""

from .controls import KEY_DIRECTIONS, key_direction, parse_board_size, swipe_direction
from .windows import WindowBoard

__all__ = ["KEY_DIRECTIONS", "key_direction", "swipe_direction", "parse_board_size", "WindowBoard"]
