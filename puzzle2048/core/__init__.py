# -*- coding: utf-8 -*-
"""
This module provides the pure board engine of the 2048 game.

It includes functions for creating boards, sliding and merging tiles in the four directions, spawning new tiles,
and checking whether any move is left.
"""

from .errors import InvalidBoardError, InvalidDirectionError, InvalidSizeError, Puzzle2048Error
from .gameboard import (
    MOVES,
    TILE_SPAWN_PROBS,
    WINNING_TILE,
    MoveResult,
    RandomSource,
    as_board,
    compress_row,
    create_empty_board,
    fill_cells,
    has_tile,
    merge_row,
    move,
    move_down,
    move_left,
    move_right,
    move_row_left,
    move_up,
    spawn_random_tile,
    to_rows,
    transpose,
)
from .gamemove import (
    ACTIONS,
    EMPTY,
    Direction,
    can_move,
    parse_direction,
)

__all__ = [
    "ACTIONS",
    "EMPTY",
    "MOVES",
    "TILE_SPAWN_PROBS",
    "WINNING_TILE",
    "Direction",
    "MoveResult",
    "RandomSource",
    "Puzzle2048Error",
    "InvalidSizeError",
    "InvalidDirectionError",
    "InvalidBoardError",
    "create_empty_board",
    "as_board",
    "to_rows",
    "transpose",
    "compress_row",
    "merge_row",
    "move_row_left",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move",
    "spawn_random_tile",
    "fill_cells",
    "has_tile",
    "can_move",
    "parse_direction",
]
