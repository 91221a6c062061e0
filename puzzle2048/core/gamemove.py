"""
Game move utilities for the 2048 engine, providing the move directions and the check for whether any move is
possible.
"""

from enum import Enum

from numpy import ndarray

from puzzle2048.core.errors import InvalidDirectionError

# ##: Value of an empty cell in an engine board.
EMPTY = 0


class Direction(str, Enum):
    """
    Direction of a move.

    Members are listed in the order (left, up, right, down).
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


# ##: All Actions.
ACTIONS: dict[str, Direction] = {direction.value: direction for direction in Direction}


def parse_direction(direction: Direction | str) -> Direction:
    """
    Convert a direction name into a ``Direction``.

    Parameters
    ----------
    direction : Direction | str
        A ``Direction`` member or one of the strings 'left', 'up', 'right', 'down'.

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    InvalidDirectionError
        If the value does not name a direction.
    """
    if isinstance(direction, Direction):
        return direction
    try:
        return ACTIONS[direction]
    except (KeyError, TypeError):
        raise InvalidDirectionError(f'Unknown direction: {direction!r}') from None


def can_move(board: ndarray) -> bool:
    """
    Check whether at least one move is possible.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if the board has an empty cell, or two horizontally or vertically adjacent cells holding the same
        value.

    Notes
    -----
    On any board holding at least one tile, an empty cell implies an empty cell orthogonally next to a tile, which
    some move slides into. So this is exactly the condition under which one of the four moves changes the board.
    The entirely empty board is the one exception; it is never reachable in a game. A 1x1 board with a tile can
    never move.
    """
    # ##>: Condition 1: any empty cell.
    if (board == EMPTY).any():
        return True

    # ##>: Condition 2: two adjacent equal values, horizontally or vertically.
    if (board[:, :-1] == board[:, 1:]).any():
        return True
    return bool((board[:-1, :] == board[1:, :]).any())
