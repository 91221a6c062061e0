"""
Translate raw user input (key names, pointer drags, board-size text) into session calls.
"""

from puzzle2048.config import GameConfig
from puzzle2048.core.errors import InvalidSizeError
from puzzle2048.core.gamemove import Direction

# ##: Key names of Matplotlib and of browsers.
KEY_DIRECTIONS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
}


def key_direction(key: str | None) -> Direction | None:
    """Direction bound to a key, or None if the key is not a move key."""
    if key is None:
        return None
    return KEY_DIRECTIONS.get(key)


def swipe_direction(dx: float, dy: float, threshold: float = 30.0) -> Direction | None:
    """
    Direction of a completed swipe.

    Parameters
    ----------
    dx : float
        Horizontal distance between press and release, positive to the right.
    dy : float
        Vertical distance between press and release, positive downwards (screen coordinates).
    threshold : float, optional
        Minimum distance along the dominant axis for the drag to count as a swipe (default is 30 pixels).

    Returns
    -------
    Direction | None
        The swipe direction, or None for a drag too short to be a swipe.

    Notes
    -----
    The dominant axis wins; a drag exactly on the diagonal counts as vertical.
    """
    abs_x, abs_y = abs(dx), abs(dy)
    if max(abs_x, abs_y) <= threshold:
        return None
    if abs_x > abs_y:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def parse_board_size(text: str, config: GameConfig | None = None) -> int:
    """
    Parse a board size typed by the user.

    Parameters
    ----------
    text : str
        The user input, such as ``"5"``.
    config : GameConfig, optional
        Supplies the accepted bounds (default is 2 to 10).

    Returns
    -------
    int
        The validated board size.

    Raises
    ------
    InvalidSizeError
        If the text is not an integer within the bounds.
    """
    config = config or GameConfig()
    try:
        size = int(text.strip())
    except (AttributeError, ValueError):
        raise InvalidSizeError(
            f'Please enter a valid board size between {config.min_size} and {config.max_size}.'
        ) from None
    return config.validate_size(size)
