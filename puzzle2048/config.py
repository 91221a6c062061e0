"""
Configuration for a 2048 game session.

Defaults follow the classic game: a 4x4 board, two starting tiles and a win at 2048. The board size can be changed
at runtime within ``[min_size, max_size]``.
"""

from dataclasses import dataclass
from numbers import Integral

from puzzle2048.core.errors import InvalidSizeError
from puzzle2048.core.gameboard import WINNING_TILE


@dataclass
class GameConfig:
    """
    Configuration of a game session and its controls.
    """

    # ##>: Board parameters.
    size: int = 4  # Side length of a new board
    min_size: int = 2  # Smallest board accepted from the user
    max_size: int = 10  # Largest board accepted from the user
    start_tiles: int = 2  # Tiles spawned on a fresh board

    # ##>: Rules.
    winning_tile: int = WINNING_TILE

    # ##>: Controls.
    swipe_threshold: float = 30.0  # Minimum drag distance, in pixels, for a swipe

    # ##>: Randomness.
    seed: int | None = None  # Seed of the session generator, None for fresh entropy

    def __post_init__(self):
        if self.min_size < 1 or self.min_size > self.max_size:
            raise InvalidSizeError(f'Invalid size bounds: [{self.min_size}, {self.max_size}]')
        self.validate_size(self.size)

    def validate_size(self, size: int) -> int:
        """
        Check that a board size is within the configured bounds.

        Parameters
        ----------
        size : int
            Requested board size.

        Returns
        -------
        int
            The size as a plain ``int``, for chaining.

        Raises
        ------
        InvalidSizeError
            If ``size`` is not an integer within ``[min_size, max_size]``.
        """
        if isinstance(size, bool) or not isinstance(size, Integral) or not self.min_size <= size <= self.max_size:
            raise InvalidSizeError(
                f'Please enter a valid board size between {self.min_size} and {self.max_size}.'
            )
        return int(size)


def default_config() -> GameConfig:
    """Classic 4x4 configuration."""
    return GameConfig()
