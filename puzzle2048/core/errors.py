"""
Exceptions raised by the 2048 engine and game session.

All errors derive from ``ValueError``: every failure in this package is a validation failure on caller input.
"""


class Puzzle2048Error(ValueError):
    """Base class for every error raised by the package."""


class InvalidSizeError(Puzzle2048Error):
    """Requested board dimension is outside the supported range."""


class InvalidDirectionError(Puzzle2048Error):
    """Move direction is not one of left, up, right or down."""


class InvalidBoardError(Puzzle2048Error):
    """Board rows are ragged or the grid is not square."""
