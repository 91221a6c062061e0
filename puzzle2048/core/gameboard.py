"""
Core functionality of the 2048 engine: board construction, sliding and merging, and tile spawning.

Every function here is pure. Boards are square ``int64`` arrays where ``EMPTY`` (0) marks an empty cell; inputs
are never modified and every returned board is a fresh array.
"""

from numbers import Integral
from typing import NamedTuple, Protocol, Sequence

from numpy import argwhere, array, array_equal, int64, ndarray, zeros, zeros_like
from numpy.random import PCG64DXSM, default_rng

from puzzle2048.core.errors import InvalidBoardError, InvalidSizeError
from puzzle2048.core.gamemove import EMPTY, Direction, parse_direction

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Tile value ending the game as won.
WINNING_TILE = 2048

# ##>: Module-level generator, used when no source of randomness is injected.
_GENERATOR = default_rng(PCG64DXSM())


class RandomSource(Protocol):
    """
    Source of randomness for tile spawning.

    A ``numpy.random.Generator`` satisfies this protocol; tests may provide any object with the same two methods.
    """

    def integers(self, high: int, /) -> int:
        """Return an integer drawn uniformly from [0, high)."""

    def random(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""


class MoveResult(NamedTuple):
    """Outcome of one directional move."""

    board: ndarray
    score: int
    moved: bool


def create_empty_board(size: int) -> ndarray:
    """
    Create a board where every cell is empty.

    Parameters
    ----------
    size : int
        Side length of the square board. Must be a positive integer.

    Returns
    -------
    ndarray
        A ``(size, size)`` array filled with ``EMPTY``.

    Raises
    ------
    InvalidSizeError
        If ``size`` is not a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, Integral) or size < 1:
        raise InvalidSizeError(f'Board size must be a positive integer, got {size!r}')
    return zeros((int(size), int(size)), dtype=int64)


def as_board(rows: Sequence[Sequence[int | None]]) -> ndarray:
    """
    Build an engine board from nested rows.

    Parameters
    ----------
    rows : Sequence[Sequence[int | None]]
        The grid, row by row. ``None`` and ``0`` both mark an empty cell.

    Returns
    -------
    ndarray
        The board as a ``(n, n)`` ``int64`` array.

    Raises
    ------
    InvalidBoardError
        If the rows are ragged or the grid is not square.
    """
    size = len(rows)
    if size == 0:
        raise InvalidBoardError('Board must have at least one row')
    for row in rows:
        if len(row) != size:
            raise InvalidBoardError(f'Board must be square, got a row of {len(row)} cells in a {size}-row board')
    return array([[EMPTY if value is None else value for value in row] for row in rows], dtype=int64)


def to_rows(board: ndarray) -> list[list[int | None]]:
    """
    Convert a board into nested lists, with ``None`` for empty cells.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[list[int | None]]
        Plain Python rows.
    """
    return [[None if value == EMPTY else int(value) for value in row] for row in board.tolist()]


def transpose(board: ndarray) -> ndarray:
    """Swap rows and columns."""
    return board.T.copy()


def compress_row(row: ndarray) -> ndarray:
    """
    Remove empty cells from a row, keeping the order of the remaining tiles.

    Example
    -------
    >>> compress_row(array([2, 0, 2, 4]))
    array([2, 2, 4])
    """
    return row[row != EMPTY]


def merge_row(tiles: ndarray) -> tuple[list[int], int]:
    """
    Merge adjacent equal values of a compressed row and compute the score.

    Parameters
    ----------
    tiles : ndarray
        A compressed row, without empty cells.

    Returns
    -------
    merged_row : list[int]
        The tiles after merging, shortest form (no padding).
    score : int
        The sum of the values created by merging.

    Notes
    -----
    - Merging goes from the start of the row towards the end.
    - A tile created by a merge is never merged again in the same call.
    """
    merged: list[int] = []
    score = 0

    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            value = int(tiles[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(tiles[i]))
            i += 1

    return merged, score


def move_row_left(row: ndarray) -> tuple[ndarray, int]:
    """
    Slide a single row to the left: compress, merge, then pad with empty cells on the right.

    Parameters
    ----------
    row : ndarray
        One row of the board.

    Returns
    -------
    new_row : ndarray
        The row after the move, with the same length as ``row``.
    score : int
        Score gained by merges in this row.
    """
    merged, score = merge_row(compress_row(row))
    new_row = zeros_like(row)
    new_row[: len(merged)] = merged
    return new_row, score


def move_left(board: ndarray) -> MoveResult:
    """
    Slide the whole board to the left.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    MoveResult
        The new board, the score gained and whether any cell changed.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        new_row, row_score = move_row_left(row)
        result[i] = new_row
        score += row_score

    return MoveResult(result, score, not array_equal(result, board))


def move_right(board: ndarray) -> MoveResult:
    """Slide the board to the right: mirror each row, slide left and mirror back."""
    mirrored, score, moved = move_left(board[:, ::-1])
    return MoveResult(mirrored[:, ::-1].copy(), score, moved)


def move_up(board: ndarray) -> MoveResult:
    """Slide the board up: transpose, slide left and transpose back."""
    moved_t, score, moved = move_left(transpose(board))
    return MoveResult(transpose(moved_t), score, moved)


def move_down(board: ndarray) -> MoveResult:
    """Slide the board down: transpose, slide right and transpose back."""
    moved_t, score, moved = move_right(transpose(board))
    return MoveResult(transpose(moved_t), score, moved)


# ##: Move function for each direction.
MOVES = {
    Direction.LEFT: move_left,
    Direction.UP: move_up,
    Direction.RIGHT: move_right,
    Direction.DOWN: move_down,
}


def move(board: ndarray, direction: Direction | str) -> MoveResult:
    """
    Slide the board in the given direction.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction | str
        The direction of the move.

    Returns
    -------
    MoveResult
        The new board, the score gained and whether any cell changed.

    Raises
    ------
    InvalidDirectionError
        If ``direction`` does not name a direction.
    """
    return MOVES[parse_direction(direction)](board)


def spawn_random_tile(board: ndarray, rng: RandomSource | None = None) -> ndarray:
    """
    Place one new tile (2 or 4) on a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The game board.
    rng : RandomSource, optional
        Source of randomness. Defaults to the module-level generator.

    Returns
    -------
    ndarray
        A new board with one more tile, or an unchanged copy if the board is full.

    Notes
    -----
    - The cell is drawn first, as ``rng.integers(n_empty)`` over empty cells in row-major order.
    - The value is drawn second: 2 if ``rng.random() < 0.9``, else 4.
    """
    rng = rng if rng is not None else _GENERATOR
    new_board = board.copy()

    # ##: Only if there are still available places.
    available_cells = argwhere(board == EMPTY)
    if len(available_cells) == 0:
        return new_board

    row, col = available_cells[int(rng.integers(len(available_cells)))]
    new_board[row, col] = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4
    return new_board


def fill_cells(board: ndarray, number_tile: int, rng: RandomSource | None = None) -> ndarray:
    """
    Spawn several tiles, one after the other.

    Parameters
    ----------
    board : ndarray
        The game board.
    number_tile : int
        Number of new tiles to add. Stops early once the board is full.
    rng : RandomSource, optional
        Source of randomness. Defaults to the module-level generator.

    Returns
    -------
    ndarray
        A new board with the added tiles.
    """
    for _ in range(number_tile):
        board = spawn_random_tile(board, rng=rng)
    return board


def has_tile(board: ndarray, value: int) -> bool:
    """Check whether any cell holds ``value``."""
    return bool((board == value).any())
