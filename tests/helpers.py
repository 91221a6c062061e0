"""
Shared helpers for the test suite.
"""
import numpy as np


class ScriptedRandom:
    """
    Deterministic source of randomness replaying (cell index, value draw) pairs.

    Each spawn consumes one pair: the cell index answers ``integers`` and the value draw answers ``random``.
    """

    def __init__(self, pairs):
        self._cells = [cell for cell, _ in pairs]
        self._draws = [draw for _, draw in pairs]

    def integers(self, high, /):
        cell = self._cells.pop(0)
        assert 0 <= cell < high, f'scripted cell {cell} outside [0, {high})'
        return cell

    def random(self):
        return self._draws.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._cells and not self._draws


def generate_random_board(generator: np.random.Generator, size: int = 4, values=(2, 4, 8, 16)) -> np.ndarray:
    """Generate a random 2048 game board holding at least one tile."""
    board = np.zeros((size, size), dtype=np.int64)
    num_tiles = generator.integers(1, size * size + 1)
    tile_values = generator.choice(values, size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board
