"""2048 game session driven by a user interface."""

import logging
from typing import Any

from numpy.random import PCG64DXSM, Generator, default_rng

from puzzle2048.config import GameConfig
from puzzle2048.core.gameboard import RandomSource
from puzzle2048.core.gamemove import ACTIONS, Direction
from puzzle2048.envs.state import GameState, apply_move, new_game, resize, restart

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameSession:
    """
    2048 game session.

    This class owns the current game, the session's source of randomness and its configuration. Each method call
    replaces the current ``GameState``; the best score survives every restart and resize of the same session.
    """

    # ##: All Actions.
    ACTIONS = ACTIONS

    def __init__(self, config: GameConfig | None = None, rng: RandomSource | None = None, best_score: int = 0):
        """
        Start a session with a fresh game.

        Parameters
        ----------
        config : GameConfig, optional
            Board size, size bounds and rules (default is the classic 4x4 configuration).
        rng : RandomSource, optional
            Source of randomness for tile spawning. Defaults to a generator seeded with ``config.seed``.
        best_score : int, optional
            Best score carried over from an earlier session (default is 0).
        """
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else self._make_generator(self.config.seed)
        self._state = new_game(self.config.size, best_score=best_score, rng=self._rng, config=self.config)

    @staticmethod
    def _make_generator(seed: int | None) -> Generator:
        return default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    @property
    def state(self) -> GameState:
        """The current game."""
        return self._state

    @property
    def size(self) -> int:
        """Side length of the current board."""
        return self._state.size

    @property
    def score(self) -> int:
        """Score of the current game."""
        return self._state.score

    @property
    def best_score(self) -> int:
        """Best score reached during this session."""
        return self._state.best_score

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return self._state.game_over

    def snapshot(self) -> dict[str, Any]:
        """Read-only view of the current game for renderers."""
        return self._state.snapshot()

    def reset(self, seed: int | None = None) -> dict[str, Any]:
        """
        Restart the game on a board of the same size.

        Parameters
        ----------
        seed : int, optional
            If given, reseed the session generator before spawning the starting tiles.

        Returns
        -------
        dict[str, Any]
            Snapshot of the new game.
        """
        if seed is not None:
            self._rng = self._make_generator(seed)
            _logger.debug('Session generator reseeded with %d', seed)
        self._state = restart(self._state, rng=self._rng, config=self.config)
        return self.snapshot()

    def resize(self, new_size: int) -> dict[str, Any]:
        """
        Start a new game on a board of another size.

        Parameters
        ----------
        new_size : int
            Side length of the new board.

        Returns
        -------
        dict[str, Any]
            Snapshot of the new game.

        Raises
        ------
        InvalidSizeError
            If ``new_size`` is outside the configured bounds. The current game is kept.
        """
        self._state = resize(self._state, new_size, rng=self._rng, config=self.config)
        return self.snapshot()

    def step(self, direction: Direction | str) -> tuple[dict[str, Any], int, bool]:
        """
        Apply one move.

        Parameters
        ----------
        direction : Direction | str
            The direction of the move.

        Returns
        -------
        tuple[dict[str, Any], int, bool]
            A tuple containing:
            - Snapshot of the game after the move
            - The score gained by this move
            - Whether the move changed the board

        Notes
        -----
        Once the game is over, every move is ignored until ``reset`` or ``resize``.
        """
        previous = self._state
        self._state = apply_move(previous, direction, rng=self._rng, config=self.config)
        moved = self._state.board is not previous.board
        return self.snapshot(), self._state.score - previous.score, moved

    def status_text(self) -> str:
        """Status line shown under the score: win, loss or nothing."""
        if self._state.game_won:
            return 'You won!'
        if self._state.game_over:
            return 'Game over'
        return ''

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(f'Score: {self.score}\tBest: {self.best_score}')
        for row in self._state.board.tolist():
            print(' \t'.join(str(value) if value else '.' for value in row))
        if self.status_text():
            print(self.status_text())
