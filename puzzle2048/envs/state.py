"""
Immutable game state and the pure transitions between states: new game, move, restart and resize.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from numpy import ndarray

from puzzle2048.config import GameConfig
from puzzle2048.core.gameboard import (
    RandomSource,
    create_empty_board,
    fill_cells,
    has_tile,
    move,
    spawn_random_tile,
    to_rows,
)
from puzzle2048.core.gamemove import Direction, can_move, parse_direction

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of a game: board, scores and terminal flags.

    ``score`` only grows within a game and goes back to 0 on restart or resize. ``best_score`` only grows and is
    carried over by restart and resize.
    """

    board: ndarray = field(repr=False)
    score: int = 0
    best_score: int = 0
    game_over: bool = False
    game_won: bool = False

    @property
    def size(self) -> int:
        """Side length of the board."""
        return int(self.board.shape[0])

    def snapshot(self) -> dict[str, Any]:
        """
        Read-only view of the state for renderers.

        Returns
        -------
        dict[str, Any]
            Keys ``board`` (rows with ``None`` for empty cells), ``score``, ``best_score``, ``game_over``,
            ``game_won`` and ``size``.
        """
        return {
            'board': to_rows(self.board),
            'score': self.score,
            'best_score': self.best_score,
            'game_over': self.game_over,
            'game_won': self.game_won,
            'size': self.size,
        }


def new_game(
    size: int, best_score: int = 0, rng: RandomSource | None = None, config: GameConfig | None = None
) -> GameState:
    """
    Start a game on an empty board with the starting tiles spawned.

    Parameters
    ----------
    size : int
        Side length of the board.
    best_score : int, optional
        Best score carried over from previous games (default is 0).
    rng : RandomSource, optional
        Source of randomness for the starting tiles.
    config : GameConfig, optional
        Size bounds and number of starting tiles. Defaults to the classic configuration.

    Returns
    -------
    GameState
        The fresh game.

    Raises
    ------
    InvalidSizeError
        If ``size`` is outside the configured bounds.
    """
    config = config or GameConfig()
    size = config.validate_size(size)

    board = fill_cells(create_empty_board(size), number_tile=config.start_tiles, rng=rng)
    _logger.info('New %dx%d game (best score %d)', size, size, best_score)
    return GameState(board=board, best_score=best_score)


def apply_move(
    state: GameState, direction: Direction | str, rng: RandomSource | None = None, config: GameConfig | None = None
) -> GameState:
    """
    Apply one move to the game.

    Parameters
    ----------
    state : GameState
        The current game.
    direction : Direction | str
        The direction of the move.
    rng : RandomSource, optional
        Source of randomness for the tile spawned after the move.
    config : GameConfig, optional
        Supplies the winning tile. Defaults to the classic configuration.

    Returns
    -------
    GameState
        The game after the move. ``state`` itself is returned when the game is over.

    Raises
    ------
    InvalidDirectionError
        If ``direction`` does not name a direction.

    Notes
    -----
    - A move that changes nothing spawns no tile and leaves the score untouched.
    - ``game_won`` is never cleared once set.
    """
    direction = parse_direction(direction)
    if state.game_over:
        return state

    config = config or GameConfig()
    board, gained, moved = move(state.board, direction)
    _logger.debug('Move %s: moved=%s, score gained=%d', direction.value, moved, gained)

    if not moved:
        return replace(state, best_score=max(state.best_score, state.score))

    # ##: Spawn one tile and update the score.
    board = spawn_random_tile(board, rng=rng)
    score = state.score + gained

    # ##: Terminal flags.
    game_won = state.game_won or has_tile(board, config.winning_tile)
    game_over = not can_move(board)
    if game_won and not state.game_won:
        _logger.info('Reached %d with score %d', config.winning_tile, score)
    if game_over:
        _logger.info('Game over with score %d', score)

    return GameState(
        board=board,
        score=score,
        best_score=max(state.best_score, score),
        game_over=game_over,
        game_won=game_won,
    )


def resize(
    state: GameState, new_size: int, rng: RandomSource | None = None, config: GameConfig | None = None
) -> GameState:
    """Start a new game with another board size, keeping the best score."""
    return new_game(new_size, best_score=state.best_score, rng=rng, config=config)


def restart(state: GameState, rng: RandomSource | None = None, config: GameConfig | None = None) -> GameState:
    """Start a new game with the same board size, keeping the best score."""
    return resize(state, state.size, rng=rng, config=config)
