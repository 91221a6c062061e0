"""
Tests for the 2048 game session.

Tests cover the pure state transitions (new game, move, restart, resize), the scoring and terminal flags, and the
stateful `GameSession` wrapper used by user interfaces.
"""

from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, main

import numpy as np

from helpers import ScriptedRandom
from puzzle2048.config import GameConfig
from puzzle2048.core import Direction, InvalidDirectionError, InvalidSizeError, as_board
from puzzle2048.envs import GameSession, GameState, apply_move, new_game, resize, restart


class TestNewGame(TestCase):
    """Test creation of a fresh game."""

    def test_new_game_spawns_two_tiles(self):
        """A fresh game holds exactly 2 tiles, valued 2 or 4, and no score."""
        state = new_game(4, rng=np.random.default_rng(42))

        self.assertEqual(state.size, 4)
        self.assertEqual(np.count_nonzero(state.board), 2)
        tiles = state.board[state.board != 0]
        self.assertTrue(np.all((tiles == 2) | (tiles == 4)))
        self.assertEqual(state.score, 0)
        self.assertEqual(state.best_score, 0)
        self.assertFalse(state.game_over)
        self.assertFalse(state.game_won)

    def test_new_game_is_reproducible(self):
        """Same seed produces identical initial boards."""
        first = new_game(5, rng=np.random.default_rng(7))
        second = new_game(5, rng=np.random.default_rng(7))
        np.testing.assert_array_equal(first.board, second.board)

    def test_new_game_size_bounds(self):
        """Sizes 2 to 10 are accepted, anything else is refused."""
        for size in (2, 10):
            self.assertEqual(new_game(size, rng=np.random.default_rng(0)).size, size)
        for size in (0, 1, 11, -4):
            with self.assertRaises(InvalidSizeError):
                new_game(size)

    def test_new_game_numpy_size(self):
        """Sizes coming from NumPy arithmetic are accepted."""
        state = new_game(np.int64(3), rng=np.random.default_rng(0))
        self.assertEqual(state.size, 3)
        self.assertEqual(state.snapshot()['size'], 3)

    def test_new_game_custom_bounds(self):
        """Bounds come from the configuration."""
        config = GameConfig(size=3, min_size=3, max_size=5)
        with self.assertRaises(InvalidSizeError):
            new_game(2, config=config)
        self.assertEqual(new_game(5, config=config, rng=np.random.default_rng(0)).size, 5)

    def test_snapshot(self):
        """Snapshot exposes the nullable board and every flag."""
        state = new_game(2, best_score=12, rng=ScriptedRandom([(0, 0.0), (0, 0.95)]))
        self.assertEqual(
            state.snapshot(),
            {
                'board': [[2, 4], [None, None]],
                'score': 0,
                'best_score': 12,
                'game_over': False,
                'game_won': False,
                'size': 2,
            },
        )


class TestApplyMove(TestCase):
    """Test scoring, spawning and terminal flags after a move."""

    def test_move_spawns_and_scores(self):
        """A successful move adds its score and spawns one tile."""
        state = GameState(board=as_board([[2, 2], [None, None]]))
        rng = ScriptedRandom([(0, 0.0)])

        after = apply_move(state, Direction.LEFT, rng=rng)

        np.testing.assert_array_equal(after.board, np.array([[4, 2], [0, 0]]))
        self.assertEqual(after.score, 4)
        self.assertEqual(after.best_score, 4)
        self.assertFalse(after.game_over)
        self.assertTrue(rng.exhausted)

    def test_no_op_move(self):
        """A move that changes nothing spawns nothing and keeps the score."""
        state = GameState(board=as_board([[2, 4], [8, None]]), score=20, best_score=50)
        rng = ScriptedRandom([])

        after = apply_move(state, 'left', rng=rng)

        self.assertIs(after.board, state.board)
        self.assertEqual(after.score, 20)
        self.assertEqual(after.best_score, 50)

    def test_move_by_name(self):
        """Directions can be given as strings."""
        state = GameState(board=as_board([[None, 2], [None, None]]))
        after = apply_move(state, 'left', rng=ScriptedRandom([(0, 0.0)]))
        np.testing.assert_array_equal(after.board, np.array([[2, 2], [0, 0]]))

    def test_unknown_direction(self):
        """Unknown directions are refused."""
        state = GameState(board=as_board([[2, None], [None, None]]))
        with self.assertRaises(InvalidDirectionError):
            apply_move(state, 'sideways')

    def test_best_score_follows_score(self):
        """Best score is raised when the score exceeds it, never lowered."""
        state = GameState(board=as_board([[4, 4], [None, None]]), score=10, best_score=12)
        after = apply_move(state, 'left', rng=ScriptedRandom([(0, 0.0)]))
        self.assertEqual(after.score, 18)
        self.assertEqual(after.best_score, 18)

        state = GameState(board=as_board([[4, 4], [None, None]]), score=10, best_score=100)
        after = apply_move(state, 'left', rng=ScriptedRandom([(0, 0.0)]))
        self.assertEqual(after.best_score, 100)

    def test_win_is_sticky(self):
        """Reaching 2048 sets the win flag, which stays set afterwards."""
        state = GameState(board=as_board([[1024, 1024], [None, None]]))
        won = apply_move(state, 'left', rng=ScriptedRandom([(0, 0.0)]))

        np.testing.assert_array_equal(won.board, np.array([[2048, 2], [0, 0]]))
        self.assertTrue(won.game_won)
        self.assertEqual(won.score, 2048)

        # ##>: No 2048 tile left on the board, flag still set.
        later = GameState(board=as_board([[2, None], [None, None]]), score=2048, game_won=True)
        after = apply_move(later, 'right', rng=ScriptedRandom([(0, 0.0)]))
        self.assertTrue(after.game_won)

    def test_custom_winning_tile(self):
        """The winning tile comes from the configuration."""
        config = GameConfig(winning_tile=8)
        state = GameState(board=as_board([[4, 4], [None, None]]))
        after = apply_move(state, 'left', rng=ScriptedRandom([(0, 0.0)]), config=config)
        self.assertTrue(after.game_won)

    def test_game_over(self):
        """The game ends when the spawned tile blocks every move."""
        state = GameState(board=as_board([[2, 4], [None, 8]]))
        over = apply_move(state, 'left', rng=ScriptedRandom([(0, 0.0)]))

        np.testing.assert_array_equal(over.board, np.array([[2, 4], [8, 2]]))
        self.assertTrue(over.game_over)

    def test_moves_ignored_after_game_over(self):
        """Once over, the game no longer changes."""
        state = GameState(board=as_board([[2, 4], [8, 2]]), score=40, game_over=True)
        for direction in Direction:
            self.assertIs(apply_move(state, direction, rng=ScriptedRandom([])), state)


class TestRestartAndResize(TestCase):
    """Test the transitions replacing the current game."""

    def test_resize_keeps_best_score(self):
        """Resize starts a new game of the new size, keeping the best score."""
        state = GameState(board=as_board([[2, 4], [8, 2]]), score=300, best_score=500, game_over=True, game_won=True)
        fresh = resize(state, 6, rng=np.random.default_rng(1))

        self.assertEqual(fresh.size, 6)
        self.assertEqual(fresh.score, 0)
        self.assertEqual(fresh.best_score, 500)
        self.assertFalse(fresh.game_over)
        self.assertFalse(fresh.game_won)
        self.assertEqual(np.count_nonzero(fresh.board), 2)

    def test_resize_invalid(self):
        """Out of range sizes are refused."""
        state = new_game(4, rng=np.random.default_rng(0))
        with self.assertRaises(InvalidSizeError):
            resize(state, 11)

    def test_restart_keeps_size(self):
        """Restart keeps the size and the best score."""
        state = GameState(board=np.zeros((3, 3), dtype=np.int64), score=64, best_score=64)
        fresh = restart(state, rng=np.random.default_rng(2))
        self.assertEqual(fresh.size, 3)
        self.assertEqual(fresh.score, 0)
        self.assertEqual(fresh.best_score, 64)


class TestGameSession(TestCase):
    """Test the stateful session used by user interfaces."""

    def test_init(self):
        """Session starts a game of the configured size."""
        session = GameSession(GameConfig(size=3, seed=7))
        self.assertEqual(session.size, 3)
        self.assertEqual(np.count_nonzero(session.state.board), 2)
        self.assertFalse(session.is_finished)
        self.assertEqual(session.status_text(), '')

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical boards."""
        session = GameSession()
        first = session.reset(seed=42)
        second = session.reset(seed=42)
        self.assertEqual(first['board'], second['board'])

    def test_step(self):
        """Step returns the snapshot, the score gained and the moved flag."""
        session = GameSession(GameConfig(size=2), rng=ScriptedRandom([(0, 0.0), (0, 0.0), (0, 0.0)]))

        snapshot, gained, moved = session.step('left')

        self.assertEqual(snapshot['board'], [[4, 2], [None, None]])
        self.assertEqual(gained, 4)
        self.assertTrue(moved)
        self.assertEqual(session.score, 4)

    def test_step_no_op(self):
        """A move that changes nothing reports it."""
        session = GameSession(GameConfig(size=2), rng=ScriptedRandom([(0, 0.0), (0, 0.95)]))

        snapshot, gained, moved = session.step(Direction.LEFT)

        self.assertEqual(snapshot['board'], [[2, 4], [None, None]])
        self.assertEqual(gained, 0)
        self.assertFalse(moved)

    def test_best_score_survives_reset_and_resize(self):
        """Best score is kept across restarts and resizes."""
        session = GameSession(GameConfig(seed=3))
        session._state = GameState(board=as_board([[2, 4], [8, 2]]), score=256, best_score=256, game_over=True)
        self.assertTrue(session.is_finished)
        self.assertEqual(session.status_text(), 'Game over')

        session.reset()
        self.assertEqual(session.best_score, 256)
        self.assertEqual(session.score, 0)
        self.assertEqual(session.size, 2)

        snapshot = session.resize(5)
        self.assertEqual(snapshot['size'], 5)
        self.assertEqual(snapshot['best_score'], 256)
        self.assertFalse(session.is_finished)

    def test_init_with_best_score(self):
        """A best score carried over from an earlier session survives reset and resize."""
        session = GameSession(GameConfig(seed=1), best_score=300)
        self.assertEqual(session.best_score, 300)
        self.assertEqual(session.score, 0)

        session.reset()
        self.assertEqual(session.best_score, 300)
        self.assertEqual(session.resize(5)['best_score'], 300)

    def test_invalid_resize_keeps_game(self):
        """A refused size leaves the current game in place."""
        session = GameSession(GameConfig(seed=4))
        before = session.state

        with self.assertRaises(InvalidSizeError):
            session.resize(1)
        self.assertIs(session.state, before)

    def test_status_text_win(self):
        """Win message is shown once 2048 is reached."""
        session = GameSession(GameConfig(seed=5))
        session._state = GameState(board=as_board([[2048, None], [None, None]]), game_won=True)
        self.assertEqual(session.status_text(), 'You won!')

    def test_render(self):
        """Render prints the scores and one line per row."""
        session = GameSession(GameConfig(size=2), rng=ScriptedRandom([(0, 0.0), (2, 0.95)]))
        output = StringIO()
        with redirect_stdout(output):
            session.render()

        lines = output.getvalue().splitlines()
        self.assertEqual(lines[0], 'Score: 0\tBest: 0')
        self.assertEqual(lines[1:], ['2 \t.', '. \t4'])

    def test_game_reaches_termination(self):
        """Playing the first legal move repeatedly eventually ends the game."""
        session = GameSession(GameConfig(size=3, seed=42))

        for _ in range(10_000):
            if session.is_finished:
                break
            for direction in Direction:
                _, _, moved = session.step(direction)
                if moved:
                    break

        self.assertTrue(session.is_finished)
        self.assertGreaterEqual(session.best_score, session.score)


if __name__ == '__main__':
    main()
