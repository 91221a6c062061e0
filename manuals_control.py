# -*- coding: utf-8 -*-
"""
Play 2048 Game

Arrow keys or mouse swipes move the tiles, backspace restarts, digit keys change the board size (0 for 10) and
escape closes the window.
"""
import argparse
import logging
from typing import Any

from puzzle2048.config import GameConfig
from puzzle2048.core.errors import InvalidSizeError
from puzzle2048.envs import GameSession
from puzzle2048.utils import WindowBoard, key_direction, parse_board_size, swipe_direction

_logger = logging.getLogger(__name__)


def redraw(window: WindowBoard, session: GameSession, message: str = ""):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: GameSession
        The game session to draw

    message: str
        Text shown next to the score, defaults to the session status
    """
    window.show_snapshot(session.snapshot(), message or session.status_text())


def reset(session: GameSession, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    session.reset()
    redraw(window, session)


def resize(session: GameSession, window: WindowBoard, text: str):
    """
    Change the board size and redraw, or show why the size was refused.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    text: str
        Board size typed by the user
    """
    try:
        session.resize(parse_board_size(text, session.config))
    except InvalidSizeError as error:
        _logger.warning("Refused board size %r: %s", text, error)
        redraw(window, session, str(error))
        return
    redraw(window, session)


def step(session: GameSession, window: WindowBoard, direction: Any):
    """
    Applied a move into the game.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Direction to apply
    """
    _, gained, moved = session.step(direction)
    _logger.info("%s: moved=%s, gained=%d, score=%d", direction.value, moved, gained, session.score)

    redraw(window, session)
    if session.is_finished:
        _logger.info("terminated!")


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(session, window)
        return None

    if event.key is not None and event.key.isdigit():
        resize(session, window, "10" if event.key == "0" else event.key)
        return None

    direction = key_direction(event.key)
    if direction is not None:
        step(session, window, direction)
    return None


class SwipeTracker:
    """
    Turn a mouse press and release pair into a swipe.

    Matplotlib reports pixels with the origin at the bottom-left, so the vertical distance is flipped into
    screen coordinates before classification.
    """

    def __init__(self, session: GameSession, window: WindowBoard):
        self.session = session
        self.window = window
        self._start: tuple[float, float] | None = None

    def on_press(self, event: Any):
        self._start = (event.x, event.y)

    def on_release(self, event: Any):
        if self._start is None:
            return
        start_x, start_y = self._start
        self._start = None

        direction = swipe_direction(
            event.x - start_x, start_y - event.y, threshold=self.session.config.swipe_threshold
        )
        if direction is not None:
            step(self.session, self.window, direction)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play 2048 with the keyboard or the mouse.")
    parser.add_argument("--size", type=int, default=4, help="Side length of the board (2 to 10)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile spawning")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = GameSession(GameConfig(size=args.size, seed=args.seed))

    window_board = WindowBoard(title="2048 Game", size=game.size)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))
    swipes = SwipeTracker(game, window_board)
    window_board.register_pointer_handlers(swipes.on_press, swipes.on_release)

    redraw(window_board, game)

    # Blocking event loop
    window_board.show(block=True)
