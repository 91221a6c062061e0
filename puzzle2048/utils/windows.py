# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 game.

This module provides functionality to create and manage a graphical window for displaying a game snapshot.
It utilizes Matplotlib for rendering and handling user interactions: keyboard events and pointer drags, which
the caller turns into moves and swipes.
"""
from typing import Any, Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event


class WindowBoard:
    """
    A class for rendering a 2048 game snapshot using Matplotlib.

    Methods
    -------
    show_snapshot(snapshot: dict)
        Update the display with the current game state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    register_pointer_handlers(on_press: Callable, on_release: Callable)
        Register functions to handle mouse button press and release.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.

    Notes
    -----
    - The grid is rebuilt whenever the snapshot's board size differs from the displayed one.
    - The window title carries the score, the best score and the status message.
    """

    # ##: Colors mapping for different tile values, None being an empty cell.
    COLORS = {
        None: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
        16384: "#9ED682",
        32768: "#9ED682",
    }

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.title = title
        self.fig = plt.figure()
        self.fig.canvas.manager.set_window_title(title)
        self.size = 0
        self.axes: list = []
        self.texts: list = []
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    @staticmethod
    def font_size(size: int) -> int:
        """Font size of the tile labels, shrinking as the board grows."""
        return max(10, 30 - size)

    def _setup_axes(self, size: int):
        """
        Set up one subplot per cell of the game board, removing the previous grid if any.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        for ax in self.axes:
            ax.remove()

        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.fig.patch.set_facecolor("#BBADA0")

        self.size = size
        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(
                0.5, 0.5, "", ha="center", va="center", fontsize=self.font_size(size), fontweight="demibold"
            )
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])
            ax.set_xticklabels([])
            ax.set_yticklabels([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (not used but required for event handling).
        """
        self.closed = True

    def show_snapshot(self, snapshot: dict[str, Any], message: str = ""):
        """
        Show or update the game board.

        Parameters
        ----------
        snapshot : dict
            Game snapshot, as returned by ``GameState.snapshot``.
        message : str, optional
            Status text appended to the title, such as "You won!" or an input error.
        """
        if snapshot["size"] != self.size:
            self._setup_axes(snapshot["size"])

        cells = [value for row in snapshot["board"] for value in row]
        for ax, text, value in zip(self.axes, self.texts, cells):
            text.set_text(str(value) if value is not None else "")
            ax.set_facecolor(self.COLORS.get(value, "#FFFFFF"))

        title = f"Score: {snapshot['score']}    Best: {snapshot['best_score']}"
        if message:
            title = f"{title}    {message}"
        self.fig.suptitle(title)

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_pointer_handlers(self, on_press: Callable, on_release: Callable):
        """
        Register mouse button handlers, used to detect swipes.

        Parameters
        ----------
        on_press : Callable
            Called with the ``button_press_event``.
        on_release : Callable
            Called with the ``button_release_event``.

        Notes
        -----
        Event coordinates are display pixels with the origin at the bottom-left corner.
        """
        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("button_release_event", on_release)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
