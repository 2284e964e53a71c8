# -*- coding: utf-8 -*-
"""
Display the board in a window.
"""
from typing import Any, Callable

import numpy as np
from matplotlib import pyplot as plt

from tileboard.core import Grid

from .actuator import Actuator, GameMetadata, message_for

# ##: Colors
TILE_COLORS = {
    0: "#CDC1B4",
    2: "#EEE4DA",
    4: "#ECE0C8",
    8: "#F2B179",
    16: "#F59563",
    32: "#FA7A61",
    64: "#E95936",
    128: "#F3D86D",
    256: "#F2D04B",
    512: "#E3C225",
    1024: "#ECC440",
    2048: "#ECC400",
}
DEFAULT_COLOR = "#D6CAB5"
TEXT_COLOR = "#766D64"


def tile_color(value: int) -> str:
    """
    Background color of a tile.

    Parameters
    ----------
    value: int
        Value of the tile, 0 for an empty cell

    Returns
    -------
    str
        Hexadecimal color
    """
    return TILE_COLORS.get(int(value), DEFAULT_COLOR)


class WindowBoard:
    """
    Window to draw the board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    def __init__(self, title: str, size: int):
        # ## ----> Create support.
        self.size = size
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor("#BBADA0")
        self.fig.canvas.manager.set_window_title(title)
        self.title = self.fig.suptitle("")

        self.axe.xaxis.set_ticks_position("none")
        self.axe.yaxis.set_ticks_position("none")
        _ = self.axe.set_xticklabels([])
        _ = self.axe.set_yticklabels([])

        # ## ----> Add cell for board, row by row from the top.
        self.textes = []
        self.axes = [self.fig.add_subplot(size, size, index) for index in range(1, size * size + 1)]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
                color=TEXT_COLOR,
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def show_board(self, board: np.ndarray):
        """
        Update the tiles being shown.

        Parameters
        ----------
        board: np.ndarray
            Tile values indexed [y, x], 0 for an empty cell
        """
        # ## ----> Update the cells.
        values = np.reshape(board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            text.set_text(str(int(value)) if value else "")
            _ax.set_facecolor(tile_color(value))

        self.refresh()

    def set_title(self, text: str):
        """
        Show a text above the board (score or end-of-game message).

        Parameters
        ----------
        text: str
            Text to show
        """
        self.title.set_text(text)
        self.refresh()

    def refresh(self):
        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable[[Any], Any]):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_click_handler(self, click_handler: Callable[[Any], Any]):
        """
        Register a mouse click handler.

        Parameters
        ----------
        click_handler: Callable
            Click handler
        """
        self.fig.canvas.mpl_connect("button_press_event", click_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True


class WindowActuator(Actuator):
    """
    Actuator drawing the grid in a ``WindowBoard``.

    Parameters
    ----------
    window: WindowBoard
        Window to draw into
    """

    def __init__(self, window: WindowBoard):
        self.window = window
        self.score = 0

    def actuate(self, grid: Grid, metadata: GameMetadata) -> None:
        self.window.show_board(grid.to_array())
        self.score = metadata.score

        message = message_for(metadata)
        self.window.set_title(message if message is not None else f"Score: {self.score}")

    def clear_score(self) -> None:
        self.score = 0
        self.window.set_title("")

    def show_text(self, text: str) -> None:
        self.window.set_title(text)
