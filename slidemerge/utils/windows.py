# -*- coding: utf-8 -*-
"""
Display the board in a window.
"""
import numpy as np
from matplotlib import pyplot as plt


class WindowBoard:
    """
    Window drawing the board with Matplotlib, one sub-axes per cell.
    """

    # ##: Colors
    EMPTY_COLOR = "#CDC1B4"
    COLORS = {
        2: "#EEE4DA",
        4: "#EDE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
        4096: "#3C3A32",
    }

    def __init__(self, title: str, size: int):
        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.92, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])
        self.fig.canvas.manager.set_window_title(title)

        self.size = 0
        self.axes = []
        self.textes = []
        self.set_size(size)

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def set_size(self, size: int):
        """
        Rebuild the grid of cells for a board of another size.

        Parameters
        ----------
        size: int
            Dimension of the board
        """
        for _ax in self.axes:
            _ax.remove()

        self.size = size
        self.axes = [self.fig.add_subplot(size, size, index) for index in range(1, size * size + 1)]
        self.textes = []
        for _ax in self.axes:
            _ax.set_xticks([])
            _ax.set_yticks([])
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large" if size <= 5 else "medium",
                fontweight="demibold",
            )
            self.textes.append(text)

    def color(self, value: int) -> str:
        """
        Background color of a cell.

        Values above the last known tile share its color.
        """
        if value == 0:
            return self.EMPTY_COLOR
        return self.COLORS.get(value, self.COLORS[max(self.COLORS)])

    def show_image(self, board: np.ndarray, score: int | None = None):
        """
        Show the board or update the board being shown.

        Parameters
        ----------
        board: np.ndarray
            Board to show
        score: int, optional
            Score written above the board
        """
        if board.shape[0] != self.size:
            self.set_size(board.shape[0])

        # ## ----> Update the cells.
        for _ax, text, value in zip(self.axes, self.textes, np.reshape(board, -1).tolist()):
            text.set_text(str(value) if value else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            _ax.set_facecolor(self.color(value))

        if score is not None:
            self.fig.suptitle(f"Score: {score}")

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
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
