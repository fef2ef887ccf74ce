# -*- coding: utf-8 -*-
"""
Play the sliding-tile merge puzzle with the keyboard.

Arrows or WASD move, backspace restarts, digits 2 to 8 restart on a board of that size, escape quits.
"""
import logging
from typing import Any

import numpy as np
from matplotlib import pyplot as plt

from slidemerge.core import Direction
from slidemerge.envs import SlideMerge
from slidemerge.utils import WindowBoard

RESIZE_KEYS = {str(size): size for size in range(2, 9)}


def redraw(window: WindowBoard, board: np.ndarray, score: int):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    board: np.ndarray
        Game board to draw

    score: int
        Current score
    """
    window.show_image(board, score=score)


def reset(envs: SlideMerge, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: SlideMerge
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    board = envs.reset()
    redraw(window, board, envs.score)


def resize(envs: SlideMerge, window: WindowBoard, size: int):
    """
    Restart the game on a board of another size.

    Parameters
    ----------
    envs: SlideMerge
        The game session

    window: WindowBoard
        Class to draw the game board

    size: int
        New board dimension
    """
    board = envs.resize(size)
    redraw(window, board, envs.score)


def step(envs: SlideMerge, window: WindowBoard, direction: Direction):
    """
    Applied a move into the game.

    Parameters
    ----------
    envs: SlideMerge
        The game session

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Direction of the move
    """
    already_won = envs.won
    result = envs.step(direction)
    if not result.moved:
        return

    print(f"reward={result.reward} score={envs.score}")
    redraw(window, result.board, envs.score)
    if result.won and not already_won:
        print(f"won! reached {envs.config.target}")
    if result.over:
        print("terminated! press backspace to restart")


def key_handler(envs: SlideMerge, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: SlideMerge
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(envs, window)
        return None

    if event.key in RESIZE_KEYS:
        resize(envs, window, RESIZE_KEYS[event.key])
        return None

    try:
        direction = Direction.parse(event.key)
    except ValueError:
        return None

    step(envs, window, direction)
    return None


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--target", type=int, default=2048)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    # ##: Free the keys Matplotlib binds to its toolbar.
    for name in [name for name in plt.rcParams if name.startswith("keymap.")]:
        plt.rcParams[name] = []

    env = SlideMerge(size=args.size, target=args.target)
    window_board = WindowBoard(title="Slide & Merge", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    reset(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
