# -*- coding: utf-8 -*-
"""
Board engine for the sliding-tile merge puzzle.

It includes functions for creating boards, spawning tiles, sliding and merging in any direction,
rotating and reflecting boards, and checking whether moves remain.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    MoveResult,
    add_random_tile,
    empty_board,
    max_tile,
    merge_row_left,
    move,
    reached,
    reflect,
    rotate_clockwise,
    rotate_counterclockwise,
    slide_and_merge,
)
from .gamemove import Direction, can_move, has_moves, illegal_directions, is_done, legal_directions

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "MoveResult",
    "add_random_tile",
    "can_move",
    "empty_board",
    "has_moves",
    "illegal_directions",
    "is_done",
    "legal_directions",
    "max_tile",
    "merge_row_left",
    "move",
    "reached",
    "reflect",
    "rotate_clockwise",
    "rotate_counterclockwise",
    "slide_and_merge",
]
