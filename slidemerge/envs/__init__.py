# -*- coding: utf-8 -*-
"""
Game session for the sliding-tile merge puzzle.

This module provides the `SlideMerge` class, which keeps the board, the score and the random generator of one game.
"""

from .game import SlideMerge, StepResult

__all__ = ["SlideMerge", "StepResult"]
