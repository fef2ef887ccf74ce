# -*- coding: utf-8 -*-
"""
Display utilities for the sliding-tile merge puzzle.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
