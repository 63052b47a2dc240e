# -*- coding: utf-8 -*-
"""
This module provides the board primitives of the merge puzzle.

It includes functions for compressing and merging rows, rotating the board, spawning tiles, listing legal moves
and detecting the terminal state.
"""

from .efficiency import MoveEfficiency
from .gameboard import (
    TILE_SPAWN_PROBS,
    compress_row,
    empty_cells,
    merge_row,
    rotate_clockwise,
    slide_left,
    slide_row,
    spawn_tile,
)
from .gamemove import Move, can_move, legal_moves

__all__ = [
    "TILE_SPAWN_PROBS",
    "Move",
    "MoveEfficiency",
    "can_move",
    "compress_row",
    "empty_cells",
    "legal_moves",
    "merge_row",
    "rotate_clockwise",
    "slide_left",
    "slide_row",
    "spawn_tile",
]
