# -*- coding: utf-8 -*-
"""
Python implementation of the merge puzzle rules engine.

This module provides the `BoardEngine` class, which owns the board and applies the game rules, and the greedy
move selector used by its auto-move.
"""

from .engine import BoardEngine, Snapshot
from .selector import choose_move, evaluate_move

__all__ = ["BoardEngine", "Snapshot", "choose_move", "evaluate_move"]
