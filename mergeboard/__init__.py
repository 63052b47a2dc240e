# -*- coding: utf-8 -*-
"""
Rules engine for a 2048-style sliding-tile merge puzzle.
"""

from mergeboard.config import EngineConfiguration
from mergeboard.core import Move, MoveEfficiency
from mergeboard.envs import BoardEngine

__all__ = ["BoardEngine", "EngineConfiguration", "Move", "MoveEfficiency"]
