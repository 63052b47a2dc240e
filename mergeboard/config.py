# -*- coding: utf-8 -*-
"""
Configuration of the board engine.
"""
from dataclasses import dataclass, field
from math import isclose
from typing import Dict, Optional

from mergeboard.core.gameboard import TILE_SPAWN_PROBS


@dataclass
class EngineConfiguration:
    """
    Engine configuration.

    Attributes
    ----------
    size : int
        Width and height of the square grid.
    spawn_probabilities : Dict[int, float]
        Probability of each value for a newly spawned tile.
    initial_tiles : int
        Number of tiles placed on a fresh board.
    seed : int, optional
        Seed of the random number generator. None draws fresh entropy.
    """

    size: int = 4
    spawn_probabilities: Dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    initial_tiles: int = 2
    seed: Optional[int] = None

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not self.spawn_probabilities:
            raise ValueError('spawn_probabilities must not be empty')
        if any(prob < 0 or prob > 1 for prob in self.spawn_probabilities.values()):
            raise ValueError(f'spawn probabilities must be in [0, 1], got {self.spawn_probabilities}')
        if not isclose(sum(self.spawn_probabilities.values()), 1.0):
            raise ValueError(f'spawn probabilities must sum to 1, got {self.spawn_probabilities}')
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(f'initial_tiles must be in [0, {self.size * self.size}], got {self.initial_tiles}')
