# -*-  coding: utf-8 -*-
"""
Set of test for the engine configuration.
"""
from unittest import TestCase, main

import numpy as np

from mergeboard import BoardEngine, EngineConfiguration


class TestEngineConfiguration(TestCase):
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test the default configuration."""
        config = EngineConfiguration()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.spawn_probabilities, {2: 0.9, 4: 0.1})
        self.assertEqual(config.initial_tiles, 2)
        self.assertIsNone(config.seed)

    def test_defaults_are_not_shared(self):
        """Test that each configuration owns its spawn probabilities."""
        first, second = EngineConfiguration(), EngineConfiguration()
        first.spawn_probabilities[2] = 0.5
        self.assertEqual(second.spawn_probabilities[2], 0.9)

    def test_invalid_size(self):
        """Test if a board smaller than 2x2 is rejected."""
        with self.assertRaises(ValueError):
            EngineConfiguration(size=1)

    def test_invalid_probabilities(self):
        """Test if probabilities out of range or not summing to one are rejected."""
        with self.assertRaises(ValueError):
            EngineConfiguration(spawn_probabilities={2: 0.5, 4: 0.2})
        with self.assertRaises(ValueError):
            EngineConfiguration(spawn_probabilities={2: 1.5, 4: -0.5})
        with self.assertRaises(ValueError):
            EngineConfiguration(spawn_probabilities={})

    def test_invalid_initial_tiles(self):
        """Test if more initial tiles than cells are rejected."""
        with self.assertRaises(ValueError):
            EngineConfiguration(size=2, initial_tiles=5)


class TestConfiguredEngine(TestCase):
    """Test engines built from custom configurations."""

    def test_no_initial_tiles(self):
        """Test an engine starting from an empty board."""
        engine = BoardEngine(EngineConfiguration(initial_tiles=0, seed=0))
        self.assertEqual(engine.empty_tiles, 16)

    def test_only_fours(self):
        """Test if custom spawn probabilities drive the engine."""
        engine = BoardEngine(EngineConfiguration(spawn_probabilities={4: 1.0}, initial_tiles=6, seed=0))
        tiles = engine.tiles
        np.testing.assert_array_equal(tiles[tiles != 0], [4] * 6)

    def test_injected_generator(self):
        """Test if an injected generator takes precedence over the seed."""
        first = BoardEngine(EngineConfiguration(seed=1), generator=np.random.default_rng(99))
        second = BoardEngine(EngineConfiguration(seed=2), generator=np.random.default_rng(99))
        np.testing.assert_array_equal(first.tiles, second.tiles)


if __name__ == "__main__":
    main()
