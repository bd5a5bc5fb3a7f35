"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


class SequenceRandom:
    """Random source that returns a fixed sequence of cell indices."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high):
        value = self.values.pop(0)
        assert low <= value < high
        self.calls.append((low, high))
        return value


@pytest.fixture
def fixed_rng():
    """Factory for a random source with a scripted sequence of cell indices."""
    return SequenceRandom


@pytest.fixture
def default_level_config():
    """The shipped 5x5 cross configuration."""
    from switchgrid.core import LevelConfig
    return LevelConfig(size=5, pattern="cross", scramble_moves=12)


@pytest.fixture
def small_level_config():
    """A 3x3 cross board with a short scramble."""
    from switchgrid.core import LevelConfig
    return LevelConfig(size=3, pattern="cross", scramble_moves=2)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
