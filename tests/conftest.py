import random
from dataclasses import replace

import pytest

from game.frogblast.config import GameConfig
from game.frogblast.world import new_world


class ScriptedRandom(random.Random):
    """``random()`` returns the queued values in order, then falls back to a seeded stream."""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self._values = list(values)

    def random(self):
        if self._values:
            return self._values.pop(0)
        return super().random()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def quiet_config():
    """No timed spawns, so frames only touch what the test places."""
    return replace(
        GameConfig(),
        enemy_interval_ms=1e12,
        power_up_interval_ms=1e12,
        obstacle_interval_ms=1e12,
    )


@pytest.fixture
def world(config):
    return new_world(config, random.Random(0))


@pytest.fixture
def quiet_world(quiet_config):
    return new_world(quiet_config, random.Random(0))


@pytest.fixture
def scripted():
    return ScriptedRandom
