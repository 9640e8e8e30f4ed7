import os
import random

# Headless pygame for renderer and client tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_ufo.data_models import GameConfig, GameState
from flappy_ufo.simulation import SimulationLoop


class FixedRandom:
    """randint stub that always returns the same gap offset."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def loop(config, rng):
    return SimulationLoop(config, rng=rng)


@pytest.fixture
def playing_loop(config):
    """A loop already in PLAYING with a centred gap and the UFO at rest in it."""
    gap = (config.height - config.gap_height) // 2
    lp = SimulationLoop(config, rng=FixedRandom(gap))
    lp.handle_activate()
    assert lp.state is GameState.PLAYING
    return lp


@pytest.fixture
def pygame_headless():
    import pygame
    pygame.init()
    yield pygame
    pygame.quit()


@pytest.fixture
def fixed_rng():
    return FixedRandom
