import dataclasses

import pytest

from flappy_ufo.data_models import GameConfig, GameState, Player
from flappy_ufo.simulation import SimulationLoop


def test_default_gap_range(config):
    assert config.min_gap_y == 20
    assert config.max_gap_y == config.height - config.gap_height - 20


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -5},
    {"tree_speed": 0},
    {"spawn_interval": 0},
    {"star_every": 0},
    {"height": 300},      # a 300 gap plus margins cannot fit
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_config_is_frozen(config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.gravity = 1.0


@pytest.mark.parametrize("velocity, tilt", [
    (0.0, 0.0),
    (6.0, 0.5),
    (30.0, 0.5),
    (-30.0, -0.5),
    (-3.0, -0.25),
])
def test_player_tilt_is_clamped(velocity, tilt):
    assert Player(y=0.0, velocity=velocity).tilt == pytest.approx(tilt)


def test_snapshot_reflects_state(playing_loop, config):
    playing_loop.update(0.05)
    snap = playing_loop.snapshot()
    assert snap.state is GameState.PLAYING
    assert snap.player_x == config.ufo_x
    assert snap.player_y == playing_loop.player.y
    assert snap.player_velocity == playing_loop.player.velocity
    assert snap.player_tilt == playing_loop.player.tilt
    assert snap.width == config.width
    assert snap.height == config.height
    assert len(snap.obstacles) == len(playing_loop.obstacles)


def test_snapshot_is_detached_from_live_state(loop):
    loop.handle_activate()
    snap = loop.snapshot()
    loop.update(0.05)
    assert snap.player_y != loop.player.y
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 3


def test_loop_defaults_to_canonical_config():
    assert SimulationLoop().config == GameConfig()
