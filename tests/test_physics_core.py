import pytest

from flappy_ufo.data_models import GameConfig, Player, Obstacle, BonusItem
from flappy_ufo.physics_core import PhysicsCore


@pytest.fixture
def core(config):
    return PhysicsCore(config)


def test_gravity_then_movement(core, config):
    player = Player(y=100.0, velocity=-3.5)
    core.apply_gravity_and_movement(player, 0.05)
    v = -3.5 + config.gravity * 0.05 * 60
    assert player.velocity == pytest.approx(v)
    assert player.y == pytest.approx(100.0 + v * 0.05 * 60)


def test_flap_is_fixed_impulse(core, config):
    assert core.flap() == config.flap_impulse


def test_tree_offset_scales_with_dt(core, config):
    assert core.tree_offset(1 / 60) == pytest.approx(config.tree_speed)
    assert core.tree_offset(0.05) == pytest.approx(config.tree_speed * 3)


@pytest.mark.parametrize("y, hit", [
    (400.0, False),
    (262.0, False),   # hitbox top just below the gap top
    (258.0, True),    # hitbox top above the gap top
    (538.0, False),
    (542.0, True),    # hitbox bottom below the gap bottom
])
def test_hitbox_against_gap(core, config, y, hit):
    tree = Obstacle(x=config.ufo_x - 30, gap_y=250.0)
    assert core.check_collision(y, tree) is hit


def test_no_hit_without_horizontal_overlap(core, config):
    ahead = Obstacle(x=config.ufo_x + config.hitbox_x + 1, gap_y=600.0)
    behind = Obstacle(x=config.ufo_x - config.hitbox_x - config.tree_width - 1, gap_y=600.0)
    assert not core.check_collision(100.0, ahead)
    assert not core.check_collision(100.0, behind)
    assert not core.hits_any_tree(100.0, [ahead, behind])


def test_hitbox_is_smaller_than_visual_radius(core, config):
    # The wing tip overlaps the tree but the hitbox does not
    tree = Obstacle(x=config.ufo_x + config.ufo_radius - 2, gap_y=600.0)
    assert not core.check_collision(100.0, tree)


def test_star_hit_uses_hitbox_half_width(core, config):
    reach = 14 + config.hitbox_x
    near = BonusItem(x=config.ufo_x + reach - 0.5, y=300.0, vx=0.0, vy=0.0, radius=14)
    far = BonusItem(x=config.ufo_x + reach + 0.5, y=300.0, vx=0.0, vy=0.0, radius=14)
    assert core.hits_star(300.0, near)
    assert not core.hits_star(300.0, far)


def test_bounds_use_full_radius(core, config):
    r = config.ufo_radius
    assert not core.out_of_bounds(r)
    assert core.out_of_bounds(r - 0.1)
    assert not core.out_of_bounds(config.height - r)
    assert core.out_of_bounds(config.height - r + 0.1)


def test_small_field_config():
    cfg = GameConfig(width=200, height=400, gap_height=200)
    core = PhysicsCore(cfg)
    assert core.out_of_bounds(390.0)
    assert cfg.max_gap_y == 180
