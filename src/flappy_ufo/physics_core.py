"""
physics_core.py: Deterministic kinematics and collision checks for the UFO.
"""

import math
from typing import Iterable

from .data_models import GameConfig, Player, Obstacle, BonusItem
from .constants import FRAME_NORMALIZER


class PhysicsCore:
    """
    Stateless physics helpers bound to one GameConfig.
    All step sizes scale with dt * 60 so the per-frame tuning holds at any frame rate.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def frame_scale(self, dt: float) -> float:
        return dt * FRAME_NORMALIZER

    def apply_gravity_and_movement(self, player: Player, dt: float):
        """Integrates velocity then position for one tick. Mutates the player."""
        scale = self.frame_scale(dt)
        player.velocity += self.config.gravity * scale
        player.y += player.velocity * scale

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.flap_impulse

    def tree_offset(self, dt: float) -> float:
        return self.config.tree_speed * self.frame_scale(dt)

    def check_collision(self, y: float, tree: Obstacle) -> bool:
        """Hitbox vs. the top or bottom part of a tree pair."""
        cfg = self.config
        x = cfg.ufo_x
        overlaps_x = (x + cfg.hitbox_x > tree.x and
                      x - cfg.hitbox_x < tree.x + cfg.tree_width)
        if not overlaps_x:
            return False
        if y - cfg.hitbox_y < tree.gap_y:
            return True
        if y + cfg.hitbox_y > tree.gap_y + cfg.gap_height:
            return True
        return False

    def hits_any_tree(self, y: float, trees: Iterable[Obstacle]) -> bool:
        return any(self.check_collision(y, tree) for tree in trees)

    def hits_star(self, y: float, star: BonusItem) -> bool:
        dx = self.config.ufo_x - star.x
        dy = y - star.y
        return math.hypot(dx, dy) < star.radius + self.config.hitbox_x

    def out_of_bounds(self, y: float) -> bool:
        """Floor/ceiling check using the full visual radius."""
        r = self.config.ufo_radius
        return y + r > self.config.height or y - r < 0
