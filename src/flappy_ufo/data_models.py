"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, UFO_X, UFO_RADIUS,
    UFO_HITBOX_RADIUS_X, UFO_HITBOX_RADIUS_Y, GRAVITY, FLAP_IMPULSE,
    TREE_WIDTH, GAP_HEIGHT, GAP_MARGIN, TREE_SPEED, SPAWN_INTERVAL,
    MAX_FRAME_TIME, SPEEDUP_SCORE_STEP, SPEEDUP_FACTOR,
    STAR_EVERY, STAR_RADIUS, STAR_VELOCITY_Y,
)


class GameState(enum.Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameConfig:
    """Field size and tuning for one simulation. Defaults come from constants.py."""
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    ufo_x: float = UFO_X
    ufo_radius: float = UFO_RADIUS
    hitbox_x: float = UFO_HITBOX_RADIUS_X
    hitbox_y: float = UFO_HITBOX_RADIUS_Y
    gravity: float = GRAVITY
    flap_impulse: float = FLAP_IMPULSE
    tree_width: float = TREE_WIDTH
    gap_height: float = GAP_HEIGHT
    gap_margin: int = GAP_MARGIN
    tree_speed: float = TREE_SPEED
    spawn_interval: float = SPAWN_INTERVAL
    max_frame_time: float = MAX_FRAME_TIME
    speedup_score_step: int = SPEEDUP_SCORE_STEP
    speedup_factor: float = SPEEDUP_FACTOR
    star_every: int = STAR_EVERY
    star_radius: float = STAR_RADIUS
    star_velocity_y: float = STAR_VELOCITY_Y

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field size must be positive, got {self.width}x{self.height}")
        if self.tree_speed <= 0:
            raise ValueError(f"Tree speed must be positive, got {self.tree_speed}")
        if self.spawn_interval <= 0:
            raise ValueError(f"Spawn interval must be positive, got {self.spawn_interval}")
        if self.star_every <= 0:
            raise ValueError(f"Star period must be positive, got {self.star_every}")
        if self.min_gap_y > self.max_gap_y:
            raise ValueError(
                f"Gap of {self.gap_height} with margin {self.gap_margin} "
                f"does not fit a field of height {self.height}")

    @property
    def min_gap_y(self) -> int:
        return int(self.gap_margin)

    @property
    def max_gap_y(self) -> int:
        return int(self.height - self.gap_height - self.gap_margin)


@dataclass
class Player:
    """The UFO. Its X position is fixed by the config."""
    y: float
    velocity: float = 0.0

    @property
    def tilt(self) -> float:
        """Rotation angle in radians for drawing, clamped to +/- 0.5."""
        return max(min(self.velocity / 12, 0.5), -0.5)


@dataclass
class Obstacle:
    """A tree pair: x is the left edge, gap_y the top of the gap."""
    x: float
    gap_y: float
    passed: bool = False


@dataclass
class BonusItem:
    """A fireball star launched from a tree gap."""
    x: float
    y: float
    vx: float
    vy: float
    radius: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_y: float


@dataclass(frozen=True)
class BonusView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs to draw one frame."""
    state: GameState
    score: int
    player_x: float
    player_y: float
    player_velocity: float
    player_tilt: float
    player_radius: float
    width: int
    height: int
    tree_width: float
    gap_height: float
    obstacles: Tuple[ObstacleView, ...] = field(default_factory=tuple)
    bonus_items: Tuple[BonusView, ...] = field(default_factory=tuple)
