"""
simulation.py: The single-player simulation loop.
Owns every piece of game state; the host drives it with update(dt) and handle_activate().
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .data_models import (
    GameConfig, GameState, Player, Obstacle, BonusItem,
    FrameSnapshot, ObstacleView, BonusView,
)
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Mutable state of one game session. Rebuilt from scratch on reset."""
    player: Player
    spawn_interval: float
    state: GameState = GameState.WAITING
    score: int = 0
    trees: List[Obstacle] = field(default_factory=list)
    stars: List[BonusItem] = field(default_factory=list)
    pipes_passed: int = 0
    next_star_pipe_index: int = 0
    spawn_timer: float = 0.0
    last_score_for_speedup: int = 0
    trees_evicted: int = 0

    @classmethod
    def fresh(cls, config: GameConfig) -> "SimulationState":
        return cls(
            player=Player(y=config.height / 2),
            spawn_interval=config.spawn_interval,
            next_star_pipe_index=config.star_every - 1,
        )


class SimulationLoop:
    """
    Frame-driven game core: physics, tree spawning/recycling, scoring,
    bonus stars, difficulty and the WAITING/PLAYING/GAME_OVER state machine.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng=None):
        self.config = config or GameConfig()
        # Any object with randint(a, b); the process-wide generator by default
        self.rng = rng if rng is not None else random
        self.physics = PhysicsCore(self.config)
        self.sim = SimulationState.fresh(self.config)

    # ---------- Queries ----------

    @property
    def state(self) -> GameState:
        return self.sim.state

    @property
    def score(self) -> int:
        return self.sim.score

    @property
    def player(self) -> Player:
        return self.sim.player

    @property
    def obstacles(self) -> List[Obstacle]:
        return self.sim.trees

    @property
    def bonus_items(self) -> List[BonusItem]:
        return self.sim.stars

    @property
    def spawn_interval(self) -> float:
        return self.sim.spawn_interval

    @property
    def pipes_passed(self) -> int:
        return self.sim.pipes_passed

    @property
    def trees_evicted(self) -> int:
        return self.sim.trees_evicted

    def snapshot(self) -> FrameSnapshot:
        """Immutable drawable view of the current frame."""
        cfg = self.config
        sim = self.sim
        return FrameSnapshot(
            state=sim.state,
            score=sim.score,
            player_x=cfg.ufo_x,
            player_y=sim.player.y,
            player_velocity=sim.player.velocity,
            player_tilt=sim.player.tilt,
            player_radius=cfg.ufo_radius,
            width=cfg.width,
            height=cfg.height,
            tree_width=cfg.tree_width,
            gap_height=cfg.gap_height,
            obstacles=tuple(ObstacleView(t.x, t.gap_y) for t in sim.trees),
            bonus_items=tuple(BonusView(s.x, s.y, s.radius) for s in sim.stars),
        )

    # ---------- Input & state machine ----------

    def reset(self):
        """Discards the session and starts over in WAITING."""
        self.sim = SimulationState.fresh(self.config)
        logger.info("Game reset, waiting for first flap.")

    def handle_activate(self) -> GameState:
        """Space / click / tap. Starts, flaps or restarts depending on state."""
        sim = self.sim
        if sim.state is GameState.WAITING:
            sim.state = GameState.PLAYING
            sim.player.velocity = self.physics.flap()
            logger.info("Game started.")
        elif sim.state is GameState.GAME_OVER:
            self.reset()
        else:
            sim.player.velocity = self.physics.flap()
        return self.sim.state

    def _game_over(self, reason: str):
        self.sim.state = GameState.GAME_OVER
        logger.info("Game over (%s). Final score: %d", reason, self.sim.score)

    # ---------- Frame update ----------

    def update(self, dt: float):
        """Advances the simulation by dt seconds (clamped). No-op unless PLAYING, or when dt is not positive (NaN included)."""
        sim = self.sim
        if sim.state is not GameState.PLAYING or not dt > 0:
            return
        dt = min(dt, self.config.max_frame_time)

        # 1. UFO physics
        self.physics.apply_gravity_and_movement(sim.player, dt)

        # 2. Difficulty
        self._maybe_speed_up()

        # 3. Spawn and move trees
        sim.spawn_timer += dt
        if sim.spawn_timer >= sim.spawn_interval:
            sim.spawn_timer = 0.0
            self._spawn_tree()
        self._move_trees(dt)

        # 4. Scoring
        self._score_passed_trees()

        # 5. Tree collisions
        if self.physics.hits_any_tree(sim.player.y, sim.trees):
            self._game_over("tree")
            return

        # 6. Stars
        if self._update_stars():
            self._game_over("star")
            return

        # 7. Floor / ceiling
        if self.physics.out_of_bounds(sim.player.y):
            self._game_over("out of bounds")

    def _maybe_speed_up(self):
        sim = self.sim
        cfg = self.config
        if sim.score - sim.last_score_for_speedup >= cfg.speedup_score_step:
            sim.spawn_interval *= cfg.speedup_factor
            sim.last_score_for_speedup = sim.score
            logger.info("Speedup at score %d: spawn interval now %.3fs",
                        sim.score, sim.spawn_interval)

    def _spawn_tree(self):
        cfg = self.config
        gap_y = self.rng.randint(cfg.min_gap_y, cfg.max_gap_y)
        self.sim.trees.append(Obstacle(x=float(cfg.width), gap_y=float(gap_y)))
        logger.debug("Spawned tree with gap at %d", gap_y)

    def _move_trees(self, dt: float):
        sim = self.sim
        offset = self.physics.tree_offset(dt)
        for tree in sim.trees:
            tree.x -= offset
        # Trees never reorder, so only the oldest can be fully off-screen
        if sim.trees and sim.trees[0].x + self.config.tree_width < 0:
            sim.trees.pop(0)
            sim.trees_evicted += 1
            logger.debug("Evicted tree #%d", sim.trees_evicted)

    def _score_passed_trees(self):
        sim = self.sim
        cfg = self.config
        for tree in sim.trees:
            if tree.passed or tree.x + cfg.tree_width >= cfg.ufo_x:
                continue
            tree.passed = True
            sim.score += 1
            sim.pipes_passed += 1
            if sim.pipes_passed - 1 == sim.next_star_pipe_index:
                self._launch_star()
                sim.next_star_pipe_index += cfg.star_every

    def _launch_star(self):
        """Shoots a star up from the gap of the next tree still ahead of the UFO."""
        cfg = self.config
        next_tree = next((t for t in self.sim.trees if not t.passed), None)
        if next_tree is None:
            logger.debug("No tree ahead for star after %d passes", self.sim.pipes_passed)
            return
        self.sim.stars.append(BonusItem(
            x=next_tree.x + cfg.tree_width / 2,
            y=next_tree.gap_y + cfg.gap_height,
            vx=0.0,
            vy=cfg.star_velocity_y,
            radius=cfg.star_radius,
        ))
        logger.info("Star launched after %d trees passed", self.sim.pipes_passed)

    def _update_stars(self) -> bool:
        """Moves stars, drops the ones above the field, returns True on a hit."""
        sim = self.sim
        for star in sim.stars:
            star.x += star.vx
            star.y += star.vy
        sim.stars = [s for s in sim.stars if s.y + s.radius > 0]
        return any(self.physics.hits_star(sim.player.y, s) for s in sim.stars)
