#!/usr/bin/env python3
"""
flappy_client.py

Host for the simulation: pygame window, input events and an explicit frame loop.
Each frame: dispatch input, update(dt), draw, flip.
"""

import logging
from typing import Iterable, Optional

import pygame

from .constants import RENDER_FPS
from .data_models import GameConfig
from .renderer import PygameRenderer
from .simulation import SimulationLoop

logger = logging.getLogger(__name__)


def is_activate_event(event) -> bool:
    """Space, mouse press or touch start."""
    if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
        return True
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL mirrors each tap as a mouse press; the FINGERDOWN already counts
        return not getattr(event, "touch", False)
    return event.type == pygame.FINGERDOWN


def is_quit_event(event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, rng=None, fps: int = RENDER_FPS):
        pygame.init()
        self.config = config or GameConfig()
        self.fps = fps
        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption("Flappy UFO")

        self.loop = SimulationLoop(self.config, rng=rng)
        self.renderer = PygameRenderer()
        self.clock = pygame.time.Clock()
        self.running = False

    def step_frame(self, dt: float, events: Iterable) -> bool:
        """
        Runs one host frame. Returns False once a quit event was seen.
        """
        for event in events:
            if is_quit_event(event):
                self.running = False
                return False
            if is_activate_event(event):
                state = self.loop.handle_activate()
                logger.debug("Activate -> %s", state.value)

        self.loop.update(dt)
        self.renderer.draw(self.screen, self.loop.snapshot())
        pygame.display.flip()
        return True

    def run(self):
        """The main client execution loop."""
        logger.info("Starting at %d fps on a %dx%d field",
                    self.fps, self.config.width, self.config.height)
        self.running = True
        try:
            while self.running:
                # dt comes from wall-clock time; update() clamps slow frames
                dt = self.clock.tick(self.fps) / 1000.0
                if not self.step_frame(dt, pygame.event.get()):
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted.")
        finally:
            self.running = False
            pygame.quit()
        logger.info("Stopped with score %d", self.loop.score)
