"""
renderer.py: Draws a FrameSnapshot with pygame. Holds no game state of its own.
"""

import math
from typing import Dict, Tuple

import pygame

from .data_models import FrameSnapshot, GameState

WHITE = (255, 255, 255)
TREE_COLOR = (34, 139, 34)
TREE_LIP_COLOR = (26, 94, 26)
UFO_BODY_COLOR = (179, 240, 255)
UFO_LIGHT_COLOR = (255, 235, 59)
LIP_HEIGHT = 16
LIP_OVERHANG = 4


def background_hue(score: int) -> int:
    """Hue steps every 20 points: blue, purple, greenish, repeat."""
    return 200 + ((score // 20) * 30) % 120


def hsl(hue: float, saturation: float, lightness: float) -> pygame.Color:
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360, saturation, lightness, 100)
    return color


class PygameRenderer:
    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.score_font = pygame.font.Font(None, 44)
        self.title_font = pygame.font.Font(None, 52)
        self.font = pygame.font.Font(None, 30)
        self._backgrounds: Dict[Tuple[int, int, int], pygame.Surface] = {}

    def draw(self, surface: pygame.Surface, snap: FrameSnapshot):
        """Renders one frame onto surface. Does not flip the display."""
        surface.blit(self._background(snap.width, snap.height, background_hue(snap.score)), (0, 0))

        for tree in snap.obstacles:
            self._draw_tree(surface, snap, tree.x, tree.gap_y)

        self._draw_ufo(surface, snap)

        score_text = self.score_font.render(str(snap.score), True, WHITE)
        surface.blit(score_text, (snap.width // 2 - score_text.get_width() // 2, 40))

        if snap.state is GameState.WAITING:
            self._draw_overlay(surface, snap, 80, [
                (self.title_font, "Flappy UFO", -30),
                (self.font, "Press Space, Click, or Tap to Start", 20),
            ])
        elif snap.state is GameState.GAME_OVER:
            self._draw_overlay(surface, snap, 150, [
                (self.title_font, "Game Over", -20),
                (self.font, f"Score: {snap.score}", 20),
                (self.font, "Press Space, Click, or Tap to Restart", 60),
            ])

        for star in snap.bonus_items:
            self._draw_fireball(surface, star.x, star.y, star.radius)

    def _background(self, width: int, height: int, hue: int) -> pygame.Surface:
        key = (width, height, hue)
        cached = self._backgrounds.get(key)
        if cached is not None:
            return cached
        bg = pygame.Surface((width, height))
        for row in range(height):
            # Lighter at the top, darker at the bottom
            lightness = 85 - 30 * row / max(height - 1, 1)
            pygame.draw.line(bg, hsl(hue, 60, lightness), (0, row), (width, row))
        self._backgrounds[key] = bg
        return bg

    def _draw_tree(self, surface, snap: FrameSnapshot, x: float, gap_y: float):
        w = snap.tree_width
        bottom_y = gap_y + snap.gap_height
        pygame.draw.rect(surface, TREE_COLOR, (x, 0, w, gap_y))
        pygame.draw.rect(surface, TREE_LIP_COLOR,
                         (x - LIP_OVERHANG, gap_y - LIP_HEIGHT, w + 2 * LIP_OVERHANG, LIP_HEIGHT))
        pygame.draw.rect(surface, TREE_COLOR, (x, bottom_y, w, snap.height - bottom_y))
        pygame.draw.rect(surface, TREE_LIP_COLOR,
                         (x - LIP_OVERHANG, bottom_y, w + 2 * LIP_OVERHANG, LIP_HEIGHT))

    def _draw_ufo(self, surface, snap: FrameSnapshot):
        r = snap.player_radius
        size = int(r * 2 + 8)
        ufo = pygame.Surface((size, size), pygame.SRCALPHA)
        cx = cy = size // 2

        body = pygame.Rect(0, 0, int(r * 2), int(r * 1.2))
        body.center = (cx, cy)
        pygame.draw.ellipse(ufo, UFO_BODY_COLOR, body)

        dome = pygame.Rect(0, 0, int(r * 1.2), int(r * 0.8))
        dome.center = (cx, cy - 7)
        pygame.draw.ellipse(ufo, (255, 255, 255, 178), dome)

        for i in (-1, 0, 1):
            pygame.draw.circle(ufo, UFO_LIGHT_COLOR, (cx + i * 10, cy + 10), 3)

        # pygame rotates counter-clockwise, screen y points down
        rotated = pygame.transform.rotate(ufo, -math.degrees(snap.player_tilt))
        surface.blit(rotated, rotated.get_rect(center=(snap.player_x, snap.player_y)))

    def _draw_overlay(self, surface, snap: FrameSnapshot, alpha: int, lines):
        shade = pygame.Surface((snap.width, snap.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        surface.blit(shade, (0, 0))
        for font, text, dy in lines:
            rendered = font.render(text, True, WHITE)
            surface.blit(rendered, rendered.get_rect(center=(snap.width // 2, snap.height // 2 + dy)))

    def _draw_fireball(self, surface, x: float, y: float, r: float):
        # Concentric rings stand in for a radial gradient
        for radius, color in ((r, (255, 69, 0)), (r * 0.75, (255, 179, 71)), (r * 0.5, (255, 251, 231))):
            pygame.draw.circle(surface, color, (int(x), int(y)), max(int(radius), 1))
