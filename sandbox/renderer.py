import numpy as np
from typing import Tuple, Optional
from dataclasses import dataclass
import os

import sandbox as S
from sandbox.config import Configuration

os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame


@dataclass
class AppearanceConfig:
    """Display-only settings. Never read by the physics."""
    width: int = S.WINDOW_WIDTH
    height: int = S.WINDOW_HEIGHT
    bg_color: Tuple[int, int, int] = S.BG_COLOR
    particle_color: Tuple[int, int, int] = S.PARTICLE_COLOR
    wall_color: Tuple[int, int, int] = S.WALL_COLOR


class Renderer:
    """Maps simulation state → pixels. World origin at the window center, y up."""

    def __init__(self, config: Optional[AppearanceConfig] = None):
        self.config = config or AppearanceConfig()

    def world_to_pixel(self, wx: float, wy: float) -> Tuple[int, int]:
        px = int(round(self.config.width / 2 + wx))
        py = int(round(self.config.height / 2 - wy))
        return px, py

    def wall_rect(self, position: np.ndarray, size: np.ndarray) -> pygame.Rect:
        left, top = self.world_to_pixel(position[0] - size[0] / 2,
                                        position[1] + size[1] / 2)
        return pygame.Rect(left, top, max(1, int(size[0])), max(1, int(size[1])))

    def draw(self, surface: pygame.Surface, sim, config: Configuration):
        surface.fill(self.config.bg_color)
        for position, size in sim.wall_geometry().values():
            pygame.draw.rect(surface, self.config.wall_color,
                             self.wall_rect(position, size))
        radius = max(1, int(config.particle_radius))
        for pos in sim.particle_positions():
            pygame.draw.circle(surface, self.config.particle_color,
                               self.world_to_pixel(pos[0], pos[1]), radius)

    def render(self, sim, config: Configuration) -> np.ndarray:
        """Render single frame → (height, width, 3) uint8."""
        surface = pygame.Surface((self.config.width, self.config.height))
        self.draw(surface, sim, config)
        return pygame.surfarray.array3d(surface).transpose(1, 0, 2)

