from __future__ import annotations

import numpy as np
import pygame

from .palette import PLAYER_COLOR, color_for_state


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def _grid_surface(self, state: np.ndarray, player: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((20, 20, 26))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_state(int(state[y, x])), rect)
                if player[y, x]:
                    pygame.draw.circle(surf, PLAYER_COLOR, rect.center, self.cell_size // 3)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, player: np.ndarray) -> None:
        grid_surf = self._grid_surface(state, player)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
