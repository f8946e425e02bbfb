"""pygame surface adapter for the ripple paint system."""
from __future__ import annotations

import pygame


class PygameCanvas:
    """Draws onto a pygame surface. Color tokens go through pygame.Color."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def fill(self, color) -> None:
        self.surface.fill(pygame.Color(color))

    def circle(self, color, center, radius, width) -> None:
        r = int(radius)
        if r < 1:
            return
        # pygame fills the disc once width reaches the radius; keep a hole.
        width = max(1, min(width, r - 1))
        cx, cy = center
        pygame.draw.circle(self.surface, pygame.Color(color), (int(cx), int(cy)), r, width)


def current_canvas() -> PygameCanvas | None:
    """Canvas for the live display surface, or None once it is gone."""
    if not pygame.display.get_init():
        return None
    surface = pygame.display.get_surface()
    if surface is None:
        return None
    return PygameCanvas(surface)
