"""Controls panel along the bottom edge."""
from __future__ import annotations

import pygame

from ripple import RenderParams
from ui.constants import (
    ERROR_COLOR,
    PANEL_BG,
    PANEL_BORDER,
    PANEL_H,
    PANEL_PAD,
    TEXT_COLOR,
    TEXT_DIM,
)

HINT = "Up/Down speed  Left/Right frequency  C wave color  B background  H hide  Esc quit"


def panel_rect(surface: pygame.Surface) -> pygame.Rect:
    w, h = surface.get_size()
    return pygame.Rect(0, h - PANEL_H, w, PANEL_H)


def draw_panel(
    surface: pygame.Surface,
    font: pygame.font.Font,
    params: RenderParams,
    wave_count: int,
    error: str | None = None,
) -> None:
    rect = panel_rect(surface)
    pygame.draw.rect(surface, PANEL_BG, rect)
    pygame.draw.line(surface, PANEL_BORDER, rect.topleft, rect.topright, 1)

    x = rect.x + PANEL_PAD
    y = rect.y + PANEL_PAD
    fields = [
        f"Speed {params.wave_speed:g} px/s",
        f"Frequency {params.wave_frequency:g} Hz",
        "Wave",
        "Background",
        f"Waves {wave_count}",
    ]
    swatches = {"Wave": params.wave_color, "Background": params.background_color}

    for text in fields:
        label = font.render(text, True, TEXT_COLOR)
        surface.blit(label, (x, y))
        x += label.get_width() + 6
        if text in swatches:
            swatch = pygame.Rect(x, y + 2, 14, label.get_height() - 4)
            pygame.draw.rect(surface, pygame.Color(swatches[text]), swatch)
            pygame.draw.rect(surface, PANEL_BORDER, swatch, 1)
            x += swatch.width
        x += 18

    line2 = error if error else HINT
    color = ERROR_COLOR if error else TEXT_DIM
    surface.blit(font.render(line2, True, color), (rect.x + PANEL_PAD, y + 20))


def draw_toggle_hint(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Small reminder shown while the panel is hidden."""
    w, h = surface.get_size()
    label = font.render("H: show controls", True, TEXT_DIM)
    surface.blit(label, (w - label.get_width() - PANEL_PAD, h - label.get_height() - PANEL_PAD))
