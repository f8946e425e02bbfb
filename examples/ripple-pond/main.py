"""Ripple Pond - hold the mouse down to send waves across the window.

Exercises ripple, ripple-schedule and ripple-signal.

Controls:
  Left mouse  Hold to emit waves, drag to move the source
  Up/Down     Wave speed +/-
  Left/Right  Wave frequency +/-
  C           Cycle wave color
  B           Cycle background color
  H           Show / hide the controls panel
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from ripple import InvalidParameterError, RenderParams, RippleConfig
from ripple_signal import POINTER_DOWN, POINTER_MOVE, POINTER_UP, RESIZE

from game.setup import AppState, build_app
from ui.canvas import current_canvas
from ui.constants import (
    BACKGROUND_COLORS,
    FPS,
    FREQUENCY_STEP,
    MIN_H,
    MIN_W,
    SCREEN_H,
    SCREEN_W,
    SPEED_STEP,
    WAVE_COLORS,
)
from ui.panel import draw_panel, draw_toggle_hint, panel_rect

logger = logging.getLogger("ripple_pond")

TITLE = "Ripple Pond"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Ripple Pond - ripple engine visual demo")
    p.add_argument("--speed", type=float, default=10.0, help="Wave speed in px/s (default: 10)")
    p.add_argument("--frequency", type=float, default=2.0, help="Waves per second (default: 2)")
    p.add_argument("--wave-color", default=WAVE_COLORS[0], help="Ring color (default: %(default)s)")
    p.add_argument("--background", default=BACKGROUND_COLORS[0],
                   help="Background color (default: %(default)s)")
    p.add_argument("--size", type=int, nargs=2, default=[SCREEN_W, SCREEN_H],
                   metavar=("W", "H"), help=f"Window size (default: {SCREEN_W} {SCREEN_H})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def build_config(args: argparse.Namespace) -> RippleConfig:
    params = RenderParams(
        wave_speed=args.speed,
        wave_frequency=args.frequency,
        wave_color=args.wave_color,
        background_color=args.background,
    )
    width = max(MIN_W, args.size[0])
    height = max(MIN_H, args.size[1])
    return RippleConfig(width=width, height=height, fps=args.fps, params=params)


def _cycle(options: list[str], current: str) -> str:
    try:
        i = options.index(current)
    except ValueError:
        return options[0]
    return options[(i + 1) % len(options)]


def handle_key(state: AppState, key: int) -> bool:
    """Apply a key press. Returns False when the app should quit."""
    params = state.controls.params
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_UP:
        state.adjust(wave_speed=params.wave_speed + SPEED_STEP)
    elif key == pygame.K_DOWN:
        state.adjust(wave_speed=params.wave_speed - SPEED_STEP)
    elif key == pygame.K_RIGHT:
        state.adjust(wave_frequency=params.wave_frequency + FREQUENCY_STEP)
    elif key == pygame.K_LEFT:
        state.adjust(wave_frequency=params.wave_frequency - FREQUENCY_STEP)
    elif key == pygame.K_c:
        state.adjust(wave_color=_cycle(WAVE_COLORS, params.wave_color))
    elif key == pygame.K_b:
        state.adjust(background_color=_cycle(BACKGROUND_COLORS, params.background_color))
    elif key == pygame.K_h:
        state.panel_visible = not state.panel_visible
    return True


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    try:
        config = build_config(args)
    except InvalidParameterError as exc:
        sys.exit(f"{TITLE}: {exc}")

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = build_app(config, current_canvas)
    bus = state.bus
    pressed = False
    running = True

    while running:
        clock.tick(config.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                running = handle_key(state, event.key)

            elif event.type == pygame.VIDEORESIZE:
                w, h = max(MIN_W, event.w), max(MIN_H, event.h)
                screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                bus.publish(RESIZE, width=w, height=h)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                # Presses on the controls panel are not meant for the pond.
                if state.panel_visible and panel_rect(screen).collidepoint(event.pos):
                    continue
                pressed = True
                bus.publish(POINTER_DOWN, x=event.pos[0], y=event.pos[1])

            elif event.type == pygame.MOUSEMOTION and pressed:
                bus.publish(POINTER_MOVE, x=event.pos[0], y=event.pos[1])

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if pressed:
                    pressed = False
                    bus.publish(POINTER_UP)

        if not running:
            break

        # --- Frame: grow, input, emit, paint ---
        state.engine.step()

        # --- Overlay ---
        if state.panel_visible:
            draw_panel(
                screen,
                font,
                state.controls.params,
                len(state.engine.field),
                state.current_error(time.monotonic()),
            )
        else:
            draw_toggle_hint(screen, font)

        pygame.display.flip()

    state.scheduler.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
