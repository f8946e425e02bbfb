"""Wave integration and paint systems."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from ripple.config import Controls, RenderParams
from ripple.types import Canvas

if TYPE_CHECKING:
    from ripple.field import WaveField
    from ripple.types import FrameContext

logger = logging.getLogger(__name__)

LINE_WIDTH = 2


def paint(
    canvas: Canvas,
    field: WaveField,
    params: RenderParams,
    line_width: int = LINE_WIDTH,
) -> None:
    """Clear to the background color, then stroke every live wave."""
    canvas.fill(params.background_color)
    for wave in field:
        canvas.circle(
            params.wave_color,
            (wave.origin_x, wave.origin_y),
            wave.radius,
            line_width,
        )


def make_wave_system(
    controls: Controls,
    on_cull: Callable[[WaveField, FrameContext, list], None] | None = None,
) -> Callable[[WaveField, FrameContext], None]:
    """Return a system that grows waves by elapsed time and culls them."""

    def wave_system(field: WaveField, ctx: FrameContext) -> None:
        if ctx.baseline:
            return
        culled = field.advance(ctx.dt, controls.params.wave_speed)
        if culled and on_cull is not None:
            on_cull(field, ctx, culled)

    return wave_system


def make_paint_system(
    controls: Controls,
    canvas_provider: Callable[[], Canvas | None],
    line_width: int = LINE_WIDTH,
) -> Callable[[WaveField, FrameContext], None]:
    """Return a system that repaints the canvas every frame.

    A provider returning ``None`` means the surface is gone; the frame is
    skipped.
    """

    def paint_system(field: WaveField, ctx: FrameContext) -> None:
        canvas = canvas_provider()
        if canvas is None:
            logger.debug("no surface for frame %d, skipping paint", ctx.frame_number)
            return
        paint(canvas, field, controls.params, line_width)

    return paint_system
