"""ripple - A small real-time ripple-wave engine in Python."""

from ripple.clock import FrameClock
from ripple.config import Controls, RenderParams, RippleConfig
from ripple.engine import Engine
from ripple.field import WaveField
from ripple.render import make_paint_system, make_wave_system, paint
from ripple.types import (
    Canvas,
    FrameContext,
    InvalidParameterError,
    RippleError,
    Wave,
)

__all__ = [
    "Engine",
    "WaveField",
    "FrameClock",
    "FrameContext",
    "Wave",
    "Canvas",
    "Controls",
    "RenderParams",
    "RippleConfig",
    "paint",
    "make_wave_system",
    "make_paint_system",
    "RippleError",
    "InvalidParameterError",
]
