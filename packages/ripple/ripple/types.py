"""Shared types, protocols and errors for the ripple engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Protocol

Color = Any
Point = tuple[float, float]


@dataclass(slots=True)
class Wave:
    """A growing ring. Only the wave system mutates ``radius``."""

    origin_x: float
    origin_y: float
    radius: float = 0.0


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    now: float
    dt: float
    elapsed: float
    baseline: bool
    request_stop: Callable[[], None]


class Canvas(Protocol):
    """Minimal 2D raster target the paint system draws on."""

    def fill(self, color: Color) -> None: ...

    def circle(self, color: Color, center: Point, radius: float, width: int) -> None: ...


class RippleError(Exception):
    """Base class for ripple engine errors."""


class InvalidParameterError(RippleError, ValueError):
    """Raised when a render parameter is rejected before reaching the core."""

    def __init__(self, name: str, value: Any, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(message)


if TYPE_CHECKING:
    from ripple.field import WaveField

System = Callable[["WaveField", FrameContext], None]
