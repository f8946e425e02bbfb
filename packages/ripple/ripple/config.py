"""Render parameters, the hot-swappable controls holder and demo configuration."""
from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable

from ripple.types import Color, InvalidParameterError

logger = logging.getLogger(__name__)

DEFAULT_WAVE_COLOR = "#004C66"
DEFAULT_BACKGROUND_COLOR = "#FFFFF0"


@dataclass(frozen=True)
class RenderParams:
    """Immutable snapshot of the user-facing parameters.

    Attributes:
        wave_speed: Radius growth in pixels per second.
        wave_frequency: Waves emitted per second while the pointer is held.
        wave_color: Stroke color token, passed through to the canvas.
        background_color: Fill color token, passed through to the canvas.
    """

    wave_speed: float = 10.0
    wave_frequency: float = 2.0
    wave_color: Color = DEFAULT_WAVE_COLOR
    background_color: Color = DEFAULT_BACKGROUND_COLOR

    def validate(self) -> RenderParams:
        _check_positive("wave_speed", self.wave_speed)
        _check_positive("wave_frequency", self.wave_frequency)
        _check_color("wave_color", self.wave_color)
        _check_color("background_color", self.background_color)
        return self

    @property
    def interval(self) -> float:
        """Seconds between emitted waves."""
        return 1.0 / self.wave_frequency


_Listener = Callable[[RenderParams, RenderParams], None]


class Controls:
    """Holds the current :class:`RenderParams`; the core reads, the shell writes."""

    def __init__(self, params: RenderParams | None = None) -> None:
        self._params = (params or RenderParams()).validate()
        self._listeners: list[_Listener] = []

    @property
    def params(self) -> RenderParams:
        return self._params

    def update(self, **changes: Any) -> RenderParams:
        """Validate and swap in new parameters. Raises InvalidParameterError."""
        new = dataclasses.replace(self._params, **changes).validate()
        old, self._params = self._params, new
        if new != old:
            logger.debug("render params changed: %s", changes)
            for listener in list(self._listeners):
                listener(old, new)
        return new

    def subscribe(self, listener: _Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: _Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass


@dataclass(frozen=True)
class RippleConfig:
    """Configuration for an interactive ripple window.

    Attributes:
        width: Initial surface width in pixels.
        height: Initial surface height in pixels.
        fps: Target frames per second for the render loop.
        line_width: Stroke width of each ring.
        params: Initial render parameters.
    """

    width: int = 960
    height: int = 640
    fps: int = 60
    line_width: int = 2
    params: RenderParams = field(default_factory=RenderParams)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidParameterError(
                "size", (self.width, self.height), "window size must be positive"
            )
        if self.fps <= 0:
            raise InvalidParameterError("fps", self.fps, "fps must be positive")
        if self.line_width <= 0:
            raise InvalidParameterError(
                "line_width", self.line_width, "line_width must be positive"
            )
        self.params.validate()


def _check_positive(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(
            name, value, f"{name} must be a number, got {value!r}"
        )
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(
            name, value, f"{name} must be positive, got {value!r}"
        )


def _check_color(name: str, value: Any) -> None:
    if value is None or value == "":
        raise InvalidParameterError(name, value, f"{name} must not be empty")
