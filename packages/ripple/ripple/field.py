"""WaveField - the live wave collection and its surface bounds."""

from __future__ import annotations

import math
from typing import Iterator

from ripple.types import Wave


class WaveField:
    """Insertion-ordered set of live waves on a ``width`` x ``height`` surface.

    Waves are culled during :meth:`advance` once their radius reaches the
    surface diagonal, since no part of the ring can be visible past it.
    """

    def __init__(self, width: float = 800, height: float = 600) -> None:
        _check_size(width, height)
        self._width = width
        self._height = height
        self._waves: list[Wave] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def diagonal(self) -> float:
        return math.hypot(self._width, self._height)

    @property
    def waves(self) -> tuple[Wave, ...]:
        return tuple(self._waves)

    def __len__(self) -> int:
        return len(self._waves)

    def __iter__(self) -> Iterator[Wave]:
        return iter(list(self._waves))

    def spawn(self, x: float, y: float, radius: float = 0.0) -> Wave:
        wave = Wave(origin_x=x, origin_y=y, radius=radius)
        self._waves.append(wave)
        return wave

    def advance(self, dt: float, speed: float) -> list[Wave]:
        """Grow every wave by ``speed * dt`` and return the culled ones."""
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        dr = speed * dt
        limit = self.diagonal
        survivors: list[Wave] = []
        culled: list[Wave] = []
        for wave in self._waves:
            wave.radius += dr
            if wave.radius < limit:
                survivors.append(wave)
            else:
                culled.append(wave)
        self._waves = survivors
        return culled

    def resize(self, width: float, height: float) -> None:
        # Existing waves are untouched; only the cull bound moves.
        _check_size(width, height)
        self._width = width
        self._height = height

    def clear(self) -> None:
        self._waves.clear()


def _check_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"surface size must be positive, got {width}x{height}")
