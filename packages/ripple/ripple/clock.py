"""FrameClock - wall-clock frame timing for the render loop."""

import time
from typing import Callable

from ripple.types import FrameContext

TimeSource = Callable[[], float]


class FrameClock:
    """Turns wall-clock readings into per-frame ``dt`` values.

    The clock owns the "last drawn at" timestamp. The first frame after
    construction or :meth:`reset` only records a baseline and reports
    ``dt == 0.0``, so a restarted loop never sees one huge step.
    """

    def __init__(self, time_fn: TimeSource = time.monotonic) -> None:
        self._time_fn = time_fn
        self._frame_number = 0
        self._last: float | None = None
        self._started: float | None = None

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def last(self) -> float | None:
        return self._last

    def now(self) -> float:
        return self._time_fn()

    def advance(
        self, stop_fn: Callable[[], None], now: float | None = None
    ) -> FrameContext:
        if now is None:
            now = self._time_fn()
        self._frame_number += 1

        baseline = self._last is None
        if baseline:
            dt = 0.0
            self._started = now
        else:
            # Clamp non-monotonic readings; radii never shrink.
            dt = max(0.0, now - self._last)
        self._last = now

        return FrameContext(
            frame_number=self._frame_number,
            now=now,
            dt=dt,
            elapsed=now - self._started,
            baseline=baseline,
            request_stop=stop_fn,
        )

    def reset(self) -> None:
        self._last = None
        self._started = None
