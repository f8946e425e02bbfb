"""Engine - render loop, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from ripple.clock import FrameClock, TimeSource
from ripple.field import WaveField
from ripple.types import System

logger = logging.getLogger(__name__)


class Engine:
    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        time_fn: TimeSource = time.monotonic,
    ) -> None:
        self._clock = FrameClock(time_fn)
        self._field = WaveField(width, height)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[WaveField], None]] = []
        self._stop_hooks: list[Callable[[WaveField], None]] = []
        self._stop_requested: bool = False
        self._running: bool = False

    @property
    def field(self) -> WaveField:
        return self._field

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def running(self) -> bool:
        return self._running

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[WaveField], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[WaveField], None]) -> None:
        self._stop_hooks.append(hook)

    def cancel(self) -> None:
        """Stop the loop after the current frame."""
        self._stop_requested = True

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _frame(self, now: float | None) -> None:
        ctx = self._clock.advance(self._request_stop, now)
        for system in self._systems:
            system(self._field, ctx)
            if self._stop_requested:
                break

    def _begin(self) -> None:
        self._stop_requested = False
        self._running = True
        # Fresh baseline: the first frame of every run integrates nothing.
        self._clock.reset()
        for hook in self._start_hooks:
            hook(self._field)

    def _end(self) -> None:
        for hook in self._stop_hooks:
            hook(self._field)
        self._running = False

    def step(self, now: float | None = None) -> None:
        self._stop_requested = False
        self._frame(now)

    def run(self, n: int, dt: float, start: float = 0.0) -> None:
        """Run ``n`` frames at fixed spacing ``dt`` starting at ``start``."""
        self._begin()
        for i in range(n):
            self._frame(start + i * dt)
            if self._stop_requested:
                break
        self._end()

    def run_forever(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._begin()
        logger.debug("render loop started at %d fps", fps)

        frame_time = 1.0 / fps
        while not self._stop_requested:
            start = time.monotonic()
            self._frame(None)
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = frame_time - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.debug("render loop stopped after %d frames", self._clock.frame_number)
        self._end()
