"""EmissionScheduler - decides when a held pointer emits a new wave."""
from __future__ import annotations

import heapq
import itertools
import logging
import math
import time
from typing import TYPE_CHECKING, Callable

from ripple import InvalidParameterError

from ripple_schedule.components import EmissionSession, Origin, ScheduledSpawn

if TYPE_CHECKING:
    from ripple import Controls, Wave, WaveField

logger = logging.getLogger(__name__)

_SpawnListener = Callable[[EmissionSession, "Wave"], None]


class InvalidFrequencyError(InvalidParameterError):
    """Raised when a non-positive frequency reaches a scheduling decision."""


class EmissionScheduler:
    """Single-session wave emitter driven by absolute fire times.

    ``start`` opens a session and spawns immediately; ``poll`` is called
    cooperatively (once per frame) and emits every spawn that has come due.
    A queued spawn only fires if its session is still the active one.
    """

    def __init__(
        self,
        field: WaveField,
        controls: Controls,
        time_fn: Callable[[], float] = time.monotonic,
        on_spawn: _SpawnListener | None = None,
    ) -> None:
        self._field = field
        self._controls = controls
        self._time_fn = time_fn
        self._on_spawn = on_spawn
        self._active: EmissionSession | None = None
        self._queue: list[ScheduledSpawn] = []
        self._seq = itertools.count()
        self._next_session_id = 1

    # --- Queries ---

    @property
    def active(self) -> EmissionSession | None:
        return self._active

    @property
    def state(self) -> str:
        return "idle" if self._active is None else "active"

    @property
    def pending(self) -> int:
        """Number of queued spawns that have not been cancelled."""
        return sum(1 for entry in self._queue if not entry.cancelled)

    def next_fire(self) -> float | None:
        session = self._active
        if session is None or session.pending is None:
            return None
        return session.pending.fire_at

    # --- Control ---

    def start(self, x: float, y: float, now: float | None = None) -> EmissionSession:
        """Open a new session at (x, y), superseding any active one."""
        if now is None:
            now = self._time_fn()
        interval = self._interval()
        if self._active is not None:
            self.stop()

        session = EmissionSession(
            session_id=self._next_session_id,
            start_time=now,
            origin=Origin(x, y),
            interval=interval,
            anchor_time=now,
        )
        self._next_session_id += 1
        self._active = session
        logger.debug(
            "session %d started at (%s, %s), interval %.4fs",
            session.session_id, x, y, interval,
        )

        self._emit(session, now, now)
        if self._active is session:
            self._queue_next(session)
        return session

    def move(self, x: float, y: float, now: float | None = None) -> None:
        """Point the next spawn of the active session at (x, y).

        With ``now``, spawns already due at or before ``now`` are emitted at
        the old origin first.
        """
        if now is not None and self._active is not None:
            self.poll(now)
        if self._active is not None:
            self._active.origin.move(x, y)

    def stop(self, now: float | None = None) -> EmissionSession | None:
        """End the active session.

        With ``now``, spawns already due at or before ``now`` are emitted
        first. Nothing belonging to the session is emitted afterwards.
        """
        if now is not None and self._active is not None:
            self.poll(now)
        session = self._active
        if session is None:
            return None

        self._active = None
        if session.pending is not None:
            session.pending.cancelled = True
            session.pending = None
        self._queue = [e for e in self._queue if e.session_id != session.session_id]
        heapq.heapify(self._queue)
        logger.debug(
            "session %d stopped after %d waves", session.session_id, session.spawned
        )
        return session

    def poll(self, now: float | None = None) -> int:
        """Emit every spawn due at or before ``now``. Returns the count."""
        if now is None:
            now = self._time_fn()
        emitted = 0
        while self._queue and self._queue[0].fire_at <= now:
            entry = heapq.heappop(self._queue)
            if entry.cancelled:
                continue
            session = self._active
            if session is None or session.session_id != entry.session_id:
                logger.debug(
                    "dropping stale spawn %d for session %d",
                    entry.index, entry.session_id,
                )
                continue

            session.pending = None
            self._emit(session, entry.fire_at, now)
            emitted += 1
            if self._active is session:
                self._queue_next(session)
        return emitted

    # --- Internal ---

    def _interval(self) -> float:
        frequency = self._controls.params.wave_frequency
        if not isinstance(frequency, (int, float)) or not math.isfinite(frequency) or frequency <= 0:
            raise InvalidFrequencyError(
                "wave_frequency",
                frequency,
                f"wave_frequency must be positive, got {frequency!r}",
            )
        return 1.0 / frequency

    def _emit(self, session: EmissionSession, fire_at: float, now: float) -> None:
        session.spawned += 1
        session.last_fire = fire_at
        # An overdue spawn has already been growing since fire_at.
        radius = self._controls.params.wave_speed * max(0.0, now - fire_at)
        if radius >= self._field.diagonal:
            logger.debug(
                "spawn %d of session %d already off-surface, not added",
                session.spawned - 1, session.session_id,
            )
            return
        origin = session.origin
        wave = self._field.spawn(origin.x, origin.y, radius)
        if self._on_spawn is not None:
            self._on_spawn(session, wave)

    def _queue_next(self, session: EmissionSession) -> None:
        interval = self._interval()
        if interval != session.interval:
            # Re-anchor at the last emitted spawn; earlier spawns are history.
            session.anchor_time = session.last_fire
            session.anchor_count = session.spawned - 1
            session.interval = interval

        index = session.spawned
        entry = ScheduledSpawn(
            fire_at=session.fire_time(index),
            seq=next(self._seq),
            session_id=session.session_id,
            index=index,
        )
        session.pending = entry
        heapq.heappush(self._queue, entry)
