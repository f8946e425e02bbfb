"""Emission session state and queued spawn entries."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Origin:
    """Live pointer position owned by a session. Read at each spawn."""

    x: float
    y: float

    def move(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


@dataclass(order=True)
class ScheduledSpawn:
    """One queued spawn. Ordered by fire time, then by queue order."""

    fire_at: float
    seq: int
    session_id: int = field(compare=False)
    index: int = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


@dataclass
class EmissionSession:
    """One continuous pointer press.

    Spawn ``k`` fires at ``anchor_time + (k - anchor_count) * interval``.
    The anchor only moves when the frequency changes mid-session.
    """

    session_id: int
    start_time: float
    origin: Origin
    interval: float
    anchor_time: float
    anchor_count: int = 0
    spawned: int = 0
    last_fire: float = 0.0
    pending: ScheduledSpawn | None = None

    def fire_time(self, index: int) -> float:
        return self.anchor_time + (index - self.anchor_count) * self.interval
