"""ripple-schedule - Wave emission scheduling for the ripple engine."""
from __future__ import annotations

from ripple_schedule.components import EmissionSession, Origin, ScheduledSpawn
from ripple_schedule.scheduler import EmissionScheduler, InvalidFrequencyError
from ripple_schedule.systems import make_emission_system

__all__ = [
    "EmissionScheduler",
    "EmissionSession",
    "Origin",
    "ScheduledSpawn",
    "InvalidFrequencyError",
    "make_emission_system",
]
