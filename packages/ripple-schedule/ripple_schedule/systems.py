"""System factory for cooperative emission polling."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ripple_schedule.scheduler import EmissionScheduler

if TYPE_CHECKING:
    from ripple import FrameContext, WaveField


def make_emission_system(
    scheduler: EmissionScheduler,
) -> Callable[[WaveField, FrameContext], None]:
    """Return a system that emits every spawn due by the frame time."""

    def emission_system(field: WaveField, ctx: FrameContext) -> None:
        scheduler.poll(ctx.now)

    return emission_system
