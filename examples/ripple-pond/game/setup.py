"""Wires the engine, controls, input bus and emission scheduler together."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from ripple import (
    Canvas,
    Controls,
    Engine,
    InvalidParameterError,
    RippleConfig,
    make_paint_system,
    make_wave_system,
)
from ripple_schedule import EmissionScheduler, make_emission_system
from ripple_signal import InputBus, bind_pointer, make_input_system

from ui.constants import ERROR_SECONDS

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Holds all runtime objects for one ripple window."""

    config: RippleConfig
    engine: Engine
    controls: Controls
    bus: InputBus
    scheduler: EmissionScheduler
    panel_visible: bool = True
    error: str | None = None
    error_until: float = 0.0

    def adjust(self, **changes) -> None:
        """Apply a user edit; rejected edits keep the previous parameters."""
        try:
            self.controls.update(**changes)
            self.error = None
        except InvalidParameterError as exc:
            logger.info("rejected edit %s: %s", changes, exc)
            self.error = str(exc)
            self.error_until = time.monotonic() + ERROR_SECONDS

    def current_error(self, now: float) -> str | None:
        if self.error is not None and now >= self.error_until:
            self.error = None
        return self.error


def build_app(
    config: RippleConfig,
    canvas_provider: Callable[[], Canvas | None],
    time_fn: Callable[[], float] = time.monotonic,
) -> AppState:
    engine = Engine(config.width, config.height, time_fn=time_fn)
    controls = Controls(config.params)
    bus = InputBus(time_fn=time_fn)
    scheduler = EmissionScheduler(engine.field, controls, time_fn=time_fn)
    bind_pointer(bus, scheduler, engine.field)

    # Order: grow, apply input, emit, then paint so newborn waves show at radius 0.
    engine.add_system(make_wave_system(controls))
    engine.add_system(make_input_system(bus))
    engine.add_system(make_emission_system(scheduler))
    engine.add_system(make_paint_system(controls, canvas_provider, config.line_width))

    logger.debug("ripple app built: %s", config)
    return AppState(
        config=config,
        engine=engine,
        controls=controls,
        bus=bus,
        scheduler=scheduler,
    )
