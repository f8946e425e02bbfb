"""System factories and bindings for input dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from ripple_signal.bus import POINTER_DOWN, POINTER_MOVE, POINTER_UP, RESIZE, InputBus

if TYPE_CHECKING:
    from ripple import FrameContext, WaveField
    from ripple_schedule import EmissionScheduler


def make_input_system(bus: InputBus) -> Callable[[WaveField, FrameContext], None]:
    def input_system(field: WaveField, ctx: FrameContext) -> None:
        bus.flush()

    return input_system


def bind_pointer(
    bus: InputBus, scheduler: EmissionScheduler, field: WaveField
) -> None:
    """Route pointer and resize events to the scheduler and the field."""

    def on_down(event: str, data: dict[str, Any]) -> None:
        scheduler.start(data["x"], data["y"], now=data["t"])

    def on_move(event: str, data: dict[str, Any]) -> None:
        scheduler.move(data["x"], data["y"], now=data["t"])

    def on_up(event: str, data: dict[str, Any]) -> None:
        scheduler.stop(now=data["t"])

    def on_resize(event: str, data: dict[str, Any]) -> None:
        field.resize(data["width"], data["height"])

    bus.subscribe(POINTER_DOWN, on_down)
    bus.subscribe(POINTER_MOVE, on_move)
    bus.subscribe(POINTER_UP, on_up)
    bus.subscribe(RESIZE, on_resize)
