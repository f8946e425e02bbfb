"""ripple-signal - Input event feed for the ripple engine."""
from __future__ import annotations

from ripple_signal.bus import POINTER_DOWN, POINTER_MOVE, POINTER_UP, RESIZE, InputBus
from ripple_signal.systems import bind_pointer, make_input_system

__all__ = [
    "InputBus",
    "bind_pointer",
    "make_input_system",
    "POINTER_DOWN",
    "POINTER_MOVE",
    "POINTER_UP",
    "RESIZE",
]
