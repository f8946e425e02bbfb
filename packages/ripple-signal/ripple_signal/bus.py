"""In-memory input event bus with per-frame flush semantics."""
from __future__ import annotations

import time
from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

POINTER_DOWN = "pointer_down"
POINTER_MOVE = "pointer_move"
POINTER_UP = "pointer_up"
RESIZE = "resize"


class InputBus:
    """Queues input events as they arrive and dispatches them on flush.

    Every event carries a ``t`` timestamp taken from the bus time source
    at publish time, unless the publisher supplies one.
    """

    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def __len__(self) -> int:
        return len(self._queue)

    def subscribe(self, event_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(event_name, []).append(handler)

    def unsubscribe(self, event_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, event_name: str, **data: Any) -> None:
        if "t" not in data:
            data["t"] = self._time_fn()
        self._queue.append((event_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for event_name, data in snapshot:
            for handler in list(self._subscribers.get(event_name, [])):
                handler(event_name, data)

    def clear(self) -> None:
        self._queue.clear()
