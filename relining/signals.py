"""Queued notifications from the simulation to its observers.

Signals published during a tick are held until the engine flushes them at
the end of that tick, so handlers always see a fully settled state.
"""
from __future__ import annotations

from typing import Any, Callable

STAGE_CHANGED = "stage_changed"
SEGMENT_BROKEN = "segment_broken"
DEBRIS_SWEPT = "debris_swept"
NOTICE = "notice"

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._pending: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: Handler) -> None:
        handlers = self._handlers.get(name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, name: str, **data: Any) -> None:
        self._pending.append((name, data))

    @property
    def pending(self) -> int:
        return len(self._pending)

    def flush(self) -> None:
        batch, self._pending = self._pending, []
        for name, data in batch:
            for handler in list(self._handlers.get(name, ())):
                handler(name, data)

    def clear(self) -> None:
        self._pending.clear()
