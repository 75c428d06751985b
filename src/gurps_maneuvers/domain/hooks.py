"""Synchronous hook bus for combat lifecycle events.

Usage:
    bus = HookBus()
    bus.on(LifecycleEvent.PARTICIPANT_ADDED, handler)
    bus.emit(LifecycleEvent.PARTICIPANT_ADDED, combatant, options, user_id)

Handlers run to completion, in registration order, inside ``emit``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .enums import LifecycleEvent

logger = logging.getLogger(__name__)

HookHandler = Callable[..., Any]


class HookBus:
    """Dispatches lifecycle events to subscribed handlers."""

    def __init__(self) -> None:
        self._listeners: dict[LifecycleEvent, list[HookHandler]] = {}

    def on(self, event: LifecycleEvent, handler: HookHandler) -> None:
        handlers = self._listeners.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)

    def off(self, event: LifecycleEvent, handler: HookHandler) -> None:
        handlers = self._listeners.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: LifecycleEvent, *args: Any) -> list[Any]:
        """Call every handler for ``event`` and collect their return values.

        A failing handler is logged and skipped so the remaining handlers
        still observe the event.
        """

        results: list[Any] = []
        for handler in list(self._listeners.get(event, [])):
            try:
                results.append(handler(*args))
            except Exception:
                logger.exception("hook handler for %s failed", event.value)
        return results

    def listener_count(self, event: LifecycleEvent) -> int:
        return len(self._listeners.get(event, []))

    def clear(self) -> None:
        self._listeners.clear()
