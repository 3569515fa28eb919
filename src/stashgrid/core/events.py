"""
A minimal, synchronous event bus used to tell collaborators about committed
changes. Listeners are invoked in registration order; a listener that raises is
logged and skipped so it can never undo a mutation that already happened.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Dict, List

logger = logging.getLogger(__name__)

ITEMS_CHANGED = "items_changed"
SPAWN_FAILED = "spawn_failed"
DRAG_RESOLVED = "drag_resolved"

Listener = Callable[[str, Dict[str, Any]], None]


class EventBus:
    """Simple publish/subscribe event bus."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def on(self, event_name: str, listener: Listener) -> None:
        """Register a listener for a specific event name."""
        logger.debug("Subscribing to event '%s': %s", event_name, listener)
        self._listeners[event_name].append(listener)

    def emit(self, event_name: str, payload: Dict[str, Any] | None = None) -> None:
        """Emit an event with optional payload, notifying all listeners."""
        if payload is None:
            payload = {}
        for listener in list(self._listeners.get(event_name, [])):
            try:
                listener(event_name, payload)
            except Exception:  # noqa: BLE001
                logger.exception("Error in event listener for '%s'", event_name)
