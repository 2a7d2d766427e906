"""Event system for decoupling the scoreboard engine from UI and storage."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class EventType(Enum):
    SETTLEMENT = "settlement"
    UNDO = "undo"
    REDO = "redo"
    ROUND_EDIT = "round_edit"
    NAMES_EDIT = "names_edit"
    RESET = "reset"
    STATE_CHANGED = "state_changed"


@dataclass
class GameEvent:
    """An event emitted by the scoreboard."""
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


class EventBus:
    """Simple publish/subscribe event bus."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable]] = {}

    def subscribe(self, event_type: EventType, callback: Callable):
        """Register a callback for an event type."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(callback)

    def emit(self, event: GameEvent):
        """Emit an event to all registered listeners."""
        listeners = self._listeners.get(event.event_type, [])
        for callback in listeners:
            callback(event)

    def clear(self):
        """Remove all listeners."""
        self._listeners.clear()
