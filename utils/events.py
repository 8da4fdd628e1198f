"""
Village Economy - Events
What happened in the village, day by day.
"""

from collections import Counter, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class EventType(Enum):
    """Things worth telling the player about."""
    WORKER_HIRED = auto()
    WORKER_STARVED = auto()
    PROJECT_STARTED = auto()
    BUILDING_COMPLETED = auto()
    FOOD_SHORTAGE = auto()
    GAME_OVER = auto()
    VICTORY = auto()


@dataclass(frozen=True)
class Event:
    """One entry in the village chronicle."""
    day: int
    event_type: EventType
    message: str
    data: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"Day {self.day}: {self.message}"

    def to_dict(self) -> dict:
        return {
            'day': self.day,
            'type': self.event_type.name,
            'message': self.message,
            **self.data,
        }


class EventTracker:
    """
    Chronicle of village events.

    Only the newest `max_events` entries are kept, but the per-type
    totals cover the whole game.
    """

    def __init__(self, max_events: int = 1000):
        self._events: deque[Event] = deque(maxlen=max_events)
        self._totals: Counter = Counter()

    def record(self, day: int, event_type: EventType, message: str,
               data: Optional[dict] = None) -> Event:
        event = Event(day, event_type, message, dict(data or {}))
        self._events.append(event)
        self._totals[event_type] += 1
        return event

    def recent(self, count: int = 5) -> list[Event]:
        """Newest events, oldest first."""
        if count <= 0:
            return []
        return list(self._events)[-count:]

    def totals(self) -> dict[str, int]:
        """How often each event type has happened, zeros included."""
        return {event_type.name: self._totals[event_type] for event_type in EventType}

    def to_dict(self) -> dict:
        return {
            'totals': self.totals(),
            'log': [e.to_dict() for e in self._events],
        }
