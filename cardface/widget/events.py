"""Change notifications from a card widget to its host."""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable

from cardface.cards import Card

# Events kept per widget for inspection; older ones are dropped
RECENT_LIMIT = 32


class CardEventType(Enum):
    """What changed on a widget."""

    BUILT = auto()
    DESTROYED = auto()
    MOUNTED = auto()
    FLIPPED = auto()


@dataclass(frozen=True)
class CardEvent:
    """A change to one card's tree or display state."""

    event_type: CardEventType
    card: Card
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name} {self.card}: {self.data}"


EventHandler = Callable[[CardEvent], None]


class EventEmitter:
    """
    Dispatches a widget's events to its host.

    Handlers registered for a type run before catch-all handlers. Only the
    last `limit` events are kept in `recent`.
    """

    def __init__(self, limit: int = RECENT_LIMIT) -> None:
        self._handlers: defaultdict[CardEventType | None, list[EventHandler]] = defaultdict(list)
        self._recent: deque[CardEvent] = deque(maxlen=limit)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: CardEventType | None = None,
    ) -> None:
        """
        Register a handler.

        Args:
            handler: Called with each matching event
            event_type: Type to listen for, or None for every event
        """
        self._handlers[event_type].append(handler)

    def emit(self, event_type: CardEventType, card: Card, **data: Any) -> CardEvent:
        """
        Record an event and pass it to its handlers.

        Handler errors propagate to the caller.

        Returns:
            The emitted event
        """
        event = CardEvent(event_type=event_type, card=card, data=data)
        self._recent.append(event)

        for handler in [*self._handlers[event_type], *self._handlers[None]]:
            handler(event)
        return event

    @property
    def recent(self) -> list[CardEvent]:
        """Return the retained events, oldest first."""
        return list(self._recent)
