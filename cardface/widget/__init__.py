"""Card widget and display state management."""

from cardface.widget.events import CardEvent, CardEventType, EventEmitter
from cardface.widget.state import DisplayState
from cardface.widget.card import CardWidget

__all__ = [
    "CardEvent",
    "CardEventType",
    "EventEmitter",
    "DisplayState",
    "CardWidget",
]
