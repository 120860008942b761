"""UI components for the pygame card host."""

from pygame_ui.components.card import CardSprite

__all__ = [
    "CardSprite",
]
