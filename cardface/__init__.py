"""Playing card widget - symbol layout and render tree, 100% host-agnostic."""

from cardface.cards import Card, Rank, Suit
from cardface.errors import CardFaceError, ConfigurationError, InvalidStateError
from cardface.layout import GlyphPlacement, column_counts, glyph_count, layout
from cardface.widget import CardWidget, DisplayState

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "CardFaceError",
    "ConfigurationError",
    "InvalidStateError",
    "GlyphPlacement",
    "column_counts",
    "glyph_count",
    "layout",
    "CardWidget",
    "DisplayState",
]
