"""Palette and typography for the pygame card host."""

from dataclasses import dataclass, field
from typing import Tuple

from cardface.cards import Suit


@dataclass(frozen=True)
class Colors:
    """Color palette for rendered cards."""

    CARD_WHITE: Tuple[int, int, int] = (245, 243, 238)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (65, 85, 130)
    CARD_BACK_PATTERN: Tuple[int, int, int] = (85, 105, 150)


def _suit_colors() -> dict[str, Tuple[int, int, int]]:
    colors = Colors()
    return {suit.hook: colors.CARD_RED if suit.is_red else colors.CARD_BLACK for suit in Suit}


@dataclass(frozen=True)
class Stylesheet:
    """Hook class to appearance mapping, read by the card renderer."""

    suit_colors: dict[str, Tuple[int, int, int]] = field(default_factory=_suit_colors)
    default_color: Tuple[int, int, int] = Colors().CARD_BLACK

    def color_for(self, classes: list[str]) -> Tuple[int, int, int]:
        """Return the ink color for a node's hook classes."""
        for name in classes:
            if name in self.suit_colors:
                return self.suit_colors[name]
        return self.default_color


@dataclass(frozen=True)
class Typography:
    """Font sizes as fractions of the card height."""

    GLYPH_RATIO: float = 0.16
    ACE_GLYPH_RATIO: float = 0.4
    RANK_RATIO: float = 0.16
    COURT_RATIO: float = 0.45
    MIN_FONT_SIZE: int = 12
    CORNER_MARGIN: int = 6


# Global instances for easy import
COLORS = Colors()
STYLESHEET = Stylesheet()
TYPOGRAPHY = Typography()
