"""Rank, Suit and Card - immutable card identity and its display tables."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from cardface.errors import ConfigurationError


class Suit(Enum):
    """Card suits, in display order."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3

    def __str__(self) -> str:
        return self.glyph

    @property
    def glyph(self) -> str:
        """Return the suit symbol character."""
        return SUIT_GLYPHS[self]

    @property
    def hook(self) -> str:
        """Return the style hook class for this suit."""
        return SUIT_HOOKS[self]

    @property
    def is_red(self) -> bool:
        """Check if this suit is printed in red."""
        return self in (Suit.HEART, Suit.DIAMOND)

    @classmethod
    def coerce(cls, value: "Suit | int") -> "Suit":
        """Return the suit for a member or its ordinal.

        Raises:
            ConfigurationError: If the value names no suit
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"Invalid suit: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(f"Invalid suit: {value!r}") from None


class Rank(Enum):
    """Card ranks, valued by their ordinal in the layout tables."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """Return the printed rank token ('A', '2'-'10', 'J', 'Q', 'K')."""
        return RANK_LABELS[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_court(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self.value >= Rank.JACK.value

    @classmethod
    def coerce(cls, value: "Rank | int") -> "Rank":
        """Return the rank for a member or its ordinal.

        Raises:
            ConfigurationError: If the value names no rank
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"Invalid rank: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(f"Invalid rank: {value!r}") from None


SUIT_GLYPHS: Mapping[Suit, str] = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}

SUIT_HOOKS: Mapping[Suit, str] = {
    Suit.SPADE: "CardSpade",
    Suit.HEART: "CardHeart",
    Suit.DIAMOND: "CardDiamond",
    Suit.CLUB: "CardClub",
}

RANK_LABELS: Mapping[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def require_complete(table: Mapping, enum_type: type[Enum], name: str) -> None:
    """Check that a lookup table has an entry for every enum member.

    Raises:
        ConfigurationError: If any member is missing
    """
    missing = [member.name for member in enum_type if member not in table]
    if missing:
        raise ConfigurationError(f"{name} is missing entries for: {', '.join(missing)}")


require_complete(SUIT_GLYPHS, Suit, "SUIT_GLYPHS")
require_complete(SUIT_HOOKS, Suit, "SUIT_HOOKS")
require_complete(RANK_LABELS, Rank, "RANK_LABELS")


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card identity."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Frozen: bypass __setattr__ to store the coerced members.
        object.__setattr__(self, "rank", Rank.coerce(self.rank))
        object.__setattr__(self, "suit", Suit.coerce(self.suit))

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ConfigurationError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {label: rank for rank, label in RANK_LABELS.items()}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "S": Suit.SPADE,
            "H": Suit.HEART,
            "D": Suit.DIAMOND,
            "C": Suit.CLUB,
        }
        suit_map.update({glyph: suit for suit, glyph in SUIT_GLYPHS.items()})

        if rank_str not in rank_map:
            raise ConfigurationError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ConfigurationError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])
