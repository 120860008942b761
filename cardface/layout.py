"""Symbol layout - where the suit glyphs sit on a card face.

Placements are percentages of the face size, so a host can position glyphs
absolutely at any card size. Every function here is pure.
"""

from dataclasses import dataclass
from typing import Mapping

from cardface.cards import Rank, require_complete

COLUMN_COUNT = 3
CENTER_COLUMN = 1

# Horizontal placement: x = column * COLUMN_STEP + COLUMN_OFFSET
COLUMN_STEP = 26
COLUMN_OFFSET = 10

# Vertical placement: rows spread over (100 - VERTICAL_MARGIN)%, starting at TOP_OFFSET
VERTICAL_MARGIN = 40
TOP_OFFSET = 16


# Glyphs per column (left, center, right) for each rank
SYMBOL_COLUMNS: Mapping[Rank, tuple[int, int, int]] = {
    Rank.ACE: (0, 1, 0),
    Rank.TWO: (0, 2, 0),
    Rank.THREE: (0, 3, 0),
    Rank.FOUR: (2, 0, 2),
    Rank.FIVE: (2, 1, 2),
    Rank.SIX: (3, 0, 3),
    Rank.SEVEN: (3, 1, 3),
    Rank.EIGHT: (4, 0, 4),
    Rank.NINE: (4, 1, 4),
    Rank.TEN: (4, 2, 4),
    Rank.JACK: (0, 0, 0),
    Rank.QUEEN: (0, 0, 0),
    Rank.KING: (0, 0, 0),
}

require_complete(SYMBOL_COLUMNS, Rank, "SYMBOL_COLUMNS")


@dataclass(frozen=True, slots=True)
class GlyphPlacement:
    """One suit glyph on the face grid."""

    column: int
    x_percent: float
    y_percent: float


def column_counts(rank: Rank | int) -> tuple[int, int, int]:
    """Return the glyph count of each column for a rank.

    Raises:
        ConfigurationError: If rank is not a known rank
    """
    return SYMBOL_COLUMNS[Rank.coerce(rank)]


def glyph_count(rank: Rank | int) -> int:
    """Return the total number of glyphs on the face of a rank."""
    return sum(column_counts(rank))


def column_x(column: int) -> float:
    """Return the left offset of a column, in percent."""
    return column * COLUMN_STEP + COLUMN_OFFSET


def column_rows(rank: Rank, column: int, row_count: int) -> list[float]:
    """
    Compute the top offsets of the glyphs in one column.

    Rows are spread evenly from TOP_OFFSET. A short center column (one or two
    glyphs) is squeezed to half spacing and pushed down by half a step so it
    sits in the middle of the face; the Ace keeps its single glyph at the top.

    Args:
        rank: Rank being laid out
        column: Column index (0-2)
        row_count: Number of glyphs in the column

    Returns:
        Top offsets in percent, top to bottom
    """
    spacing = (100 - VERTICAL_MARGIN) / max(row_count - 1, 1)
    shift = 0.0

    if column == CENTER_COLUMN and row_count < 3 and rank != Rank.ACE:
        spacing /= 2
        shift = spacing / 2

    return [TOP_OFFSET + row * spacing + shift for row in range(row_count)]


def layout(rank: Rank | int) -> tuple[GlyphPlacement, ...]:
    """
    Lay out the suit glyphs for a rank.

    Args:
        rank: A Rank member or its ordinal

    Returns:
        Placements column by column (left to right), top to bottom within a column

    Raises:
        ConfigurationError: If rank is not a known rank
    """
    rank = Rank.coerce(rank)
    placements: list[GlyphPlacement] = []

    for column, row_count in enumerate(SYMBOL_COLUMNS[rank]):
        x = column_x(column)
        for y in column_rows(rank, column, row_count):
            placements.append(GlyphPlacement(column=column, x_percent=x, y_percent=y))

    return tuple(placements)
