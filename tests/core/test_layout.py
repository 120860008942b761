"""Tests for the symbol layout."""

import pytest

from cardface.cards import Rank
from cardface.errors import ConfigurationError
from cardface.layout import (
    SYMBOL_COLUMNS,
    GlyphPlacement,
    column_counts,
    column_rows,
    column_x,
    glyph_count,
    layout,
)


def positions(rank):
    """Return (column, x, y) triples for a rank."""
    return [(p.column, p.x_percent, p.y_percent) for p in layout(rank)]


def per_column(rank):
    """Count placements in each column."""
    counts = [0, 0, 0]
    for placement in layout(rank):
        counts[placement.column] += 1
    return tuple(counts)


class TestColumnCounts:
    """Tests for the per-rank column table."""

    @pytest.mark.parametrize(
        "rank, expected",
        [
            (Rank.ACE, (0, 1, 0)),
            (Rank.TWO, (0, 2, 0)),
            (Rank.THREE, (0, 3, 0)),
            (Rank.FOUR, (2, 0, 2)),
            (Rank.FIVE, (2, 1, 2)),
            (Rank.SIX, (3, 0, 3)),
            (Rank.SEVEN, (3, 1, 3)),
            (Rank.EIGHT, (4, 0, 4)),
            (Rank.NINE, (4, 1, 4)),
            (Rank.TEN, (4, 2, 4)),
        ],
    )
    def test_pip_ranks_match_table(self, rank, expected):
        """Test the layout fills each column with the tabled count."""
        assert column_counts(rank) == expected
        assert per_column(rank) == expected

    def test_glyph_count_matches_pip_value(self):
        """Test Ace through Ten carry one to ten glyphs."""
        pip_ranks = [r for r in Rank if not r.is_court]
        assert [glyph_count(r) for r in pip_ranks] == list(range(1, 11))

    @pytest.mark.parametrize("rank", [Rank.JACK, Rank.QUEEN, Rank.KING])
    def test_court_cards_have_no_grid(self, rank):
        """Test court cards produce no glyphs in any column."""
        assert column_counts(rank) == (0, 0, 0)
        assert layout(rank) == ()

    def test_table_covers_every_rank(self):
        """Test the column table is total over Rank."""
        assert set(SYMBOL_COLUMNS) == set(Rank)


class TestPlacement:
    """Tests for glyph coordinates."""

    def test_column_offsets(self):
        """Test columns sit at 10%, 36% and 62%."""
        assert [column_x(c) for c in range(3)] == [10, 36, 62]

    def test_ace_single_glyph_not_centered(self):
        """Test the Ace glyph stays at the top of the center column."""
        assert layout(Rank.ACE) == (GlyphPlacement(column=1, x_percent=36, y_percent=16),)

    def test_four(self):
        """Test the Four fills the corners."""
        assert positions(Rank.FOUR) == [
            (0, 10, 16),
            (0, 10, 76),
            (2, 62, 16),
            (2, 62, 76),
        ]

    def test_two_center_column_is_squeezed(self):
        """Test two center glyphs use half spacing, shifted down."""
        assert positions(Rank.TWO) == [(1, 36, 31), (1, 36, 61)]

    def test_three_center_column_is_spread(self):
        """Test three center glyphs span the full height."""
        assert positions(Rank.THREE) == [(1, 36, 16), (1, 36, 46), (1, 36, 76)]

    def test_five_middle_glyph(self):
        """Test the Five's single center glyph sits between the rows."""
        assert positions(Rank.FIVE)[2] == (1, 36, 31)

    def test_eight_rows(self):
        """Test four rows are evenly spaced."""
        assert column_rows(Rank.EIGHT, 0, 4) == [16, 36, 56, 76]

    def test_ten(self):
        """Test the Ten splits its center column in two."""
        assert positions(Rank.TEN) == [
            (0, 10, 16), (0, 10, 36), (0, 10, 56), (0, 10, 76),
            (1, 36, 31), (1, 36, 61),
            (2, 62, 16), (2, 62, 36), (2, 62, 56), (2, 62, 76),
        ]

    def test_side_columns_are_not_adjusted(self):
        """Test the center adjustment only applies to column 1."""
        assert column_rows(Rank.FOUR, 0, 2) == [16, 76]

    @pytest.mark.parametrize("rank", list(Rank))
    def test_order_is_column_then_row(self, rank):
        """Test glyphs are ordered left to right, top to bottom."""
        keys = [(p.column, p.y_percent) for p in layout(rank)]
        assert keys == sorted(keys)

    @pytest.mark.parametrize("rank", list(Rank))
    def test_glyphs_stay_on_the_face(self, rank):
        """Test every glyph lies inside the face."""
        for placement in layout(rank):
            assert 0 <= placement.x_percent <= 100
            assert 0 <= placement.y_percent <= 100


class TestLayoutInput:
    """Tests for rank validation."""

    def test_accepts_ordinal(self):
        """Test an integer ordinal is laid out like its rank."""
        assert layout(3) == layout(Rank.FOUR)

    @pytest.mark.parametrize("value", [13, -1, "ACE", None])
    def test_rejects_unknown_rank(self, value):
        """Test unknown ranks fail fast."""
        with pytest.raises(ConfigurationError):
            layout(value)

    def test_layout_is_deterministic(self):
        """Test repeated calls give equal results."""
        assert layout(Rank.NINE) == layout(Rank.NINE)
