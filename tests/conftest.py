"""Pytest fixtures for card widget tests."""

import pytest

from cardface.cards import Rank, Suit
from cardface.render.tree import TreeHost
from cardface.widget import CardWidget


@pytest.fixture
def host():
    """An in-memory render host."""
    return TreeHost()


@pytest.fixture
def table(host):
    """A detached container standing in for the game table."""
    return host.create_root()


@pytest.fixture
def ace_of_spades(host):
    """An unbuilt Ace of Spades."""
    return CardWidget(Rank.ACE, Suit.SPADE, host=host)


@pytest.fixture
def ten_of_hearts(host):
    """A built Ten of Hearts."""
    widget = CardWidget(Rank.TEN, Suit.HEART, host=host)
    widget.build()
    return widget


@pytest.fixture
def king_of_clubs(host):
    """A built King of Clubs."""
    widget = CardWidget(Rank.KING, Suit.CLUB, host=host)
    widget.build()
    return widget


@pytest.fixture
def recorded_events(ten_of_hearts):
    """Events emitted by the Ten of Hearts after the fixture built it."""
    events = []
    ten_of_hearts.subscribe(events.append)
    return events
