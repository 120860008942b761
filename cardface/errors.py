"""Error types raised by the card widget."""


class CardFaceError(Exception):
    """Base class for card widget errors."""


class ConfigurationError(CardFaceError, ValueError):
    """A rank or suit outside the enumerated domain was used."""


class InvalidStateError(CardFaceError, RuntimeError):
    """An operation needs a visual tree that is not built."""
