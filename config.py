"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CardSizeConfig:
    """Rendered card size in pixels."""

    width: int = field(default_factory=lambda: int(os.getenv("CARD_WIDTH", "90")))
    height: int = field(default_factory=lambda: int(os.getenv("CARD_HEIGHT", "126")))
    corner_radius: int = 8
    border_width: int = 2

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Card width and height must be positive")

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    card: CardSizeConfig = field(default_factory=CardSizeConfig)


# Global configuration instance
config = AppConfig()
