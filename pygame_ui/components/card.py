"""Card sprite - draws a card widget's render tree with pygame."""

from typing import Dict, List, Optional, Tuple

import pygame

from cardface.errors import InvalidStateError
from cardface.render.tree import Element, Text
from cardface.widget.card import (
    FLIPPED_CLASS,
    FRONT_CLASS,
    RANK_CLASS,
    SYMBOL_CLASS,
    CardWidget,
)
from cardface.widget.events import CardEvent
from config import CardSizeConfig, config
from pygame_ui.config import COLORS, STYLESHEET, TYPOGRAPHY, Stylesheet


def parse_percent(value: str) -> float:
    """Parse an inline style offset like '36%' into 36.0."""
    value = value.strip()
    if not value.endswith("%"):
        raise ValueError(f"Expected a percentage, got {value!r}")
    return float(value[:-1])


def text_lines(node: Element) -> List[str]:
    """Split a node's text children into lines at <br> elements."""
    lines = [""]
    for child in node.children:
        if isinstance(child, Text):
            lines[-1] += child.text
        elif child.tag == "br":
            lines.append("")
        else:
            lines[-1] += child.text_content
    return lines


class CardSprite:
    """Draws a built card widget.

    The sprite reads only the widget's tree: hook classes pick the colors,
    inline styles place the glyphs, and the root's flipped class picks the
    side. It listens to the widget's events and redraws after any change.
    """

    def __init__(
        self,
        widget: CardWidget,
        x: float = 0,
        y: float = 0,
        size: Optional[CardSizeConfig] = None,
        stylesheet: Stylesheet = STYLESHEET,
    ):
        self.widget = widget
        self.x = x
        self.y = y
        self.size = size or config.card
        self.stylesheet = stylesheet

        self._fonts: Dict[int, pygame.font.Font] = {}
        self._card_surface: Optional[pygame.Surface] = None
        self._needs_redraw = True

        widget.subscribe(self._on_card_event)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: Tuple[float, float]) -> None:
        self.x, self.y = value

    @property
    def needs_redraw(self) -> bool:
        return self._needs_redraw

    def _on_card_event(self, event: CardEvent) -> None:
        self._needs_redraw = True

    def _font(self, size: int) -> pygame.font.Font:
        """Get a cached default font of a pixel size."""
        size = max(TYPOGRAPHY.MIN_FONT_SIZE, size)
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _render_front(self, front: Element, width: int, height: int) -> pygame.Surface:
        """Render the face-up side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)

        rect = pygame.Rect(0, 0, width, height)
        radius = self.size.corner_radius
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
        pygame.draw.rect(
            surface, COLORS.CARD_BLACK, rect, width=self.size.border_width, border_radius=radius
        )

        color = self.stylesheet.color_for(front.classes)

        # Suit glyphs at their percentage offsets
        glyph_ratio = TYPOGRAPHY.ACE_GLYPH_RATIO if self.widget.rank.is_ace else TYPOGRAPHY.GLYPH_RATIO
        glyph_font = self._font(int(height * glyph_ratio))
        symbols = front.find_all(SYMBOL_CLASS)
        for symbol in symbols:
            left = parse_percent(symbol.style.get("left", "0%"))
            top = parse_percent(symbol.style.get("top", "0%"))
            glyph = glyph_font.render(symbol.text_content, True, color)
            surface.blit(glyph, (int(width * left / 100), int(height * top / 100)))

        rank_node = front.find(RANK_CLASS)
        if rank_node is None:
            return surface

        lines = text_lines(rank_node)

        # Court cards have no grid: large rank token in the middle
        if self.widget.is_face() and not symbols:
            center_font = self._font(int(height * TYPOGRAPHY.COURT_RATIO))
            center = center_font.render(lines[0], True, color)
            surface.blit(center, center.get_rect(center=(width // 2, height // 2)))

        # Corner index, top-left and rotated bottom-right
        font = self._font(int(height * TYPOGRAPHY.RANK_RATIO))
        margin = TYPOGRAPHY.CORNER_MARGIN
        offset = margin
        for line in lines:
            text = font.render(line, True, color)
            surface.blit(text, (margin, offset))

            flipped_text = pygame.transform.rotate(text, 180)
            surface.blit(
                flipped_text,
                (
                    width - margin - flipped_text.get_width(),
                    height - offset - flipped_text.get_height(),
                ),
            )
            offset += font.get_linesize() - 4

        return surface

    def _render_back(self, width: int, height: int) -> pygame.Surface:
        """Render the face-down side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)

        rect = pygame.Rect(0, 0, width, height)
        radius = self.size.corner_radius
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)
        pygame.draw.rect(
            surface, COLORS.CARD_BLACK, rect, width=self.size.border_width, border_radius=radius
        )

        inner_rect = rect.inflate(-24, -24)
        pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, inner_rect, border_radius=radius // 2)

        return surface

    def render(self) -> pygame.Surface:
        """Render the card as currently presented.

        Raises:
            InvalidStateError: If the widget is not built
        """
        root = self.widget.visual_root
        if root is None:
            raise InvalidStateError(f"Cannot render {self.widget.card}: card is not built")

        if self._card_surface is not None and not self._needs_redraw:
            return self._card_surface

        width, height = self.size.size
        if FLIPPED_CLASS in root.class_name.split():
            surface = self._render_back(width, height)
        else:
            front = root.find(FRONT_CLASS)
            if front is None:
                raise InvalidStateError(f"{self.widget.card} has no front face")
            surface = self._render_front(front, width, height)

        self._card_surface = surface
        self._needs_redraw = False
        return surface

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the card centered on its position.

        Args:
            surface: Pygame surface to draw on
        """
        card_surface = self.render()
        card_rect = card_surface.get_rect(center=(int(self.x), int(self.y)))
        surface.blit(card_surface, card_rect)
