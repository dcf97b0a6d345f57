"""Items shown in a menu screen."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from pygame.math import Vector2

from .color import NAMED_COLORS, Color
from .spritebatch import TextAlign


class MenuItem:
    """A selectable line of text in a menu."""

    def __init__(self, text: str = "Menu Item") -> None:
        self.text = text
        self.index = 0
        self.on_select: Callable[[], None] | None = None
        self.is_selected = False
        self.is_displayed = True
        self.font: Any = None
        self.color: Color = NAMED_COLORS["BLACK"]
        self.alpha = 1.0
        self._position = Vector2()
        self._text_offset = Vector2()
        self.menu_screen: Any = None
        self.text_align = TextAlign.LEFT

    @property
    def position(self) -> Vector2:
        """The screen position of the item."""
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = Vector2(value)

    @property
    def text_offset(self) -> Vector2:
        """Offset of the text from the item's position, e.g. for a selection effect."""
        return self._text_offset

    @text_offset.setter
    def text_offset(self, value: Sequence[float]) -> None:
        self._text_offset = Vector2(value)

    def update(self, game_time: Any) -> None:
        """Update the item; plain items have nothing to update."""

    def draw(self, sprite_batch: Any) -> None:
        """Draw the item's text if it has a font and non-empty text."""
        if self.font is not None and self.text:
            sprite_batch.draw_string(
                self.font,
                self.text,
                self.position + self.text_offset,
                self.color * self.alpha,
                self.text_align,
            )

    def select(self, menu_screen: Any) -> None:
        """Run the item's selection callback, if it has one."""
        if self.on_select is not None:
            self.on_select()