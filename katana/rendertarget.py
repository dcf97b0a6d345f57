"""Textures that can be drawn into in place of the display."""

from __future__ import annotations

from typing import Any, ClassVar

import pygame

from .texture import Texture


class RenderTarget(Texture):
    """A texture that rendering can be redirected to."""

    _display: ClassVar[pygame.Surface | None] = None
    _target: ClassVar[RenderTarget | None] = None

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.set_surface(pygame.Surface((width, height), pygame.SRCALPHA))

    @staticmethod
    def set_display(display: pygame.Surface | None) -> None:
        """Set the display surface drawn to when no target is selected."""
        RenderTarget._display = display

    @staticmethod
    def set(target: RenderTarget | None) -> None:
        """Select the target to draw to; None selects the display."""
        RenderTarget._target = target

    @staticmethod
    def current() -> pygame.Surface | None:
        """Return the surface that drawing currently goes to."""
        if RenderTarget._target is not None:
            return RenderTarget._target.surface
        return RenderTarget._display

    def load(self, path: str, manager: Any) -> None:
        """Render targets are created, not loaded; this does nothing."""