"""Two-dimensional textures backed by pygame surfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pygame
from pygame.math import Vector2

from .resource import Resource


class Texture(Resource):
    """A 2D grid of texels loaded from an image file."""

    cloneable = False

    def __init__(self) -> None:
        super().__init__()
        self.surface: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def load(self, path: str, manager: Any) -> None:
        """Load the image at path, raising if it cannot be read."""
        if not Path(path).is_file():
            raise FileNotFoundError(f"no image file at {path!r}")
        self.set_surface(pygame.image.load(path))

    def set_surface(self, surface: pygame.Surface | None) -> None:
        """Use surface as the texture's pixels; None leaves the texture unchanged."""
        if surface is None:
            return
        self.surface = surface
        self.width, self.height = surface.get_size()

    @property
    def size(self) -> Vector2:
        """The dimensions of the texture in pixels."""
        return Vector2(self.width, self.height)

    @property
    def center(self) -> Vector2:
        """The centre position of the texture."""
        return self.size / 2