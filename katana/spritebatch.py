"""Batched drawing of sprites and text with sorting and blending options."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

import pygame
from pygame.math import Vector2

from .color import NAMED_COLORS, Color
from .rendertarget import RenderTarget

WHITE = NAMED_COLORS["WHITE"]


class TextAlign(Enum):
    """Horizontal alignment of drawn text relative to its position."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class SpriteSortMode(Enum):
    """How batched sprites are ordered before rendering."""

    BACK_TO_FRONT = 0
    """Lower draw depths render behind higher ones."""
    DEFERRED = 1
    """Sprites render in the order they were drawn."""
    FRONT_TO_BACK = 2
    """Higher draw depths render behind lower ones."""
    IMMEDIATE = 3
    """Sprites are not batched and render at once."""
    TEXTURE = 4
    """Sprites sharing a texture are rendered together."""


class BlendState(Enum):
    """How drawn pixels combine with those already on the target."""

    ALPHA = 0
    ADDITIVE = 1


@dataclass
class Drawable:
    """One queued sprite or string."""

    is_bitmap: bool
    source: Any
    color: Color
    x: int
    y: int
    depth: float = 0.0
    text: str = ""
    align: TextAlign = TextAlign.LEFT
    region: tuple[int, int, int, int] = (0, 0, 0, 0)
    origin: tuple[int, int] = (0, 0)
    scale: tuple[float, float] = (1.0, 1.0)
    rotation: float = 0.0
    resource_id: int = 0


Renderer = Callable[[Drawable, BlendState, Any], None]


class SurfaceRenderer:
    """Renders drawables onto a pygame surface.

    Without an explicit target, drawing goes to ``RenderTarget.current()``.
    A transformation, when given, is an ``(dx, dy)`` translation.
    """

    def __init__(self, target: pygame.Surface | None = None) -> None:
        self._target = target

    def _surface(self) -> pygame.Surface:
        surface = self._target if self._target is not None else RenderTarget.current()
        if surface is None:
            raise RuntimeError("there is no surface to draw to")
        return surface

    def __call__(
        self, drawable: Drawable, blend_state: BlendState, transformation: Any
    ) -> None:
        dx, dy = transformation if transformation is not None else (0, 0)
        flags = pygame.BLEND_RGBA_ADD if blend_state is BlendState.ADDITIVE else 0
        surface = self._surface()
        if drawable.is_bitmap:
            self._draw_bitmap(surface, drawable, dx, dy, flags)
        else:
            self._draw_text(surface, drawable, dx, dy, flags)

    @staticmethod
    def _draw_bitmap(
        surface: pygame.Surface, drawable: Drawable, dx: float, dy: float, flags: int
    ) -> None:
        texture = drawable.source
        if texture is None or texture.surface is None:
            raise RuntimeError("texture has no pixels to draw")
        source = texture.surface
        sx, sy, sw, sh = drawable.region
        rect = pygame.Rect(sx, sy, sw, sh).clip(source.get_rect())
        image = source.subsurface(rect).copy()

        rgba = drawable.color.to_rgba()
        if rgba != (255, 255, 255, 255):
            tinted = pygame.Surface(image.get_size(), pygame.SRCALPHA)
            tinted.blit(image, (0, 0))
            tinted.fill(rgba, special_flags=pygame.BLEND_RGBA_MULT)
            image = tinted

        scx, scy = drawable.scale
        size = (
            round(image.get_width() * abs(scx)),
            round(image.get_height() * abs(scy)),
        )
        if size != image.get_size():
            image = pygame.transform.scale(image, size)
        if scx < 0 or scy < 0:
            image = pygame.transform.flip(image, scx < 0, scy < 0)

        cx, cy = drawable.origin
        offset = Vector2((cx - sw / 2) * scx, (cy - sh / 2) * scy)
        degrees = math.degrees(drawable.rotation)
        if degrees:
            image = pygame.transform.rotate(image, -degrees)
            offset = offset.rotate(degrees)

        center = (drawable.x + dx - offset.x, drawable.y + dy - offset.y)
        surface.blit(image, image.get_rect(center=center), special_flags=flags)

    @staticmethod
    def _draw_text(
        surface: pygame.Surface, drawable: Drawable, dx: float, dy: float, flags: int
    ) -> None:
        font = drawable.source
        rgba = drawable.color.to_rgba()
        line_height = font.line_height
        for number, line in enumerate(drawable.text.split("\n")):
            image = font.render(line, rgba)
            x = drawable.x + dx
            if drawable.align is TextAlign.CENTER:
                x -= image.get_width() / 2
            elif drawable.align is TextAlign.RIGHT:
                x -= image.get_width()
            y = drawable.y + dy + number * line_height
            surface.blit(image, (x, y), special_flags=flags)


def _region_of(region: Any) -> tuple[int, int, int, int]:
    return (int(region.x), int(region.y), int(region.width), int(region.height))


class SpriteBatch:
    """Collects sprites and strings between ``begin`` and ``end`` and renders them."""

    def __init__(self, renderer: Renderer | None = None) -> None:
        self._renderer: Renderer = renderer if renderer is not None else SurfaceRenderer()
        self._drawables: list[Drawable] = []
        self._sort_mode = SpriteSortMode.DEFERRED
        self._blend_state = BlendState.ALPHA
        self._transformation: Any = None
        self._is_started = False

    @property
    def is_started(self) -> bool:
        """Whether a batch is open."""
        return self._is_started

    def begin(
        self,
        sort_mode: SpriteSortMode = SpriteSortMode.DEFERRED,
        blend_state: BlendState = BlendState.ALPHA,
        transformation: Any = None,
    ) -> None:
        """Open a batch with the given sorting, blending and transformation."""
        self._is_started = True
        self._sort_mode = sort_mode
        self._blend_state = blend_state
        self._transformation = transformation

    def end(self) -> None:
        """Render everything queued since ``begin`` and close the batch."""
        if self._sort_mode is not SpriteSortMode.IMMEDIATE:
            drawables = self._drawables
            if self._sort_mode is SpriteSortMode.BACK_TO_FRONT:
                drawables = sorted(drawables, key=lambda d: d.depth)
            elif self._sort_mode is SpriteSortMode.FRONT_TO_BACK:
                drawables = sorted(drawables, key=lambda d: d.depth, reverse=True)
            for drawable in drawables:
                self._render(drawable)
        self._drawables = []
        self._transformation = None
        self._is_started = False

    def _require_started(self) -> None:
        if not self._is_started:
            raise RuntimeError("begin must be called before drawing")

    def _render(self, drawable: Drawable) -> None:
        self._renderer(drawable, self._blend_state, self._transformation)

    def _submit(self, drawable: Drawable) -> None:
        if self._sort_mode is SpriteSortMode.IMMEDIATE:
            self._render(drawable)
        else:
            self._drawables.append(drawable)

    def draw_string(
        self,
        font: Any,
        text: str,
        position: Sequence[float],
        color: Color = WHITE,
        alignment: TextAlign = TextAlign.LEFT,
        draw_depth: float = 0.0,
    ) -> None:
        """Queue a string to be drawn with font at position."""
        self._require_started()
        self._submit(
            Drawable(
                is_bitmap=False,
                source=font,
                color=color,
                x=int(position[0]),
                y=int(position[1]),
                depth=draw_depth,
                text=text,
                align=alignment,
            )
        )

    def draw(
        self,
        texture: Any,
        position: Sequence[float],
        region: Any = None,
        color: Color = WHITE,
        origin: Sequence[float] = (0, 0),
        scale: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
        draw_depth: float = 0.0,
    ) -> None:
        """Queue a texture, or a region of it, to be drawn at position.

        Without a region the whole texture is drawn. Rotation is in radians.
        """
        self._require_started()
        if region is None:
            bounds = (0, 0, texture.width, texture.height)
        else:
            bounds = _region_of(region)
        self._submit(
            Drawable(
                is_bitmap=True,
                source=texture,
                color=color,
                x=int(position[0]),
                y=int(position[1]),
                depth=draw_depth,
                region=bounds,
                origin=(int(origin[0]), int(origin[1])),
                scale=(float(scale[0]), float(scale[1])),
                rotation=rotation,
                resource_id=getattr(texture, "resource_id", 0),
            )
        )

    def draw_animation(
        self,
        animation: Any,
        position: Sequence[float],
        color: Color = WHITE,
        origin: Sequence[float] = (0, 0),
        scale: Sequence[float] = (1.0, 1.0),
        rotation: float = 0.0,
        draw_depth: float = 0.0,
    ) -> None:
        """Queue the current frame of an animation to be drawn at position."""
        self.draw(
            animation.texture,
            position,
            animation.current_frame,
            color,
            origin,
            scale,
            rotation,
            draw_depth,
        )

    def settings(self) -> tuple[SpriteSortMode, BlendState, Any]:
        """Return the open batch's sort mode, blend state and transformation."""
        if not self._is_started:
            raise RuntimeError("begin must be called before the settings can be read")
        return self._sort_mode, self._blend_state, self._transformation