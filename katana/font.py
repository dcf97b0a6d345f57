"""Fonts loaded from font files or from glyph bitmaps."""

from __future__ import annotations

from itertools import islice
from pathlib import Path
from typing import Any, ClassVar, Iterator, Sequence

import pygame

from .resource import Resource
from .texture import Texture

DEFAULT_RANGES: tuple[tuple[int, int], ...] = ((32, 126),)
"""Characters assigned to bitmap glyphs when no range has been set."""

RGBA = tuple[int, int, int, int]


def _scan_glyphs(surface: pygame.Surface) -> Iterator[pygame.Rect]:
    """Yield glyph rectangles from a bitmap whose top-left pixel is the background."""
    width, height = surface.get_size()
    if width < 2 or height < 2:
        return
    background = surface.get_at((0, 0))

    def is_bg(x: int, y: int) -> bool:
        return surface.get_at((x, y)) == background

    x = y = 0
    while True:
        while True:
            if x >= width - 1:
                x = 0
                y += 1
                if y >= height - 1:
                    return
            if (
                is_bg(x, y)
                and is_bg(x + 1, y)
                and is_bg(x, y + 1)
                and not is_bg(x + 1, y + 1)
            ):
                break
            x += 1
        glyph_width = 1
        while x + glyph_width + 1 < width and not is_bg(x + glyph_width + 1, y + 1):
            glyph_width += 1
        glyph_height = 1
        while y + glyph_height + 1 < height and not is_bg(x + 1, y + glyph_height + 1):
            glyph_height += 1
        yield pygame.Rect(x + 1, y + 1, glyph_width, glyph_height)
        x += glyph_width + 1


def _grab_glyphs(
    surface: pygame.Surface, ranges: Sequence[tuple[int, int]]
) -> dict[str, pygame.Surface]:
    codes = [code for first, last in ranges for code in range(first, last + 1)]
    rects = list(islice(_scan_glyphs(surface), len(codes)))
    if len(rects) < len(codes):
        raise ValueError(
            f"bitmap holds {len(rects)} glyphs but {len(codes)} characters were requested"
        )
    background = surface.get_at((0, 0))
    glyphs: dict[str, pygame.Surface] = {}
    for code, rect in zip(codes, rects):
        glyph = surface.subsurface(rect).copy()
        glyph.set_colorkey(background)
        glyphs[chr(code)] = glyph
    return glyphs


class Font(Resource):
    """A true-type font or a font grabbed from a glyph bitmap."""

    cloneable = False

    _font_size: ClassVar[int] = 16
    _restore_size: ClassVar[int] = 0
    _ranges: ClassVar[list[tuple[int, int]] | None] = None

    def __init__(self) -> None:
        super().__init__()
        self._font: pygame.font.Font | None = None
        self._glyphs: dict[str, pygame.Surface] | None = None

    @classmethod
    def set_load_size(cls, size: int, restore: bool = False) -> None:
        """Set the size of fonts loaded from now on.

        With restore, the current size is remembered and put back after each load.
        """
        if restore:
            cls._restore_size = cls._font_size
        cls._font_size = size

    @classmethod
    def set_character_range(cls, ranges: Sequence[tuple[int, int]]) -> None:
        """Set the inclusive character ranges used by the next bitmap font load."""
        cls._ranges = [(int(first), int(last)) for first, last in ranges]

    def load(self, path: str, manager: Any) -> None:
        """Load a font; ``.png`` files are read as glyph bitmaps through manager."""
        try:
            if ".ttf" in path:
                self._font = self._load_font_file(path)
            elif ".png" in path:
                ranges = Font._ranges or list(DEFAULT_RANGES)
                try:
                    texture = manager.load(Texture, path)
                finally:
                    Font._ranges = None
                if texture is None or texture.surface is None:
                    raise ValueError(f"could not load glyph bitmap {path!r}")
                self._glyphs = _grab_glyphs(texture.surface, ranges)
            else:
                self._font = self._load_font_file(path)
        finally:
            if Font._restore_size > 0:
                Font._font_size = Font._restore_size

    @staticmethod
    def _load_font_file(path: str) -> pygame.font.Font:
        if not Path(path).is_file():
            raise FileNotFoundError(f"no font file at {path!r}")
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(path, Font._font_size)

    def _require_loaded(self) -> None:
        if self._font is None and self._glyphs is None:
            raise RuntimeError("font is not loaded")

    @property
    def line_height(self) -> int:
        """The line height of the font in pixels."""
        self._require_loaded()
        if self._font is not None:
            return self._font.get_linesize()
        return max((g.get_height() for g in self._glyphs.values()), default=0)

    def text_width(self, text: str) -> int:
        """Return the width in pixels of text drawn in this font."""
        self._require_loaded()
        if self._font is not None:
            return self._font.size(text)[0]
        return sum(self._glyphs[c].get_width() for c in text if c in self._glyphs)

    def render(self, text: str, color: RGBA = (255, 255, 255, 255)) -> pygame.Surface:
        """Render a single line of text tinted with an 8-bit RGBA colour."""
        self._require_loaded()
        if self._font is not None:
            surface = self._font.render(text, True, color[:3])
            if color[3] < 255:
                surface.set_alpha(color[3])
            return surface
        surface = pygame.Surface(
            (self.text_width(text), self.line_height), pygame.SRCALPHA
        )
        x = 0
        for char in text:
            glyph = self._glyphs.get(char)
            if glyph is None:
                continue
            surface.blit(glyph, (x, 0))
            x += glyph.get_width()
        if tuple(color) != (255, 255, 255, 255):
            surface.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
        return surface