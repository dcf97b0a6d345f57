"""Integer points in 2D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Point:
    """A mutable point with integer coordinates."""

    x: int = 0
    y: int = 0

    ORIGIN: ClassVar[Point]

    def set(self, x: int | Point, y: int | None = None) -> None:
        """Set both components, either from two integers or from another point."""
        if isinstance(x, Point):
            if y is not None:
                raise TypeError("y must not be given when setting from a point")
            self.x, self.y = x.x, x.y
            return
        if y is None:
            raise TypeError("y is required when x is an integer")
        self.x, self.y = x, y

    def is_origin(self) -> bool:
        """Return True if both components are zero."""
        return self.x == 0 and self.y == 0

    def __str__(self) -> str:
        return f"{{ {self.x}, {self.y} }}"

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self


Point.ORIGIN = Point(0, 0)