"""Common floating point helpers and constants."""

from __future__ import annotations

import random
from typing import TypeVar

T = TypeVar("T", int, float)

RAND_MAX = 32767
"""Largest value produced by the engine's integer random source."""

PI = 3.14159265359
PI_OVER2 = PI / 2
PI_OVER4 = PI / 4
INVERSE_PI = 1.0 / PI
NORMALIZE_PI_OVER4 = 0.70710678119
INVERSE_180 = 1.0 / 180


def lerp(start: float, end: float, value: float) -> float:
    """Linearly interpolate between start and end, clamping value to [0, 1]."""
    if value < 0:
        return start
    if value > 1:
        return end
    return start + (end - start) * value


def random_int(minimum: int = 0, maximum: int = RAND_MAX) -> int:
    """Return a random integer between minimum and maximum, both inclusive."""
    if maximum < minimum:
        raise ValueError("maximum must not be less than minimum")
    return random.randint(minimum, maximum)


def random_float() -> float:
    """Return a random number between zero and one, both inclusive."""
    return random.randint(0, RAND_MAX) / RAND_MAX


def clamp(minimum: T, maximum: T, value: T) -> T:
    """Restrict value to the range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def is_in_range(minimum: T, maximum: T, value: T) -> bool:
    """Return True if value lies within [minimum, maximum]."""
    return minimum <= value <= maximum


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI * INVERSE_180


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180 * INVERSE_PI