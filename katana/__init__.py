"""Building blocks for 2D games on pygame: sprite batching, animations, resources, menu items and helpers."""

__version__ = "0.1.0"