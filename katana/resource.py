"""Base class for managed resources and helpers for parsing resource files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


def split(line: str, delimiter: str) -> list[str]:
    """Split a line on a delimiter; a trailing empty element is dropped."""
    if not line:
        return []
    parts = line.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def trim_line(line: str) -> str:
    """Remove spaces and tabs from both ends of a line.

    A line made only of spaces and tabs is returned unchanged.
    """
    stripped = line.strip(" \t")
    return stripped if stripped else line


def strip_comment(line: str) -> str:
    """Remove a trailing ``//`` comment, trimming what remains."""
    position = line.find("//")
    if position < 0:
        return line
    return trim_line(line[:position])


class Resource(ABC):
    """A loadable asset managed by a resource manager."""

    cloneable: bool = False
    """Whether the manager should hand out clones instead of sharing this resource."""

    def __init__(self) -> None:
        self.resource_id = 0
        self.resource_manager: Any = None

    @abstractmethod
    def load(self, path: str, manager: Any) -> None:
        """Load the resource from path, raising if it cannot be loaded."""

    def clone(self) -> Resource:
        """Return a clone of the resource; stateless resources return themselves."""
        return self