"""Timing and framing values for sprite-sheet animations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .resource import Resource, split, strip_comment

_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")
_INT = re.compile(r"\s*[+-]?\d+")


def _leading_float(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(0)) if match else 0.0


def _leading_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(0)) if match else 0


@dataclass
class Frame:
    """The position and size of one frame within a sprite sheet."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Animation(Resource):
    """Steps through the frames of a sprite sheet over time."""

    cloneable = True

    def __init__(self) -> None:
        super().__init__()
        self.frames: list[Frame] = []
        self.texture: Any = None
        self.seconds_per_frame = 0.6
        self._current_frame_time = self.seconds_per_frame
        self._current_index = 0
        self._loop_counter = -1
        self._is_playing = True

    @property
    def current_index(self) -> int:
        """Index of the frame being shown."""
        return self._current_index

    @property
    def is_playing(self) -> bool:
        """Whether the animation is advancing."""
        return self._is_playing

    @property
    def current_frame(self) -> Frame:
        """The frame being shown."""
        return self.frames[self._current_index]

    def update(self, game_time: Any) -> None:
        """Advance the animation by the game time's elapsed seconds."""
        if not self._is_playing:
            return
        self._current_frame_time -= game_time.elapsed_time
        if self._current_frame_time > 0:
            return
        self._current_index += 1
        self._current_frame_time = self.seconds_per_frame
        if self._current_index == len(self.frames):
            if self._loop_counter > 0:
                self._loop_counter -= 1
                self._current_index = 0
            elif self._loop_counter == 0:
                self.stop()
            else:
                self._current_index = 0

    def load(self, path: str, manager: Any) -> None:
        """Load an animation file.

        The first significant line names the sprite sheet, which is loaded
        through ``manager.load(Texture, name)``; the second gives the seconds
        per frame; each following line is a frame as ``x,y,width,height``.
        ``//`` comments and blank lines are ignored.
        """
        from .texture import Texture

        loading_sheet = True
        loading_frame_time = True
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = strip_comment(raw.rstrip("\r\n"))
                if not line:
                    continue
                if loading_sheet:
                    self.texture = manager.load(Texture, line)
                    loading_sheet = False
                elif loading_frame_time:
                    self.seconds_per_frame = _leading_float(line)
                    loading_frame_time = False
                else:
                    elements = split(line, ",")
                    if len(elements) < 4:
                        raise ValueError(
                            f"{path}: a frame needs four values, got {line!r}"
                        )
                    x, y, width, height = (_leading_int(e) for e in elements[:4])
                    self.frames.append(Frame(x, y, width, height))

    def clone(self) -> Animation:
        """Return an independent animation sharing the texture and frames."""
        copy = Animation()
        copy.texture = self.texture
        copy.frames = list(self.frames)
        copy.seconds_per_frame = self.seconds_per_frame
        copy._is_playing = self._is_playing
        copy._current_frame_time = self._current_frame_time
        copy._current_index = self._current_index
        return copy

    def set_current_frame(self, index: int) -> None:
        """Jump to a frame; an index out of range is ignored."""
        if 0 <= index < len(self.frames):
            self._current_index = index
            self._current_frame_time = self.seconds_per_frame

    def play(self) -> None:
        """Start or resume the animation."""
        self._is_playing = True

    def pause(self) -> None:
        """Pause the animation on its current frame."""
        self._is_playing = False

    def stop(self) -> None:
        """Pause the animation and return to the first frame."""
        self.pause()
        self.set_current_frame(0)

    def set_loop_count(self, loops: int = -1) -> None:
        """Set how many more times the animation loops; a negative count loops forever."""
        self._loop_counter = loops