"""Audio samples played through the pygame mixer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pygame

from .mathutil import clamp
from .resource import Resource


def _ensure_mixer() -> None:
    if pygame.mixer.get_init() is None:
        pygame.mixer.init()


class AudioSample(Resource):
    """A sound effect that can be played once or looped."""

    cloneable = True

    def __init__(self) -> None:
        super().__init__()
        self.sound: pygame.mixer.Sound | None = None
        self._looping = False
        self._volume = 1.0

    @staticmethod
    def reserve_samples(count: int) -> None:
        """Reserve count mixer channels for simultaneous playback."""
        _ensure_mixer()
        pygame.mixer.set_num_channels(count)

    def load(self, path: str, manager: Any) -> None:
        """Load the sample at path, raising if it cannot be read."""
        if not Path(path).is_file():
            raise FileNotFoundError(f"no audio file at {path!r}")
        _ensure_mixer()
        self.sound = pygame.mixer.Sound(path)

    def play(self) -> bool:
        """Start playing the sample; return False if no channel was free."""
        if self.sound is None:
            raise RuntimeError("audio sample is not loaded")
        self.sound.set_volume(self._volume)
        channel = self.sound.play(loops=-1 if self._looping else 0)
        return channel is not None

    def set_looping(self, loop: bool = True) -> None:
        """Set whether the sample repeats until stopped."""
        self._looping = loop

    @property
    def looping(self) -> bool:
        """Whether the sample repeats until stopped."""
        return self._looping

    @property
    def volume(self) -> float:
        """Playback volume, where 1.0 is normal volume."""
        return self._volume

    @volume.setter
    def volume(self, volume: float) -> None:
        self._volume = clamp(0.0, 1.0, float(volume))