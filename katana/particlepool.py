"""A pool of reusable particles."""

from __future__ import annotations

from typing import Any, Protocol


class _Particle(Protocol):
    is_active: bool


class _ParticleUpdater(Protocol):
    def update(self, particle: Any, game_time: Any) -> None: ...


class _ParticleRenderer(Protocol):
    def draw(self, particle: Any, sprite_batch: Any) -> None: ...


class ParticlePool:
    """Updates and draws active particles and hands out inactive ones for reuse."""

    def __init__(self, updater: _ParticleUpdater, renderer: _ParticleRenderer) -> None:
        self._particles: list[_Particle] = []
        self._updater = updater
        self._renderer = renderer

    def _active(self):
        return (p for p in self._particles if p.is_active)

    def update(self, game_time: Any) -> None:
        """Update every active particle."""
        for particle in self._active():
            self._updater.update(particle, game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw every active particle."""
        for particle in self._active():
            self._renderer.draw(particle, sprite_batch)

    def get_inactive_particle(self) -> _Particle | None:
        """Return the first inactive particle, or None if all are in use."""
        return next((p for p in self._particles if not p.is_active), None)

    def add_particle(self, particle: _Particle) -> None:
        """Add a particle to the pool."""
        self._particles.append(particle)