"""Decorative particle bursts with a bounded, drop-oldest collection.

Two burst shapes exist:
- spawn bursts: a few cyan to violet sparks kicked upward from a new obstacle,
- impact bursts: a ring of magenta sparks scattered around the player.

`ParticleBuffer` holds at most `capacity` particles. Adding beyond that drops
the oldest entries first, so the newest burst is always kept whole.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional

import numpy as np

from neon_glide.config import (
    BASE_HEIGHT,
    MAX_PARTICLES,
    PARTICLE_EXIT_MARGIN,
    IMPACT_PARTICLES,
)
from neon_glide.game.entities import Obstacle, Particle
from neon_glide.game.integrator import integrate_particles


class ParticleBuffer:
    """Ordered particle collection capped at `capacity` (oldest evicted)."""

    def __init__(self, capacity: int = MAX_PARTICLES) -> None:
        self.capacity = int(capacity)
        self._items: Deque[Particle] = deque(maxlen=self.capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Particle:
        return self._items[index]

    def extend(self, particles: Iterable[Particle]) -> None:
        self._items.extend(particles)

    def keep_if(self, pred) -> None:
        """Drop particles failing `pred`, keeping the order of the rest."""
        kept = [p for p in self._items if pred(p)]
        self._items = deque(kept, maxlen=self.capacity)

    def clear(self) -> None:
        self._items.clear()


class ParticleEngine:
    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        *,
        capacity: int = MAX_PARTICLES,
        bottom: float = BASE_HEIGHT + PARTICLE_EXIT_MARGIN,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.particles = ParticleBuffer(capacity)
        self.bottom = bottom

    def __len__(self) -> int:
        return len(self.particles)

    # --------------------------- bursts ---------------------------------
    def burst_on_spawn(self, obstacle: Obstacle) -> List[Particle]:
        rng = self.rng
        count = int(rng.integers(2, 5))
        base_hue = 180.0 + rng.random() * 100.0
        cx = obstacle.x + obstacle.width / 2
        radius = 2.0 + rng.random(count) * 2.0
        vx = (rng.random(count) - 0.5) * 60.0
        vy = -30.0 - rng.random(count) * 40.0
        hue = base_hue + rng.random(count) * 40.0
        burst = [
            Particle(
                x=cx,
                y=obstacle.y,
                radius=float(radius[i]),
                vx=float(vx[i]),
                vy=float(vy[i]),
                hue=float(hue[i]),
            )
            for i in range(count)
        ]
        self.particles.extend(burst)
        return burst

    def burst_on_impact(self, x: float, y: float, count: int = IMPACT_PARTICLES) -> List[Particle]:
        rng = self.rng
        px = x + (rng.random(count) - 0.5) * 40.0
        py = y + (rng.random(count) - 0.5) * 40.0
        radius = 3.0 + rng.random(count) * 4.0
        vx = (rng.random(count) - 0.5) * 200.0
        vy = (rng.random(count) - 0.5) * 200.0
        hue = 320.0 + rng.random(count) * 40.0
        burst = [
            Particle(
                x=float(px[i]),
                y=float(py[i]),
                radius=float(radius[i]),
                vx=float(vx[i]),
                vy=float(vy[i]),
                hue=float(hue[i]),
            )
            for i in range(count)
        ]
        self.particles.extend(burst)
        return burst

    # --------------------------- per frame ------------------------------
    def update(self, dt: float) -> None:
        """Advance every particle, then drop dead or off-screen ones."""
        integrate_particles(self.particles, dt)
        self.prune()

    def prune(self) -> None:
        bottom = self.bottom
        self.particles.keep_if(lambda p: p.life > 0 and p.y < bottom)

    def clear(self) -> None:
        self.particles.clear()


__all__ = ["ParticleBuffer", "ParticleEngine"]
