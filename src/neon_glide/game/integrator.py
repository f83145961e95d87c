"""Motion integration for the player, obstacles and particles.

Every function mutates only the entities it is given, so the simulation can be
stepped without a window or GL context.
"""

from __future__ import annotations

from typing import Iterable

from neon_glide.config import (
    BASE_WIDTH,
    PLAYER_MARGIN,
    PLAYER_DAMPING,
    PLAYER_GAIN,
    PARTICLE_DECAY,
)
from neon_glide.game.entities import Player, Obstacle, Particle


def player_bounds(player: Player) -> tuple[float, float]:
    """Return the (min_x, max_x) range the player's left edge may occupy."""
    return PLAYER_MARGIN, BASE_WIDTH - player.width - PLAYER_MARGIN


def integrate_player(
    player: Player,
    target_x: float,
    dt: float,
    *,
    damping: float = PLAYER_DAMPING,
    gain: float = PLAYER_GAIN,
) -> None:
    """Steer the player toward `target_x` (playfield units).

    Velocity is damped once per call, not per second, so the feel depends on
    frame rate. Position moves by the whole velocity each frame and is then
    clamped to the playfield.
    """
    diff = target_x - player.center_x
    player.vx = player.vx * damping + diff * gain * dt
    player.x += player.vx
    lo, hi = player_bounds(player)
    player.x = max(lo, min(hi, player.x))


def integrate_obstacles(obstacles: Iterable[Obstacle], dt: float) -> None:
    for o in obstacles:
        o.y += o.speed * dt


def integrate_particles(
    particles: Iterable[Particle], dt: float, *, decay: float = PARTICLE_DECAY
) -> None:
    for p in particles:
        p.x += p.vx * dt
        p.y += p.vy * dt
        p.life -= decay * dt


__all__ = [
    "player_bounds",
    "integrate_player",
    "integrate_obstacles",
    "integrate_particles",
]
