"""Obstacle spawning with escalating difficulty.

Each spawn creates one obstacle just above the visible top edge, kicks a small
spark burst off it, then shortens the spawn interval (never below the floor)
and raises the base speed used for the next obstacle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from neon_glide.config import (
    BASE_WIDTH,
    SPAWN_INTERVAL_START,
    SPAWN_INTERVAL_FLOOR,
    SPAWN_INTERVAL_DECAY,
    BASE_SPEED_START,
    BASE_SPEED_STEP,
    DIFFICULTY_SPEED_SCALE,
    OBSTACLE_MIN_WIDTH,
    OBSTACLE_WIDTH_RANGE,
    OBSTACLE_MIN_HEIGHT,
    OBSTACLE_HEIGHT_RANGE,
    OBSTACLE_MIN_SPEED,
    OBSTACLE_SPEED_JITTER,
)
from neon_glide.game.entities import IdCounter, Obstacle
from neon_glide.game.particles import ParticleEngine


@dataclass
class Difficulty:
    """Spawn timing and speed state carried across one run."""

    last_spawn: float = 0.0  # ms, run clock
    spawn_interval: float = SPAWN_INTERVAL_START  # ms
    base_speed: float = BASE_SPEED_START

    def reset(self) -> None:
        self.last_spawn = 0.0
        self.spawn_interval = SPAWN_INTERVAL_START
        self.base_speed = BASE_SPEED_START

    def escalate(self, now: float) -> None:
        self.last_spawn = now
        self.spawn_interval = max(
            SPAWN_INTERVAL_FLOOR, self.spawn_interval * SPAWN_INTERVAL_DECAY
        )
        self.base_speed += BASE_SPEED_STEP


class Spawner:
    def __init__(
        self,
        particles: ParticleEngine,
        rng: Optional[np.random.Generator] = None,
        *,
        ids: Optional[IdCounter] = None,
        field_width: float = BASE_WIDTH,
    ) -> None:
        self.particles = particles
        self.rng = rng if rng is not None else particles.rng
        self.ids = ids or IdCounter()
        self.field_width = float(field_width)

    def due(self, now: float, difficulty: Difficulty) -> bool:
        return now - difficulty.last_spawn > difficulty.spawn_interval

    def make_obstacle(self, difficulty_boost: float) -> Obstacle:
        rng = self.rng
        width = OBSTACLE_MIN_WIDTH + rng.random() * OBSTACLE_WIDTH_RANGE
        x = rng.random() * (self.field_width - width)
        speed = OBSTACLE_MIN_SPEED + difficulty_boost + rng.random() * OBSTACLE_SPEED_JITTER
        height = OBSTACLE_MIN_HEIGHT + rng.random() * OBSTACLE_HEIGHT_RANGE
        return Obstacle(
            id=self.ids.next(),
            x=float(x),
            y=float(-height),
            width=float(width),
            height=float(height),
            speed=float(speed),
        )

    def maybe_spawn(
        self,
        now: float,
        difficulty: Difficulty,
        obstacles: List[Obstacle],
        *,
        running: bool = True,
    ) -> Optional[Obstacle]:
        """Spawn one obstacle into `obstacles` if the interval has elapsed.

        `now` is the run clock in milliseconds. Returns the new obstacle, or
        None when nothing was spawned (not running, or not yet due).
        """
        if not running or not self.due(now, difficulty):
            return None
        obstacle = self.make_obstacle(difficulty.base_speed * DIFFICULTY_SPEED_SCALE)
        obstacles.append(obstacle)
        self.particles.burst_on_spawn(obstacle)
        difficulty.escalate(now)
        return obstacle


__all__ = ["Difficulty", "Spawner"]
