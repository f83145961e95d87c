"""Plain data for the things that live on the playfield.

All coordinates are playfield units (see `config.BASE_WIDTH`/`BASE_HEIGHT`)
with the origin at the top-left and y growing downwards.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterator, Tuple

from neon_glide.config import (
    BASE_WIDTH,
    BASE_HEIGHT,
    PLAYER_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_BOTTOM_GAP,
)

Rect = Tuple[float, float, float, float]


@dataclass
class Player:
    x: float = BASE_WIDTH / 2 - PLAYER_WIDTH / 2
    y: float = BASE_HEIGHT - PLAYER_HEIGHT - PLAYER_BOTTOM_GAP
    vx: float = 0.0
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    def reset(self) -> None:
        self.x = BASE_WIDTH / 2 - self.width / 2
        self.y = BASE_HEIGHT - self.height - PLAYER_BOTTOM_GAP
        self.vx = 0.0


@dataclass
class Obstacle:
    id: int
    x: float
    y: float
    width: float
    height: float
    speed: float  # units per second, downwards

    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)


@dataclass
class Particle:
    x: float
    y: float
    radius: float
    vx: float
    vy: float
    hue: float
    life: float = 1.0

    @property
    def alive(self) -> bool:
        return self.life > 0


class IdCounter:
    """Monotonic obstacle ids, one counter per session."""

    def __init__(self, start: int = 1) -> None:
        self._it: Iterator[int] = itertools.count(start)

    def next(self) -> int:
        return next(self._it)


__all__ = ["Rect", "Player", "Obstacle", "Particle", "IdCounter"]
