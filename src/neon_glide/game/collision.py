"""Axis-aligned overlap tests between the player and obstacles.

Overlap is strict on all four sides: rectangles that only share an edge do not
collide.
"""

from __future__ import annotations

from typing import Iterable, Optional

from neon_glide.game.entities import Obstacle, Rect


def rects_overlap(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def first_collision(player_rect: Rect, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
    """Return the first obstacle overlapping `player_rect`, else None."""
    for o in obstacles:
        if rects_overlap(player_rect, o.rect()):
            return o
    return None


def collides(player_rect: Rect, obstacles: Iterable[Obstacle]) -> bool:
    return first_collision(player_rect, obstacles) is not None


__all__ = ["rects_overlap", "first_collision", "collides"]
