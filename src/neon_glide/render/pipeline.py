"""Per-frame drawing of the playfield.

Draw order is background, lane stripes, obstacles, particles, player. The
pipeline only reads the session; the only input besides entity state is the
wall-clock time used for the pulsing highlight on the player.
"""

from __future__ import annotations

import math

from neon_glide.config import (
    BASE_WIDTH,
    BASE_HEIGHT,
    BACKGROUND_TOP,
    BACKGROUND_BOTTOM,
    LANE_COUNT,
    LANE_ALPHA,
    LANE_EVEN,
    LANE_ODD,
    OBSTACLE_LEFT,
    OBSTACLE_RIGHT,
    OBSTACLE_STRIP,
    OBSTACLE_GLOW,
    PLAYER_TOP,
    PLAYER_BOTTOM,
    PLAYER_BORDER,
    PLAYER_MARK,
    PLAYER_GLOW,
)
from neon_glide.render.canvas import Canvas, hsla

PLAYER_RADIUS = 18.0
STRIP_HEIGHT = 6.0
MARK_SIZE = (6.0, 12.0)


def pulse_glow(now_ms: float) -> float:
    """Glow size of the player's highlight marks at wall time `now_ms`."""
    return math.sin(now_ms / 150.0) * 4.0 + 6.0


class RenderPipeline:
    def __init__(self, width: float = BASE_WIDTH, height: float = BASE_HEIGHT) -> None:
        self.width = float(width)
        self.height = float(height)

    def draw(self, canvas: Canvas, session, now_ms: float) -> None:
        self.draw_background(canvas)
        self.draw_lanes(canvas)
        for o in session.obstacles:
            self.draw_obstacle(canvas, o)
        self.draw_particles(canvas, session.particles)
        self.draw_player(canvas, session.player, now_ms)

    # ------------------------------------------------------------------
    def draw_background(self, canvas: Canvas) -> None:
        canvas.fill_gradient_rect(
            0.0, 0.0, self.width, self.height, BACKGROUND_TOP, BACKGROUND_BOTTOM
        )

    def draw_lanes(self, canvas: Canvas) -> None:
        canvas.set_alpha(LANE_ALPHA)
        lane_w = self.width / LANE_COUNT
        for i in range(LANE_COUNT):
            color = LANE_EVEN if i % 2 == 0 else LANE_ODD
            canvas.fill_rect(lane_w * i, 0.0, self.width / (LANE_COUNT * 2), self.height, color)
        canvas.set_alpha(1.0)

    def draw_obstacle(self, canvas: Canvas, o) -> None:
        canvas.fill_gradient_rect(
            o.x, o.y, o.width, o.height, OBSTACLE_LEFT, OBSTACLE_RIGHT, vertical=False
        )
        canvas.set_glow(OBSTACLE_GLOW, 8.0)
        canvas.fill_rect(o.x, o.y + o.height, o.width, STRIP_HEIGHT, OBSTACLE_STRIP)
        canvas.set_glow(None)

    def draw_particles(self, canvas: Canvas, particles) -> None:
        for p in particles:
            canvas.fill_circle(p.x, p.y, p.radius, hsla(p.hue, 0.9, 0.7, p.life))

    def draw_player(self, canvas: Canvas, player, now_ms: float) -> None:
        x, y, w, h = player.rect()
        canvas.fill_round_rect(x, y, w, h, PLAYER_RADIUS, PLAYER_TOP, PLAYER_BOTTOM)
        canvas.stroke_round_rect(x, y, w, h, PLAYER_RADIUS, PLAYER_BORDER, 2.0)

        mw, mh = MARK_SIZE
        canvas.set_glow(PLAYER_GLOW, pulse_glow(now_ms))
        canvas.fill_rect(x + 12.0, y + 20.0, mw, mh, PLAYER_MARK)
        canvas.fill_rect(x + w - 18.0, y + 20.0, mw, mh, PLAYER_MARK)
        canvas.set_glow(None)


__all__ = ["pulse_glow", "RenderPipeline"]
