"""Immediate-mode 2D drawing on an OpenGL context.

`GLCanvas` offers the handful of primitives the game needs (plain and
gradient rectangles, rounded rectangles, circles, a glow setting and a global
alpha) in playfield units. `begin_frame()` sets up an orthographic projection
in drawable pixels and applies the playfield scale, so callers never deal
with window size.

Geometry and color helpers are plain numpy/colorsys functions and don't need a
GL context.
"""

from __future__ import annotations

import colorsys
from typing import Optional, Protocol, Sequence, Tuple

import numpy as np

Color = Tuple[float, float, float, float]

_CIRCLE_SEGMENTS = 20
_CORNER_SEGMENTS = 6
_GLOW_LAYERS = 4


class Canvas(Protocol):
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...
    def fill_gradient_rect(
        self, x: float, y: float, w: float, h: float, start: Color, end: Color, *, vertical: bool = True
    ) -> None: ...
    def fill_round_rect(
        self, x: float, y: float, w: float, h: float, radius: float, top: Color, bottom: Color
    ) -> None: ...
    def stroke_round_rect(
        self, x: float, y: float, w: float, h: float, radius: float, color: Color, width: float = 1.0
    ) -> None: ...
    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...
    def set_glow(self, color: Optional[Color], blur: float = 0.0) -> None: ...
    def set_alpha(self, alpha: float) -> None: ...
    def draw_texture(self, tex_id: int, x: float, y: float, w: float, h: float) -> None: ...


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def hsla(hue: float, saturation: float, lightness: float, alpha: float) -> Color:
    """CSS-style hsla() to an RGBA tuple. Hue in degrees, the rest 0..1."""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return (r, g, b, max(0.0, min(1.0, alpha)))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    out = np.asarray(a, dtype=float) * (1.0 - t) + np.asarray(b, dtype=float) * t
    return tuple(float(c) for c in out)


def circle_table(segments: int = _CIRCLE_SEGMENTS) -> np.ndarray:
    """Unit circle as an (n + 1, 2) array, closed (first point repeated)."""
    ang = np.linspace(0.0, 2.0 * np.pi, segments + 1)
    return np.stack([np.cos(ang), np.sin(ang)], axis=1)


def rounded_rect_points(
    x: float, y: float, w: float, h: float, radius: float, segments: int = _CORNER_SEGMENTS
) -> np.ndarray:
    """Outline of a rounded rectangle, clockwise from the top-left corner arc.

    The radius is clamped to half the shorter side.
    """
    r = max(0.0, min(radius, w / 2.0, h / 2.0))
    corners = (
        (x + r, y + r, np.pi, 1.5 * np.pi),  # top-left
        (x + w - r, y + r, 1.5 * np.pi, 2.0 * np.pi),  # top-right
        (x + w - r, y + h - r, 0.0, 0.5 * np.pi),  # bottom-right
        (x + r, y + h - r, 0.5 * np.pi, np.pi),  # bottom-left
    )
    parts = []
    for cx, cy, a0, a1 in corners:
        ang = np.linspace(a0, a1, segments + 1)
        parts.append(np.stack([cx + np.cos(ang) * r, cy + np.sin(ang) * r], axis=1))
    return np.concatenate(parts, axis=0)


# ---------------------------------------------------------------------------
# OpenGL implementation
# ---------------------------------------------------------------------------
class GLCanvas:  # pragma: no cover - visual
    """Canvas backed by the legacy fixed-function pipeline.

    Requires an active OpenGL context (see `core.engine.Engine`).
    """

    def __init__(self) -> None:
        self._glow: Optional[Color] = None
        self._glow_blur = 0.0
        self._alpha = 1.0
        self._circle = circle_table()

    # --------------------------- frame ---------------------------------
    def begin_frame(
        self,
        drawable_size: Tuple[int, int],
        offset: Tuple[float, float],
        scale: Tuple[float, float],
        clear_color: Color,
    ) -> None:
        from OpenGL.GL import (
            glViewport,
            glClearColor,
            glClear,
            glMatrixMode,
            glLoadIdentity,
            glOrtho,
            glTranslatef,
            glScalef,
            glEnable,
            glDisable,
            glBlendFunc,
            GL_COLOR_BUFFER_BIT,
            GL_PROJECTION,
            GL_MODELVIEW,
            GL_BLEND,
            GL_SRC_ALPHA,
            GL_ONE_MINUS_SRC_ALPHA,
            GL_DEPTH_TEST,
            GL_TEXTURE_2D,
        )

        dw, dh = drawable_size
        glViewport(0, 0, int(dw), int(dh))
        glClearColor(*clear_color)
        glClear(GL_COLOR_BUFFER_BIT)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, dw, dh, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glTranslatef(offset[0], offset[1], 0.0)
        glScalef(scale[0], scale[1], 1.0)

        glDisable(GL_DEPTH_TEST)
        glDisable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        self._glow = None
        self._glow_blur = 0.0
        self._alpha = 1.0

    # --------------------------- state ---------------------------------
    def set_glow(self, color: Optional[Color], blur: float = 0.0) -> None:
        self._glow = color if blur > 0 else None
        self._glow_blur = max(0.0, float(blur))

    def set_alpha(self, alpha: float) -> None:
        self._alpha = max(0.0, min(1.0, float(alpha)))

    def _color(self, c: Sequence[float]) -> None:
        from OpenGL.GL import glColor4f

        glColor4f(c[0], c[1], c[2], c[3] * self._alpha)

    # --------------------------- glow ----------------------------------
    def _draw_glow_rect(self, x: float, y: float, w: float, h: float) -> None:
        from OpenGL.GL import glBegin, glEnd, glVertex2f, GL_QUADS

        if self._glow is None:
            return
        r, g, b, a = self._glow
        step = self._glow_blur / _GLOW_LAYERS
        for i in range(_GLOW_LAYERS, 0, -1):
            pad = step * i
            self._color((r, g, b, a * 0.12))
            glBegin(GL_QUADS)
            glVertex2f(x - pad, y - pad)
            glVertex2f(x + w + pad, y - pad)
            glVertex2f(x + w + pad, y + h + pad)
            glVertex2f(x - pad, y + h + pad)
            glEnd()

    # --------------------------- shapes --------------------------------
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.fill_gradient_rect(x, y, w, h, color, color)

    def fill_gradient_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        start: Color,
        end: Color,
        *,
        vertical: bool = True,
    ) -> None:
        from OpenGL.GL import glBegin, glEnd, glVertex2f, GL_QUADS

        self._draw_glow_rect(x, y, w, h)
        if vertical:
            tl, tr, br, bl = start, start, end, end
        else:
            tl, tr, br, bl = start, end, end, start
        glBegin(GL_QUADS)
        self._color(tl)
        glVertex2f(x, y)
        self._color(tr)
        glVertex2f(x + w, y)
        self._color(br)
        glVertex2f(x + w, y + h)
        self._color(bl)
        glVertex2f(x, y + h)
        glEnd()

    def fill_round_rect(
        self, x: float, y: float, w: float, h: float, radius: float, top: Color, bottom: Color
    ) -> None:
        from OpenGL.GL import glBegin, glEnd, glVertex2f, GL_TRIANGLE_FAN

        pts = rounded_rect_points(x, y, w, h, radius)
        glBegin(GL_TRIANGLE_FAN)
        self._color(lerp_color(top, bottom, 0.5))
        glVertex2f(x + w / 2.0, y + h / 2.0)
        for px, py in pts:
            self._color(lerp_color(top, bottom, (py - y) / h if h else 0.0))
            glVertex2f(px, py)
        px, py = pts[0]
        self._color(lerp_color(top, bottom, (py - y) / h if h else 0.0))
        glVertex2f(px, py)
        glEnd()

    def stroke_round_rect(
        self, x: float, y: float, w: float, h: float, radius: float, color: Color, width: float = 1.0
    ) -> None:
        from OpenGL.GL import glBegin, glEnd, glVertex2f, glLineWidth, GL_LINE_LOOP

        glLineWidth(max(1.0, float(width)))
        self._color(color)
        glBegin(GL_LINE_LOOP)
        for px, py in rounded_rect_points(x, y, w, h, radius):
            glVertex2f(px, py)
        glEnd()
        glLineWidth(1.0)

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        from OpenGL.GL import glBegin, glEnd, glVertex2f, GL_TRIANGLE_FAN

        if radius <= 0:
            return
        self._color(color)
        glBegin(GL_TRIANGLE_FAN)
        glVertex2f(x, y)
        for cx, cy in self._circle:
            glVertex2f(x + cx * radius, y + cy * radius)
        glEnd()

    def draw_texture(self, tex_id: int, x: float, y: float, w: float, h: float) -> None:
        from OpenGL.GL import (
            glBindTexture,
            glEnable,
            glDisable,
            glBegin,
            glEnd,
            glTexCoord2f,
            glVertex2f,
            GL_TEXTURE_2D,
            GL_QUADS,
        )

        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        self._color((1.0, 1.0, 1.0, 1.0))
        glBegin(GL_QUADS)
        # Surfaces are uploaded flipped, so v runs bottom-up.
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)


__all__ = [
    "Color",
    "Canvas",
    "hsla",
    "lerp_color",
    "circle_table",
    "rounded_rect_points",
    "GLCanvas",
]
