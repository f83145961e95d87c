"""Window measurement and the playfield-to-pixel transform.

The playfield is laid out like the original page: it spans the full window
width and is `min(window_height, width / BASE_WIDTH * BASE_HEIGHT)` tall,
centered vertically. Sizes are in window points; `pixel_ratio` converts them
to drawable pixels on HiDPI displays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from neon_glide.config import BASE_WIDTH, BASE_HEIGHT


@dataclass(frozen=True)
class SurfaceMetrics:
    width: float
    height: float
    left: float = 0.0
    top: float = 0.0
    pixel_ratio: float = 1.0
    window_width: float = BASE_WIDTH
    window_height: float = BASE_HEIGHT

    @property
    def drawable_size(self) -> Tuple[int, int]:
        return (
            int(round(self.window_width * self.pixel_ratio)),
            int(round(self.window_height * self.pixel_ratio)),
        )


class SurfaceSizer:
    """Keeps the last good measurement; bad measurements are ignored."""

    def __init__(self, base_width: float = BASE_WIDTH, base_height: float = BASE_HEIGHT) -> None:
        self.base_width = float(base_width)
        self.base_height = float(base_height)
        self.metrics = SurfaceMetrics(self.base_width, self.base_height)

    def measure(
        self,
        window_size: Optional[Tuple[float, float]],
        drawable_size: Optional[Tuple[float, float]] = None,
    ) -> Optional[SurfaceMetrics]:
        if not window_size:
            return None
        win_w, win_h = float(window_size[0]), float(window_size[1])
        if win_w <= 0 or win_h <= 0:
            return None
        ratio = 1.0
        if drawable_size and drawable_size[0] > 0:
            ratio = float(drawable_size[0]) / win_w
        width = win_w
        height = min(win_h, width / self.base_width * self.base_height)
        top = (win_h - height) / 2.0
        return SurfaceMetrics(
            width=width,
            height=height,
            left=0.0,
            top=top,
            pixel_ratio=ratio,
            window_width=win_w,
            window_height=win_h,
        )

    def resize(
        self,
        window_size: Optional[Tuple[float, float]],
        drawable_size: Optional[Tuple[float, float]] = None,
    ) -> SurfaceMetrics:
        m = self.measure(window_size, drawable_size)
        if m is not None:
            self.metrics = m
        return self.metrics

    def scale(self) -> Tuple[float, float]:
        """Per-axis playfield-unit to drawable-pixel scale."""
        m = self.metrics
        return (
            m.width / self.base_width * m.pixel_ratio,
            m.height / self.base_height * m.pixel_ratio,
        )

    def offset(self) -> Tuple[float, float]:
        """Top-left of the playfield in drawable pixels."""
        m = self.metrics
        return (m.left * m.pixel_ratio, m.top * m.pixel_ratio)

    def to_playfield_x(self, client_x: float) -> float:
        m = self.metrics
        return (client_x - m.left) / m.width * self.base_width


__all__ = ["SurfaceMetrics", "SurfaceSizer"]
