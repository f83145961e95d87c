"""Brief white wash over the playfield when a run starts or ends."""

from __future__ import annotations

from neon_glide.config import BASE_WIDTH, BASE_HEIGHT, FLASH_OPACITY


class FlashOverlay:
    def __init__(self, opacity: float = FLASH_OPACITY, color=(1.0, 1.0, 1.0)) -> None:
        self.opacity = max(0.0, min(1.0, opacity))
        self.color = color  # RGB in 0..1

    def draw(self, canvas, flash) -> None:
        if not flash.active:
            return
        r, g, b = self.color
        canvas.fill_rect(0.0, 0.0, BASE_WIDTH, BASE_HEIGHT, (r, g, b, self.opacity))
