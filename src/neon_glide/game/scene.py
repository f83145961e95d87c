"""The Neon Glide scene: input, simulation session and drawing in one place.

The scene works without a canvas (nothing is drawn and, without a scheduler,
no frames are ticked), which keeps it usable in tests.
"""

from __future__ import annotations

from typing import Optional, Tuple

from neon_glide.config import CLEAR_COLOR
from neon_glide.core.frame_loop import FrameScheduler
from neon_glide.core.scene import Scene
from neon_glide.game.input import InputMapper
from neon_glide.game.session import GameSession
from neon_glide.render.pipeline import RenderPipeline
from neon_glide.render.surface import SurfaceSizer
from neon_glide.ui.flash_overlay import FlashOverlay
from neon_glide.ui.hud import HUD


class GlideScene(Scene):
    def __init__(
        self,
        session: Optional[GameSession] = None,
        *,
        store=None,
        scheduler: Optional[FrameScheduler] = None,
        sizer: Optional[SurfaceSizer] = None,
        rng=None,
    ) -> None:
        super().__init__()
        self.sizer = sizer or SurfaceSizer()
        self.session = session or GameSession(store, rng=rng, scheduler=scheduler)
        self.input = InputMapper(self.sizer)
        self.pipeline = RenderPipeline()
        self.flash_overlay = FlashOverlay()
        self.canvas = None
        self.hud: Optional[HUD] = None
        self._text = None
        self.updaters.append(self.session.flash.advance)

    def attach_canvas(self, canvas, text=None) -> None:
        self.canvas = canvas
        self._text = text
        self.hud = HUD(text) if text is not None else None

    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        for intent in self.input.translate(event, running=self.session.running):
            self.session.submit(intent)

    def resize(
        self,
        window_size: Optional[Tuple[float, float]],
        drawable_size: Optional[Tuple[float, float]] = None,
    ) -> None:
        before = self.sizer.metrics
        after = self.sizer.resize(window_size, drawable_size)
        if after is before:
            print(f"[Scene] Ignoring window size {window_size}; keeping last size")

    # ------------------------------------------------------------------
    def render(self, now_ms: float) -> None:  # pragma: no cover - visual
        if self.canvas is None:
            return
        m = self.sizer.metrics
        scale = self.sizer.scale()
        self.canvas.begin_frame(m.drawable_size, self.sizer.offset(), scale, CLEAR_COLOR)
        self.pipeline.draw(self.canvas, self.session, now_ms)
        if self.hud is not None:
            self.hud.draw(self.canvas, self.session, min(scale))
        self.flash_overlay.draw(self.canvas, self.session.flash)

    def close(self) -> None:
        self.session.stop()
        if self._text is not None:
            self._text.release()
            self._text = None
