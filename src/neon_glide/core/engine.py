"""Window, clock and main loop.

- Engine: opens the OpenGL window, pumps events, runs the scheduled frame
  callback, then asks the scene to render.
- Scene: owns game state and drawing (see `game.scene.GlideScene`).

If the window can't be created the loop never starts and no game state is
touched.
"""

from __future__ import annotations

import time
from typing import Optional, Tuple

import pygame

from neon_glide.config import (
    WIDTH,
    HEIGHT,
    FULLSCREEN,
    RESIZABLE,
    FPS,
    VSYNC,
    TITLE,
)
from neon_glide.core.frame_loop import FrameScheduler


def log_timing(message: str, start_time: float, end_time: float, log: bool = False):
    """Print how long a setup phase took (only when `log` is set)."""
    if log:
        print(f"{message} took {end_time - start_time:.6f} seconds")


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:  # pragma: no cover - visual
    def __init__(self, store=None, *, timing: bool = False):
        pygame.init()
        self.clock = pygame.time.Clock()
        self.scheduler = FrameScheduler()
        self.scene = None

        start_time = time.perf_counter()
        self.canvas = self._open_window()
        log_timing("Opening window", start_time, time.perf_counter(), timing)
        if self.canvas is None:
            return

        # Local imports keep pygame/GL setup order explicit.
        from neon_glide.game.persistence import JsonBestScoreStore
        from neon_glide.game.scene import GlideScene
        from neon_glide.ui.text_renderer import TextRenderer

        start_time = time.perf_counter()
        self.scene = GlideScene(
            store=store if store is not None else JsonBestScoreStore(),
            scheduler=self.scheduler,
        )
        self.scene.attach_canvas(self.canvas, TextRenderer())
        self.scene.resize(*self._window_sizes())
        log_timing("Building scene", start_time, time.perf_counter(), timing)
        print("[Engine] Ready")

    def _open_window(self):
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        elif RESIZABLE:
            flags |= pygame.RESIZABLE
        pygame.display.set_caption(TITLE)
        try:
            try:
                pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
            except (TypeError, pygame.error):
                # Older pygame builds reject the vsync kwarg, or vsync is
                # unavailable on this driver.
                pygame.display.set_mode((WIDTH, HEIGHT), flags)
        except pygame.error as e:
            print(f"[Engine] No drawing surface available: {e}")
            return None

        from neon_glide.render.canvas import GLCanvas

        return GLCanvas()

    def _window_sizes(self) -> Tuple[Optional[Tuple[int, int]], Optional[Tuple[int, int]]]:
        surf = pygame.display.get_surface()
        if surf is None:
            return None, None
        window = pygame.display.get_window_size()
        return window, surf.get_size()

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
                self.scene.resize(*self._window_sizes())
                continue
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def run(self):
        if self.scene is None:
            print("[Engine] Not starting: no window")
            pygame.quit()
            return
        try:
            running = True
            while running:
                dt = self.clock.tick(FPS) / 1000.0
                running = self.handle_events()
                if not running:
                    break
                now_ms = float(pygame.time.get_ticks())
                self.scheduler.run_pending(now_ms)
                self.scene.update(dt)
                self.scene.render(now_ms)
                pygame.display.flip()
        finally:
            self.close()

    def close(self):
        self.scheduler.cancel()
        if self.scene is not None:
            self.scene.close()
            self.scene = None
        pygame.quit()
