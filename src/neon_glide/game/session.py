"""Game session: owns every piece of run state and drives the phase machine.

Phases move Idle -> Running -> Ended -> Running. A session is a plain object;
several can exist side by side (tests do this), nothing is global.

Input arrives as intents via `submit()`. Start requests act immediately since
no frame runs outside Running; steering intents are queued and applied at the
start of the next tick so a frame always sees one consistent target.
"""

from __future__ import annotations

import math
from collections import deque
from enum import Enum
from typing import Deque, List, Optional

import numpy as np

from neon_glide.config import (
    BASE_WIDTH,
    BASE_HEIGHT,
    OBSTACLE_EXIT_MARGIN,
    FLASH_START_MS,
    FLASH_END_MS,
)
from neon_glide.core.frame_loop import FrameScheduler
from neon_glide.game.collision import collides
from neon_glide.game.entities import IdCounter, Obstacle, Player
from neon_glide.game.input import Intent, ReleaseDrag, SetTarget, StartRun
from neon_glide.game.integrator import integrate_obstacles, integrate_player
from neon_glide.game.particles import ParticleBuffer, ParticleEngine
from neon_glide.game.persistence import MemoryBestScoreStore
from neon_glide.game.spawner import Difficulty, Spawner


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class FlashSignal:
    """Short full-screen flash requested on start and on crash."""

    def __init__(self) -> None:
        self.remaining_ms = 0.0

    @property
    def active(self) -> bool:
        return self.remaining_ms > 0.0

    def trigger(self, duration_ms: float) -> None:
        self.remaining_ms = max(self.remaining_ms, float(duration_ms))

    def advance(self, dt: float) -> None:
        if self.remaining_ms > 0.0:
            self.remaining_ms = max(0.0, self.remaining_ms - dt * 1000.0)


class GameSession:
    def __init__(
        self,
        store=None,
        *,
        rng: Optional[np.random.Generator] = None,
        scheduler: Optional[FrameScheduler] = None,
    ) -> None:
        self.store = store if store is not None else MemoryBestScoreStore()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.scheduler = scheduler

        self.player = Player()
        self.target_x = BASE_WIDTH / 2
        self.obstacles: List[Obstacle] = []
        self.effects = ParticleEngine(self.rng)
        self.ids = IdCounter()
        self.spawner = Spawner(self.effects, self.rng, ids=self.ids)
        self.difficulty = Difficulty()
        self.flash = FlashSignal()

        self.phase = GamePhase.IDLE
        self.score = 0
        self.best_score = self.store.get_best_score() or 0
        self.clock_ms = 0.0
        self.last_time: Optional[float] = None

        self._intents: Deque[Intent] = deque()
        self._frame_handle: Optional[int] = None

    # ------------------------------------------------------------------
    @property
    def particles(self) -> ParticleBuffer:
        return self.effects.particles

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    # ------------------------------------------------------------------
    def submit(self, intent: Intent) -> None:
        if isinstance(intent, StartRun):
            if not self.running:
                self.start()
            return
        self._intents.append(intent)

    def _drain_intents(self) -> None:
        while self._intents:
            intent = self._intents.popleft()
            if isinstance(intent, SetTarget):
                self.target_x = float(intent.x)
            elif isinstance(intent, ReleaseDrag):
                self.player.vx = 0.0

    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Put every piece of run state back to its initial value."""
        self.player.reset()
        self.target_x = BASE_WIDTH / 2
        self.obstacles = []
        self.effects.clear()
        self.difficulty.reset()
        self.score = 0
        self.clock_ms = 0.0
        self.last_time = None
        self._intents.clear()

    def start(self) -> None:
        """Start (or restart) a run. Ignored while a run is in progress."""
        if self.running:
            return
        self.reset()
        self.phase = GamePhase.RUNNING
        self.flash.trigger(FLASH_START_MS)
        self._schedule()

    def _schedule(self) -> None:
        if self.scheduler is None:
            return
        self._frame_handle = self.scheduler.request(self._on_frame)

    def _on_frame(self, timestamp_ms: float) -> None:
        self._frame_handle = None
        self.tick(timestamp_ms)
        if self.running:
            self._schedule()

    def stop(self) -> None:
        """Revoke any pending frame; used on teardown."""
        if self.scheduler is not None and self._frame_handle is not None:
            self.scheduler.cancel(self._frame_handle)
        self._frame_handle = None

    # ------------------------------------------------------------------
    def tick(self, timestamp_ms: float) -> None:
        """Advance one frame. `timestamp_ms` is the host clock in ms."""
        if not self.running:
            return
        if self.last_time is None:
            self.last_time = timestamp_ms
        dt = max(0.0, (timestamp_ms - self.last_time) / 1000.0)
        self.last_time = timestamp_ms
        self.clock_ms += dt * 1000.0

        self._drain_intents()
        gain = math.floor(self.difficulty.base_speed * dt / 2)

        integrate_player(self.player, self.target_x, dt)
        integrate_obstacles(self.obstacles, dt)
        bottom = BASE_HEIGHT + OBSTACLE_EXIT_MARGIN
        self.obstacles = [o for o in self.obstacles if o.y < bottom]

        self.spawner.maybe_spawn(
            self.clock_ms, self.difficulty, self.obstacles, running=self.running
        )

        if collides(self.player.rect(), self.obstacles):
            self._crash()
            return

        self.effects.update(dt)
        if gain > 0:
            self.score += gain

    def _crash(self) -> None:
        self.effects.burst_on_impact(self.player.center_x, self.player.center_y)
        self._record_best()
        self.phase = GamePhase.ENDED
        self.flash.trigger(FLASH_END_MS)
        self.stop()

    def _record_best(self) -> None:
        if self.score > self.best_score:
            self.best_score = self.score
            self.store.set_best_score(self.score)


__all__ = ["GamePhase", "FlashSignal", "GameSession"]
