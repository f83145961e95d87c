import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from neon_glide.core.frame_loop import FrameScheduler
from neon_glide.game.persistence import MemoryBestScoreStore
from neon_glide.game.session import GameSession


class RecordingCanvas:
    """Canvas stand-in that records every drawing call in order."""

    def __init__(self):
        self.calls = []

    def names(self):
        return [name for name, _, _ in self.calls]

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def fill_rect(self, *args, **kwargs):
        self._record("fill_rect", *args, **kwargs)

    def fill_gradient_rect(self, *args, **kwargs):
        self._record("fill_gradient_rect", *args, **kwargs)

    def fill_round_rect(self, *args, **kwargs):
        self._record("fill_round_rect", *args, **kwargs)

    def stroke_round_rect(self, *args, **kwargs):
        self._record("stroke_round_rect", *args, **kwargs)

    def fill_circle(self, *args, **kwargs):
        self._record("fill_circle", *args, **kwargs)

    def set_glow(self, *args, **kwargs):
        self._record("set_glow", *args, **kwargs)

    def set_alpha(self, *args, **kwargs):
        self._record("set_alpha", *args, **kwargs)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def store():
    return MemoryBestScoreStore()


@pytest.fixture
def session(store, rng):
    return GameSession(store, rng=rng)


@pytest.fixture
def scheduled_session(store, rng):
    return GameSession(store, rng=rng, scheduler=FrameScheduler())
