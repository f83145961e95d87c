"""Translate pygame input events into session intents.

Handlers never touch simulation state. They produce small intent objects that
the session applies once per frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

import pygame

from neon_glide.render.surface import SurfaceSizer


@dataclass(frozen=True)
class SetTarget:
    x: float  # playfield units


@dataclass(frozen=True)
class ReleaseDrag:
    pass


@dataclass(frozen=True)
class StartRun:
    pass


Intent = Union[SetTarget, ReleaseDrag, StartRun]

_START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


class InputMapper:
    def __init__(self, sizer: SurfaceSizer) -> None:
        self.sizer = sizer

    def _target(self, client_x: float) -> SetTarget:
        return SetTarget(self.sizer.to_playfield_x(client_x))

    def _finger_x(self, event) -> float:
        # Finger coordinates are normalized to the window.
        return float(event.x) * self.sizer.metrics.window_width

    def translate(self, event, *, running: bool) -> List[Intent]:
        etype = event.type
        # SDL mirrors touches as mouse events; handle the finger events only.
        if etype in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            if getattr(event, "touch", False):
                return []

        if etype == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return []
            intents: List[Intent] = [] if running else [StartRun()]
            intents.append(self._target(event.pos[0]))
            return intents

        if etype == pygame.MOUSEMOTION:
            # A mouse hovering without a pressed button is not a drag.
            if not any(event.buttons):
                return []
            return [self._target(event.pos[0])]

        if etype == pygame.MOUSEBUTTONUP:
            return [ReleaseDrag()] if event.button == 1 else []

        if etype == pygame.WINDOWLEAVE:
            return [ReleaseDrag()]

        if etype == pygame.FINGERDOWN:
            intents = [] if running else [StartRun()]
            intents.append(self._target(self._finger_x(event)))
            return intents

        if etype == pygame.FINGERMOTION:
            return [self._target(self._finger_x(event))]

        if etype == pygame.FINGERUP:
            return [ReleaseDrag()]

        if etype == pygame.KEYDOWN and event.key in _START_KEYS and not running:
            return [StartRun()]

        return []


__all__ = ["SetTarget", "ReleaseDrag", "StartRun", "Intent", "InputMapper"]
