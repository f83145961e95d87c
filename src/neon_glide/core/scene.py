from typing import Callable, List, Optional, Tuple
from dataclasses import dataclass, field

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    """Base scene: the engine forwards events, frame updates and rendering.

    `updaters` run every frame regardless of game phase (timers, overlays).
    """

    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def resize(
        self,
        window_size: Optional[Tuple[float, float]],
        drawable_size: Optional[Tuple[float, float]] = None,
    ) -> None:
        pass

    def render(self, now_ms: float) -> None:  # pragma: no cover - visual
        pass

    def close(self) -> None:
        pass
