"""Score labels and the idle/crashed prompt drawn over the playfield."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from neon_glide.config import (
    BASE_WIDTH,
    BASE_HEIGHT,
    HUD_TEXT,
    HUD_DIM,
    OVERLAY_SHADE,
)
from neon_glide.game.session import GamePhase


@dataclass(frozen=True)
class Label:
    key: str
    text: str
    x: float
    y: float
    size: float = 14.0
    align: str = "midtop"
    dim: bool = False


def hud_labels(session) -> List[Label]:
    """Labels to show for the session's current phase."""
    labels = [
        Label("score", f"SCORE {session.score}", 20.0, 16.0, 13.0, "topleft"),
        Label("best", f"BEST {session.best_score}", BASE_WIDTH - 20.0, 16.0, 13.0, "topright"),
    ]
    if session.phase is GamePhase.RUNNING:
        return labels

    cx = BASE_WIDTH / 2
    cy = BASE_HEIGHT / 2
    ended = session.phase is GamePhase.ENDED
    labels.append(Label("title", "CRASHED" if ended else "TAP TO LAUNCH", cx, cy - 80.0, 24.0))
    if ended:
        labels.append(Label("final", f"Score: {session.score}", cx, cy - 36.0, 15.0))
        labels.append(Label("final_best", f"Best: {session.best_score}", cx, cy - 16.0, 15.0))
    labels.append(Label("hint", "HOLD & DRAG ANYWHERE", cx, cy + 16.0, 11.0, dim=True))
    labels.append(Label("button", "TRY AGAIN" if ended else "START RUN", cx, cy + 48.0, 16.0))
    return labels


class HUD:  # pragma: no cover - visual
    def __init__(self, text) -> None:
        self.text = text

    def draw(self, canvas, session, scale: float) -> None:
        if session.phase is not GamePhase.RUNNING:
            canvas.fill_rect(0.0, 0.0, BASE_WIDTH, BASE_HEIGHT, OVERLAY_SHADE)
        for label in hud_labels(session):
            self.text.draw(
                canvas,
                label.key,
                label.text,
                label.x,
                label.y,
                size=label.size,
                color=HUD_DIM if label.dim else HUD_TEXT,
                scale=scale,
                align=label.align,
            )
