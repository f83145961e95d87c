"""Text labels as GL textures, drawn in playfield units.

Labels are rendered with pygame.font at the current pixel scale so they stay
crisp when the window is resized, then drawn through the canvas at their
playfield size. Each label key owns one texture slot that is re-uploaded only
when its text, color or scale changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

RGBA = Tuple[int, int, int, int]


@dataclass
class _Slot:
    tex_id: int
    size: Tuple[float, float] = (0.0, 0.0)  # playfield units
    signature: Optional[tuple] = None


class TextRenderer:  # pragma: no cover - visual
    def __init__(self, font_name: Optional[str] = None) -> None:
        self.font_name = font_name
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._slots: Dict[str, _Slot] = {}

    def _font(self, px: int) -> pygame.font.Font:
        font = self._fonts.get(px)
        if font is None:
            font = pygame.font.Font(self.font_name, px)
            self._fonts[px] = font
        return font

    def _upload(self, slot: _Slot, surf: pygame.Surface) -> None:
        from OpenGL.GL import (
            glBindTexture,
            glTexImage2D,
            glTexParameteri,
            GL_TEXTURE_2D,
            GL_TEXTURE_MIN_FILTER,
            GL_TEXTURE_MAG_FILTER,
            GL_LINEAR,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
        )

        data = pygame.image.tostring(surf, "RGBA", True)
        glBindTexture(GL_TEXTURE_2D, slot.tex_id)
        glTexImage2D(
            GL_TEXTURE_2D, 0, GL_RGBA, surf.get_width(), surf.get_height(),
            0, GL_RGBA, GL_UNSIGNED_BYTE, data,
        )
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)

    def _slot(self, key: str) -> _Slot:
        slot = self._slots.get(key)
        if slot is None:
            from OpenGL.GL import glGenTextures

            slot = _Slot(tex_id=int(glGenTextures(1)))
            self._slots[key] = slot
        return slot

    def draw(
        self,
        canvas,
        key: str,
        text: str,
        x: float,
        y: float,
        *,
        size: float = 14.0,
        color: RGBA = (255, 255, 255, 255),
        scale: float = 1.0,
        align: str = "topleft",
    ) -> Tuple[float, float]:
        """Draw `text` at playfield (x, y); returns its playfield (w, h)."""
        slot = self._slot(key)
        px = max(6, int(round(size * scale)))
        signature = (text, color, px)
        if slot.signature != signature:
            surf = self._font(px).render(text, True, color)
            self._upload(slot, surf)
            slot.size = (surf.get_width() / scale, surf.get_height() / scale)
            slot.signature = signature

        w, h = slot.size
        if align == "center":
            x, y = x - w / 2, y - h / 2
        elif align == "topright":
            x = x - w
        elif align == "midtop":
            x = x - w / 2
        canvas.draw_texture(slot.tex_id, x, y, w, h)
        return w, h

    def release(self) -> None:
        if not self._slots:
            return
        from OpenGL.GL import glDeleteTextures
        from OpenGL.error import GLError

        try:
            glDeleteTextures([s.tex_id for s in self._slots.values()])
        except GLError as e:
            # The context may already be gone at shutdown.
            print(f"[Text] Could not release label textures: {e}")
        self._slots.clear()
