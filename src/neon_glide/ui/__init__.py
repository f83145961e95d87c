from .hud import HUD, Label, hud_labels
from .flash_overlay import FlashOverlay
from .text_renderer import TextRenderer

__all__ = ["HUD", "Label", "hud_labels", "FlashOverlay", "TextRenderer"]
